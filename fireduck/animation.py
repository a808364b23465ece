"""Timers and sprite animation for the player and explosions."""

from __future__ import annotations

import enum
import random
from typing import Any, Optional, Sequence

from fireduck.movement import Vec2

_NANOS = 1_000_000_000


def _to_nanos(seconds: float) -> int:
    return round(seconds * _NANOS)


class TimerMode(enum.Enum):
    ONCE = "once"
    REPEATING = "repeating"


class Timer:
    """Counts elapsed time towards a duration, once or repeatedly."""

    def __init__(self, duration: float = 0.0, mode: TimerMode = TimerMode.ONCE) -> None:
        self.mode = mode
        self._duration = _to_nanos(duration)
        self._elapsed = 0
        self._finished = False
        self._times_finished = 0

    @classmethod
    def from_seconds(cls, seconds: float, mode: TimerMode = TimerMode.ONCE) -> Timer:
        return cls(seconds, mode)

    @property
    def duration(self) -> float:
        return self._duration / _NANOS

    @property
    def elapsed(self) -> float:
        return self._elapsed / _NANOS

    def tick(self, delta: float) -> Timer:
        """Advance the timer by ``delta`` seconds."""
        if self.mode is TimerMode.ONCE and self._finished:
            self._times_finished = 0
            return self
        self._elapsed += _to_nanos(delta)
        self._finished = self._elapsed >= self._duration
        if not self._finished:
            self._times_finished = 0
        elif self.mode is TimerMode.REPEATING:
            if self._duration > 0:
                self._times_finished = self._elapsed // self._duration
                self._elapsed %= self._duration
            else:
                self._times_finished = 1
                self._elapsed = 0
        else:
            self._times_finished = 1
            self._elapsed = self._duration
        return self

    def finished(self) -> bool:
        """Whether the timer has reached its duration (this tick, if repeating)."""
        return self._finished

    def just_finished(self) -> bool:
        """Whether the timer reached its duration during the last tick."""
        return self._times_finished > 0

    def reset(self) -> None:
        self._elapsed = 0
        self._finished = False
        self._times_finished = 0


class PlayerAnimationState(enum.Enum):
    IDLING = "idling"
    WALKING = "walking"


class PlayerAnimation:
    """Player animation frame tracking, tied to the player's texture atlas."""

    IDLE_FRAMES = 2
    IDLE_INTERVAL = 0.5
    WALKING_FRAMES = 6
    WALKING_INTERVAL = 0.05

    def __init__(self, state: PlayerAnimationState = PlayerAnimationState.IDLING) -> None:
        self._start(state)

    def _start(self, state: PlayerAnimationState) -> None:
        interval = (
            self.IDLE_INTERVAL
            if state is PlayerAnimationState.IDLING
            else self.WALKING_INTERVAL
        )
        self.timer = Timer(interval, TimerMode.REPEATING)
        self.frame = 0
        self.state = state

    @classmethod
    def idling(cls) -> PlayerAnimation:
        return cls(PlayerAnimationState.IDLING)

    @classmethod
    def walking(cls) -> PlayerAnimation:
        return cls(PlayerAnimationState.WALKING)

    def update_timer(self, delta: float) -> None:
        self.timer.tick(delta)
        if not self.timer.finished():
            return
        frames = (
            self.IDLE_FRAMES
            if self.state is PlayerAnimationState.IDLING
            else self.WALKING_FRAMES
        )
        self.frame = (self.frame + 1) % frames

    def update_state(self, state: PlayerAnimationState) -> None:
        """Restart the animation if the state changes."""
        if self.state is not state:
            self._start(state)

    def changed(self) -> bool:
        """Whether the frame advanced this tick."""
        return self.timer.finished()

    def atlas_index(self) -> int:
        if self.state is PlayerAnimationState.IDLING:
            return self.frame
        return self.WALKING_FRAMES + self.frame


class ExplosionAnimation:
    """A one-shot explosion animation that stops on its last frame."""

    EXPLOSION_FRAMES = 12
    EXPLOSION_INTERVAL = 0.05

    def __init__(self) -> None:
        self.timer = Timer(self.EXPLOSION_INTERVAL, TimerMode.REPEATING)
        self.frame = 0
        self.total_frames = self.EXPLOSION_FRAMES
        self._finished = False

    def update_timer(self, delta: float) -> None:
        self.timer.tick(delta)
        if not self.timer.finished():
            return
        self.frame += 1
        if self.frame >= self.total_frames:
            self._finished = True
            self.frame = self.total_frames - 1

    def is_finished(self) -> bool:
        return self._finished

    def atlas_index(self) -> int:
        return self.frame

    def changed(self) -> bool:
        return self.timer.finished()


def update_animation_movement(
    direction: Vec2, animation: PlayerAnimation, flip_x: bool
) -> bool:
    """Set the animation state from movement and return the new sprite flip."""
    if direction.x != 0.0:
        flip_x = direction.x < 0.0
    state = (
        PlayerAnimationState.IDLING
        if direction == Vec2.ZERO
        else PlayerAnimationState.WALKING
    )
    animation.update_state(state)
    return flip_x


def step_sound(
    animation: PlayerAnimation,
    steps: Sequence[Any],
    rng: Optional[random.Random] = None,
) -> Optional[Any]:
    """A random step sound if a walking step frame was just reached, else None."""
    if (
        animation.state is PlayerAnimationState.WALKING
        and animation.changed()
        and animation.frame in (2, 5)
    ):
        return (rng or random).choice(steps)
    return None