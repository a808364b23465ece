"""Fireballs, their cooldown, and the explosions they leave behind."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from fireduck.animation import ExplosionAnimation, Timer, TimerMode
from fireduck.movement import MovementController, Vec3
from fireduck.player import CharacterController, FireballAttack

FIREBALL_IMAGE = "images/fireball.png"
EXPLOSION_IMAGE = "images/explosion.png"
FIREBALL_LIFETIME = 2.0
FIREBALL_SPEED = 900.0
FIREBALL_RADIUS = 8.0
FIREBALL_MASS = 3000.0
SPAWN_OFFSET = 24.0
COOLDOWN_SECONDS = 1.0


def _lifetime() -> Timer:
    return Timer.from_seconds(FIREBALL_LIFETIME, TimerMode.ONCE)


@dataclass
class Fireball:
    """A flying fireball with a limited lifetime."""

    position: Vec3
    controller: MovementController
    flip_x: bool = False
    lifetime: Timer = field(default_factory=_lifetime)
    radius: float = FIREBALL_RADIUS
    mass: float = FIREBALL_MASS
    image: str = FIREBALL_IMAGE
    name: str = "Fireball"


@dataclass
class FireballCooldown:
    """Time that must pass between two fireballs."""

    timer: Timer = field(default_factory=Timer)

    @classmethod
    def new(cls, duration: float) -> FireballCooldown:
        return cls(Timer.from_seconds(duration, TimerMode.ONCE))


@dataclass
class Explosion:
    """An explosion sprite playing its one-shot animation."""

    FRAME_SIZE = 96
    COLUMNS = 12
    ROWS = 1

    position: Vec3
    animation: ExplosionAnimation = field(default_factory=ExplosionAnimation)
    image: str = EXPLOSION_IMAGE
    name: str = "Explosion"

    @property
    def atlas_index(self) -> int:
        return self.animation.atlas_index()


def update_cooldowns(cooldown: FireballCooldown, delta: float) -> None:
    cooldown.timer.tick(delta)


def process_fireball_actions(
    position: Vec3, controller: CharacterController, cooldown: FireballCooldown
) -> Optional[Fireball]:
    """Launch a fireball for the next queued attack and restart the cooldown."""
    action = controller.pop_action()
    if not isinstance(action, FireballAttack):
        return None
    direction = action.direction
    spawn = position + Vec3(
        direction.x * SPAWN_OFFSET, direction.y * SPAWN_OFFSET, 1.0
    )
    fireball = Fireball(
        position=spawn,
        controller=MovementController(direction=direction, speed=FIREBALL_SPEED),
        flip_x=direction.x < 0.0,
    )
    cooldown.timer.reset()
    return fireball


def update_fireballs(fireballs: Iterable[Fireball], delta: float) -> List[Fireball]:
    """Age every fireball and return those whose lifetime has not run out."""
    alive = []
    for fireball in fireballs:
        fireball.lifetime.tick(delta)
        if not fireball.lifetime.finished():
            alive.append(fireball)
    return alive


def explosion_at(position: Vec3) -> Explosion:
    return Explosion(position=position)