"""The player character, its queued actions and its input handling."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional, Tuple

from fireduck.animation import PlayerAnimation
from fireduck.movement import MovementController, Vec2

DEFAULT_FIRE_DIRECTION = Vec2(1.0, 0.0)


@dataclass(frozen=True)
class FireballAttack:
    """Request to launch a fireball in ``direction``."""

    direction: Vec2


ActionType = FireballAttack


@dataclass
class CharacterController:
    """Queue of actions waiting to be carried out by the character."""

    action_queue: deque = field(default_factory=deque)

    def queue_action(self, action: ActionType) -> None:
        """Queue an action to be processed."""
        self.action_queue.append(action)

    def pop_action(self) -> Optional[ActionType]:
        """Remove and return the oldest queued action, or None if there is none."""
        if not self.action_queue:
            return None
        return self.action_queue.popleft()


@dataclass(frozen=True)
class PlayerAssets:
    """Asset paths the player needs: its sprite sheet and step sounds."""

    ducky: str = "images/ducky.png"
    steps: Tuple[str, ...] = (
        "audio/sound_effects/step1.ogg",
        "audio/sound_effects/step2.ogg",
        "audio/sound_effects/step3.ogg",
        "audio/sound_effects/step4.ogg",
    )


@dataclass
class Player:
    """The player entity: controllers, animation and grid position."""

    ATLAS_TILE_SIZE: ClassVar[int] = 32
    ATLAS_COLUMNS: ClassVar[int] = 6
    ATLAS_ROWS: ClassVar[int] = 2
    ATLAS_PADDING: ClassVar[int] = 1

    movement: MovementController = field(default_factory=MovementController)
    character: CharacterController = field(default_factory=CharacterController)
    animation: PlayerAnimation = field(default_factory=PlayerAnimation)
    grid_coords: Tuple[int, int] = (0, 0)
    flip_x: bool = False

    @property
    def atlas_index(self) -> int:
        return self.animation.atlas_index()


def record_directional_input(controller: MovementController, intent: Vec2) -> None:
    """Store the normalised directional intent on the movement controller."""
    controller.direction = intent.normalize_or_zero()


def record_fire_input(
    cooldown: Any, character: CharacterController, movement: MovementController
) -> Optional[FireballAttack]:
    """Queue a fireball if the cooldown has run out; return the queued action."""
    if not cooldown.timer.finished():
        return None
    if movement.direction.length_squared() > 0.0:
        direction = movement.direction.normalize_or_zero()
    else:
        direction = DEFAULT_FIRE_DIRECTION
    action = FireballAttack(direction)
    character.queue_action(action)
    return action