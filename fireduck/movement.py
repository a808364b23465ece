"""Vectors and the movement controller that drives physics bodies."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar, Iterable, Optional, Union

GRAVITY = -9.8
DAMPING = 0.9


@dataclass(frozen=True)
class Vec2:
    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar[Vec2]

    def __add__(self, other: Union[Vec2, float]) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x + other.x, self.y + other.y)
        return Vec2(self.x + other, self.y + other)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize_or_zero(self) -> Vec2:
        """Unit vector in the same direction, or zero if that is not finite."""
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            return Vec2.ZERO
        return Vec2(self.x / length, self.y / length)


Vec2.ZERO = Vec2(0.0, 0.0)


@dataclass(frozen=True)
class Vec3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def truncate(self) -> Vec2:
        return Vec2(self.x, self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z


@dataclass
class MovementController:
    """Direction and intensity of movement, with maximum speed."""

    direction: Vec2 = Vec2.ZERO
    speed: float = 4.0


@dataclass
class MovingBody:
    """An entity with a controller and, if it takes part in physics, a velocity."""

    controller: MovementController = field(default_factory=MovementController)
    velocity: Optional[Vec2] = None
    is_fireball: bool = False


def movement_to_physics(bodies: Iterable[MovingBody]) -> None:
    """Turn movement intent into velocity and clear the intent."""
    for body in bodies:
        if body.velocity is None:
            continue
        body.velocity = body.velocity + body.controller.direction * body.controller.speed
        body.controller.direction = Vec2.ZERO


def apply_gravity(bodies: Iterable[MovingBody], delta_secs: float) -> None:
    """Add gravity scaled by the frame time to every component of the velocity."""
    for body in bodies:
        if body.velocity is not None:
            body.velocity = body.velocity + GRAVITY * delta_secs


def apply_movement_damping(bodies: Iterable[MovingBody]) -> None:
    """Slow horizontal movement of everything but fireballs."""
    for body in bodies:
        if body.velocity is None or body.is_fireball:
            continue
        body.velocity = Vec2(body.velocity.x * DAMPING, body.velocity.y)