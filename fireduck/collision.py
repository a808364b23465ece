"""Colliders, ground detection and explosion shockwaves."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Collection, Iterable, List, Optional, Sequence, Tuple

from fireduck.balistics import Explosion, Fireball, explosion_at
from fireduck.movement import Vec2, Vec3

log = logging.getLogger(__name__)

SHOCKWAVE_RADIUS = 200.0
SHOCKWAVE_RADIUS_SQUARED = SHOCKWAVE_RADIUS * SHOCKWAVE_RADIUS
SHOCKWAVE_BASE_IMPULSE = 75000.0
MIN_DISTANCE_SQUARED = 0.01
TILE_SIZE = 16.0


class RigidBodyKind(enum.Enum):
    DYNAMIC = "dynamic"
    STATIC = "static"
    KINEMATIC = "kinematic"


@dataclass(frozen=True)
class ShockwaveHit:
    """Marks a body struck by a shockwave, with the impulse it received."""

    impulse: Vec2


@dataclass
class Body:
    """A physics body in the world."""

    entity: Any
    position: Vec3
    kind: RigidBodyKind = RigidBodyKind.DYNAMIC
    external_impulse: Vec2 = Vec2.ZERO
    shockwave_hit: Optional[ShockwaveHit] = None


@dataclass(frozen=True)
class ShapeCaster:
    """A rectangle swept from ``origin`` along ``direction``."""

    width: float
    height: float
    origin: Vec2
    rotation: float
    direction: Vec2
    max_distance: float


@dataclass(frozen=True)
class CollisionBundle:
    """A rectangular collider on a sleeping dynamic body."""

    width: float = TILE_SIZE
    height: float = TILE_SIZE
    rigid_body: RigidBodyKind = RigidBodyKind.DYNAMIC
    sleeping: bool = True

    @classmethod
    def from_entity_instance(cls, width: float, height: float) -> CollisionBundle:
        log.info("Block size from LDtk entity: %s x %s", width, height)
        return cls(width=float(width), height=float(height))


@dataclass(frozen=True)
class WallBundle:
    """A static wall tile."""

    width: float = TILE_SIZE
    height: float = TILE_SIZE
    rigid_body: RigidBodyKind = RigidBodyKind.STATIC


@dataclass
class GroundDetection:
    on_ground: bool = False

    def update(self, hits: Collection[Any]) -> None:
        """The entity is on the ground whenever its sensor hits something."""
        self.on_ground = len(hits) > 0


def ground_sensor() -> ShapeCaster:
    """A thin downward caster just below a tile-sized entity."""
    return ShapeCaster(
        width=TILE_SIZE * 0.8,
        height=2.0,
        origin=Vec2(0.0, -10.0),
        rotation=0.0,
        direction=Vec2(0.0, -1.0),
        max_distance=5.0,
    )


def apply_explosion_shockwave(origin: Vec3, bodies: Iterable[Body]) -> List[Body]:
    """Push dynamic bodies within range away from ``origin``; return those hit."""
    log.info("Starting shockwave application at position: %s", origin)
    hit = []
    for body in bodies:
        if body.kind is not RigidBodyKind.DYNAMIC:
            continue
        offset = body.position - origin
        distance_squared = offset.length_squared()
        if not MIN_DISTANCE_SQUARED < distance_squared < SHOCKWAVE_RADIUS_SQUARED:
            continue
        distance = distance_squared ** 0.5
        direction = (offset.truncate() / distance).normalize_or_zero()
        if direction == Vec2.ZERO:
            continue
        falloff = (1.0 - distance / SHOCKWAVE_RADIUS) ** 2
        magnitude = SHOCKWAVE_BASE_IMPULSE * falloff
        if magnitude <= 0.0:
            continue
        impulse = direction * magnitude
        body.external_impulse = impulse
        body.shockwave_hit = ShockwaveHit(impulse)
        hit.append(body)
    return hit


def fireball_collisions(
    fireballs: Sequence[Fireball],
    colliding: Sequence[Collection[Any]],
    bodies: Iterable[Body],
) -> Tuple[List[Explosion], List[Fireball]]:
    """Explode every fireball that touches something.

    ``colliding`` holds, for each fireball in order, the entities it touches.
    Returns the new explosions and the fireballs still flying.
    """
    bodies = list(bodies)
    explosions = []
    remaining = []
    for fireball, touching in zip(fireballs, colliding, strict=True):
        if not touching:
            remaining.append(fireball)
            continue
        log.info("Fireball has %d colliding entities. Creating explosion.", len(touching))
        explosions.append(explosion_at(fireball.position))
        apply_explosion_shockwave(fireball.position, bodies)
    return explosions, remaining