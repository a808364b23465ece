"""Castle blocks, the mortar joints that bind them and how they break."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, MutableMapping, Sequence, Tuple

from fireduck.collision import ShockwaveHit
from fireduck.movement import Vec2

log = logging.getLogger(__name__)

GRID_SIZE = 16
BLOCK_MASS_PER_AREA = 100.0
BREAKING_IMPULSE_THRESHOLD = 30000.0
JOINT_COMPLIANCE = 0.00005
JOINT_DAMPING = 0.1
DEFAULT_SECTION = "default"

Rgb = Tuple[float, float, float]

SECTION_COLORS: Dict[str, Rgb] = {
    "Section1": (0.8, 0.2, 0.2),
    "Section2": (0.2, 0.8, 0.2),
    "Section3": (0.2, 0.2, 0.8),
}
BLACK: Rgb = (0.0, 0.0, 0.0)


@dataclass(frozen=True)
class GridCoords:
    """A cell on the level grid; y grows upwards."""

    x: int = 0
    y: int = 0

    def __add__(self, other: GridCoords) -> GridCoords:
        return GridCoords(self.x + other.x, self.y + other.y)


@dataclass(frozen=True)
class EntityInstance:
    """An entity placed in the level editor, with its custom fields."""

    width: int
    height: int
    fields: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class BlockSize:
    """Size of a castle block in pixels."""

    width: float = 16.0
    height: float = 16.0


@dataclass(frozen=True)
class BlockComposite:
    """One grid cell's view of the block that covers it."""

    entity: Any
    block_size: BlockSize
    center_point: Vec2


@dataclass(frozen=True)
class FixedJoint:
    """A stiff joint holding two blocks together at local anchors."""

    entity1: Any
    entity2: Any
    local_anchor_1: Vec2 = Vec2.ZERO
    local_anchor_2: Vec2 = Vec2.ZERO
    compliance: float = JOINT_COMPLIANCE
    linear_velocity_damping: float = JOINT_DAMPING
    angular_velocity_damping: float = JOINT_DAMPING


def _clamp(value: float, low: float, high: float) -> float:
    if low > high:
        raise ValueError(f"invalid clamp range: {low} > {high}")
    return max(low, min(high, value))


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def block_size_from_entity(entity_instance: EntityInstance) -> BlockSize:
    """The block size given by the entity's width and height."""
    width = float(entity_instance.width)
    height = float(entity_instance.height)
    log.info("Block size from LDtk entity: %s x %s", width, height)
    return BlockSize(width, height)


def section_from_entity(entity_instance: EntityInstance) -> str:
    """The entity's ``SectionName`` field, or ``"default"`` if unset."""
    for name, value in entity_instance.fields.items():
        log.info("Found field: %s of type: %r", name, value)
    value = entity_instance.fields.get("SectionName")
    if isinstance(value, (list, tuple)) and value and value[0] is not None:
        return str(value[0])
    return DEFAULT_SECTION


def castle_mass(block_size: BlockSize) -> float:
    """Mass of a block, proportional to its area."""
    return block_size.width * block_size.height * BLOCK_MASS_PER_AREA


def section_color(section: str) -> Rgb:
    """Tint used to show which section a block belongs to."""
    return SECTION_COLORS.get(section, BLACK)


def register_blocks(
    grid: MutableMapping[GridCoords, BlockComposite],
    top_left: GridCoords,
    entity: Any,
    block_size: BlockSize,
) -> None:
    """Record ``entity`` in every grid cell its block covers."""
    width_cells = _trunc_div(int(block_size.width), GRID_SIZE)
    depth_cells = _trunc_div(int(block_size.height), GRID_SIZE)
    end_x = top_left.x + width_cells
    end_y = top_left.y - depth_cells
    center = Vec2(
        top_left.x + width_cells / 2.0,
        top_left.y - depth_cells / 2.0,
    )
    composite = BlockComposite(entity, block_size, center)
    for x in range(top_left.x, end_x):
        for y in range(end_y + 1, top_left.y + 1):
            log.info("%r inserted at %s", composite, (x, y))
            grid[GridCoords(x, y)] = composite


def calculate_anchor(bk1: BlockComposite, bk2: BlockComposite) -> Vec2:
    """Local anchor on ``bk1`` facing ``bk2``, kept within ``bk1``'s extent."""
    other = (bk2.center_point - bk1.center_point) * float(GRID_SIZE)
    x_max = bk1.block_size.width / 2.0
    y_max = bk1.block_size.height / 2.0

    if bk1.block_size.width > bk2.block_size.width:
        x = _clamp(other.x, -x_max, y_max)
        y = _clamp(other.y, -y_max, y_max)
        if abs(x) == x_max and abs(y) == y_max:
            if x > y:
                y = 0.0
            else:
                x = 0.0
        return Vec2(x, y)

    x, y = other.x, other.y
    if abs(x) > abs(y):
        y = 0.0
    else:
        x = 0.0
    return Vec2(_clamp(x, -x_max, x_max), _clamp(y, -y_max, y_max))


def create_joint(bk1: BlockComposite, bk2: BlockComposite) -> FixedJoint:
    """A mortar joint between two neighbouring blocks."""
    anchor1 = calculate_anchor(bk1, bk2)
    anchor2 = calculate_anchor(bk2, bk1)
    log.info("Anchor point 1 %s", anchor1)
    log.info("Anchor point 2 %s", anchor2)
    return FixedJoint(bk1.entity, bk2.entity, anchor1, anchor2)


_NEIGHBOUR_DIRECTIONS = (GridCoords(1, 0), GridCoords(0, -1))


def create_mortar_joints(
    blocks: Iterable[Tuple[Any, GridCoords, BlockSize]],
) -> List[FixedJoint]:
    """Join every pair of blocks touching to the right of or below each other.

    ``blocks`` holds ``(entity, top_left, block_size)`` for each castle block.
    One joint is made for every touching cell pair of different blocks.
    """
    grid: Dict[GridCoords, BlockComposite] = {}
    for entity, top_left, block_size in blocks:
        register_blocks(grid, top_left, entity, block_size)
    if not grid:
        log.info("No castle blocks found to create mortar joints.")
        return []

    log.info("Creating mortar joints for castle blocks...")
    joints = []
    for coords, composite in grid.items():
        for direction in _NEIGHBOUR_DIRECTIONS:
            candidate = grid.get(coords + direction)
            if candidate is None or candidate.entity == composite.entity:
                continue
            joints.append(create_joint(composite, candidate))
    return joints


def handle_castle_impulse(
    hit: ShockwaveHit, joints: Sequence[FixedJoint]
) -> List[FixedJoint]:
    """The joints a shockwave breaks: all of them if its impulse is strong enough."""
    magnitude = hit.impulse.length()
    log.info("Castle received impulse, magnitude: %s", magnitude)
    if magnitude <= BREAKING_IMPULSE_THRESHOLD:
        return []
    log.info("Castle received a breaking impulse of %s", magnitude)
    return list(joints)