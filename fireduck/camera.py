"""Camera that frames the current level and follows the player."""

from __future__ import annotations

import math
from dataclasses import dataclass

from fireduck.movement import Vec2, Vec3

ASPECT_RATIO = 16.0 / 9.0


@dataclass(frozen=True)
class LevelInfo:
    """Pixel size of a level and where it sits in the world."""

    px_wid: int
    px_hei: int
    translation: Vec3 = Vec3()


@dataclass(frozen=True)
class CameraView:
    """A fixed-size orthographic view and the camera position."""

    width: float
    height: float
    x: float
    y: float
    viewport_origin: Vec2 = Vec2.ZERO


def _round(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _clamp(value: float, low: float, high: float) -> float:
    if low > high:
        raise ValueError(f"invalid clamp range: {low} > {high}")
    return max(low, min(high, value))


def snap_camera(player_translation: Vec3, level: LevelInfo) -> CameraView:
    """Fit the view to the level and scroll along its longer axis with the player."""
    level_width = float(level.px_wid)
    level_height = float(level.px_hei)
    offset = level.translation

    if level_width / level_height > ASPECT_RATIO:
        height = _round(level_height / 9.0) * 9.0
        width = height * ASPECT_RATIO
        x = _clamp(player_translation.x - offset.x - width / 2.0, 0.0, level_width - width)
        y = 0.0
    else:
        width = _round(level_width / 16.0) * 16.0
        height = width / ASPECT_RATIO
        y = _clamp(
            player_translation.y - offset.y - height / 2.0, 0.0, level_height - height
        )
        x = 0.0

    return CameraView(width, height, x + offset.x, y + offset.y)