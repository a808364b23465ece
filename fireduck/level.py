"""The main level: its assets, which level is selected, and spawning it."""

from __future__ import annotations

from dataclasses import dataclass

from fireduck.states import Screen


@dataclass(frozen=True)
class LevelAssets:
    """Asset paths for the level music and the level project file."""

    music: str = "audio/music/FireDuck.mp3"
    ldtk_level: str = "levels/level.ldtk"


@dataclass(frozen=True)
class LevelSelection:
    """Selects a level of the project by its index."""

    index: int = 0

    def is_match(self, level_index: int) -> bool:
        return self.index == level_index


@dataclass(frozen=True)
class LevelSpawn:
    """The spawned level world, alive only while on ``screen``."""

    ldtk_handle: str
    name: str = "Level"
    screen: Screen = Screen.GAMEPLAY


def spawn_level(level_assets: LevelAssets) -> LevelSpawn:
    """Spawn the main level from its loaded assets."""
    return LevelSpawn(ldtk_handle=level_assets.ldtk_level)