"""Audio categories and playback settings for music and sound effects."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Iterable


class Category(enum.Enum):
    """Organisational category of a playing sound."""

    MUSIC = "music"
    SOUND_EFFECT = "sound_effect"


class PlaybackMode(enum.Enum):
    """What happens when a sound reaches its end."""

    ONCE = "once"
    LOOP = "loop"
    DESPAWN = "despawn"
    REMOVE = "remove"


@dataclass(frozen=True)
class PlaybackSettings:
    mode: PlaybackMode = PlaybackMode.ONCE
    volume: float = 1.0


@dataclass
class AudioInstance:
    """A sound being played, with its sink volume."""

    handle: Any
    settings: PlaybackSettings
    category: Category
    sink_volume: float = field(default=1.0)


def music(handle: Any) -> AudioInstance:
    """A looping music instance."""
    return AudioInstance(handle, PlaybackSettings(PlaybackMode.LOOP), Category.MUSIC)


def sound_effect(handle: Any) -> AudioInstance:
    """A sound effect that is removed once played."""
    return AudioInstance(
        handle, PlaybackSettings(PlaybackMode.DESPAWN), Category.SOUND_EFFECT
    )


def apply_global_volume(global_volume: float, instances: Iterable[AudioInstance]) -> None:
    """Apply the global volume to already-running instances."""
    for instance in instances:
        instance.sink_volume = global_volume * instance.settings.volume