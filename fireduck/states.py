"""Application states, system ordering and state transitions."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Generic, Optional, Tuple, TypeVar

T = TypeVar("T")


class Screen(enum.Enum):
    """The game's main screens."""

    SPLASH = "splash"
    TITLE = "title"
    LOADING = "loading"
    GAMEPLAY = "gameplay"

    @classmethod
    def default(cls) -> Screen:
        return cls.SPLASH


class Menu(enum.Enum):
    """The game's menus."""

    NONE = "none"
    MAIN = "main"
    CREDITS = "credits"
    SETTINGS = "settings"
    PAUSE = "pause"

    @classmethod
    def default(cls) -> Menu:
        return cls.NONE


class AppSystems(enum.IntEnum):
    """Groups of per-frame work, in the order they run."""

    TICK_TIMERS = 0
    RECORD_INPUT = 1
    UPDATE = 2


@dataclass
class State(Generic[T]):
    """A current state value with an optional queued next value."""

    current: T
    pending: Optional[T] = None

    def set(self, value: T) -> None:
        """Queue a transition; it runs even if ``value`` equals the current state."""
        self.pending = value

    def apply(self) -> Optional[Tuple[T, T]]:
        """Perform the queued transition, returning ``(old, new)`` or None."""
        if self.pending is None:
            return None
        old, self.current, self.pending = self.current, self.pending, None
        return old, self.current