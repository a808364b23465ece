"""Screen contents and rules: splash, loading, gameplay pausing and title."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Tuple

from fireduck.animation import Timer, TimerMode
from fireduck.states import Menu, Screen
from fireduck.theme import Color, Widget, label, ui_root

SPLASH_BACKGROUND_COLOR = Color(0.157, 0.157, 0.157)
SPLASH_DURATION_SECS = 1.8
SPLASH_FADE_DURATION_SECS = 0.6
SPLASH_IMAGE = "images/splash.png"

PAUSE_OVERLAY_COLOR = Color(0.0, 0.0, 0.0, 0.8)
PAUSE_OVERLAY_Z_INDEX = 1
PAUSED = True
"""Scope of things that exist only while the game is paused."""

KEY_ESCAPE = "escape"
KEY_P = "p"
PAUSE_KEYS = frozenset({KEY_P, KEY_ESCAPE})


@dataclass
class ImageFadeInOut:
    """Fades an image in, holds it, then fades it out over ``total_duration``."""

    total_duration: float = SPLASH_DURATION_SECS
    fade_duration: float = SPLASH_FADE_DURATION_SECS
    t: float = 0.0

    def alpha(self) -> float:
        """Opacity on a trapezoid: rising, flat at 1.0, then falling."""
        t = min(max(self.t / self.total_duration, 0.0), 1.0)
        fade = self.fade_duration / self.total_duration
        return min((1.0 - abs(2.0 * t - 1.0)) / fade, 1.0)

    def tick(self, delta: float) -> None:
        self.t += delta


def _splash_timer() -> Timer:
    return Timer.from_seconds(SPLASH_DURATION_SECS, TimerMode.ONCE)


@dataclass
class SplashTimer:
    """How long the splash screen stays before moving on to the title."""

    timer: Timer = field(default_factory=_splash_timer)

    def tick(self, delta: float) -> bool:
        """Advance the timer; True if it ran out during this tick."""
        self.timer.tick(delta)
        return self.timer.just_finished()


class GameplayAction(enum.Enum):
    """What a key press does during gameplay."""

    PAUSE = "pause"
    CLOSE_MENU = "close_menu"


def splash_screen() -> Tuple[Widget, ImageFadeInOut]:
    """The splash screen root and the fade driving its image."""
    fade = ImageFadeInOut()
    image = Widget(
        name="Splash image",
        color=Color(1.0, 1.0, 1.0, 1.0),
        style={
            "margin": "auto",
            "width": "70%",
            "image": SPLASH_IMAGE,
            "sampler": "linear",
        },
    )
    root = ui_root("Splash Screen")
    root.background = SPLASH_BACKGROUND_COLOR
    root.scope = Screen.SPLASH
    root.children = [image]
    return root, fade


def loading_screen() -> Widget:
    root = ui_root("Loading Screen")
    root.scope = Screen.LOADING
    root.children = [label("Loading...")]
    return root


def pause_overlay() -> Widget:
    """A dark translucent layer over the game while it is paused."""
    return Widget(
        name="Pause Overlay",
        style={"width": "100%", "height": "100%"},
        z_index=PAUSE_OVERLAY_Z_INDEX,
        background=PAUSE_OVERLAY_COLOR,
        scope=PAUSED,
    )


def can_enter_gameplay(screen: Screen, all_loaded: bool, ldtk_ready: bool) -> bool:
    """Whether the loading screen may give way to gameplay."""
    return screen is Screen.LOADING and all_loaded and ldtk_ready


def gameplay_key_action(screen: Screen, menu: Menu, key: str) -> Optional[GameplayAction]:
    """The effect of ``key`` on the gameplay screen, or None."""
    if screen is not Screen.GAMEPLAY:
        return None
    if menu is Menu.NONE:
        return GameplayAction.PAUSE if key in PAUSE_KEYS else None
    return GameplayAction.CLOSE_MENU if key == KEY_P else None