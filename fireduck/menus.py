"""The game's menus: main, credits, pause and settings.

Button actions take a ``world`` holding ``screen`` and ``menu`` states,
``resource_handles``, a mutable ``global_volume`` and ``exit_requested``.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import chain
from typing import Any, Iterable, Sequence, Tuple

from fireduck.states import Menu, Screen
from fireduck.theme import Widget, button, button_small, header, label, ui_root

MIN_VOLUME = 0.0
MAX_VOLUME = 3.0
VOLUME_STEP = 0.1
MENU_Z_INDEX = 2
VOLUME_LABEL_TAG = "GlobalVolumeLabel"

CREATED_BY: Tuple[Tuple[str, str], ...] = (
    ("Joe Shmoe", "Implemented alligator wrestling AI"),
    ("Jane Doe", "Made the music for the alien invasion"),
)

ASSET_CREDITS: Tuple[Tuple[str, str], ...] = (
    ("Ducky sprite", "CC0 by Caz Creates Games"),
    ("Button SFX", "CC0 by Jaszunio15"),
    ("Music", "CC BY 3.0 by Kevin MacLeod"),
    ("Splash logo", "Shown unmodified on the splash screen with permission"),
)


@dataclass(frozen=True)
class CreditsAssets:
    """Music played while the credits are shown."""

    music: str = "audio/music/Monkeys Spinning Monkeys.ogg"


def _menu_root(name: str, menu: Menu, children: Iterable[Widget]) -> Widget:
    root = ui_root(name)
    root.z_index = MENU_Z_INDEX
    root.scope = menu
    root.children = list(children)
    return root


def _grid_node(name: str, children: Iterable[Widget]) -> Widget:
    return Widget(
        name=name,
        style={
            "display": "grid",
            "row_gap": 10.0,
            "column_gap": 30.0,
            "grid_template_columns": [400.0, 400.0],
        },
        children=list(children),
    )


def grid(content: Iterable[Sequence[str]]) -> Widget:
    """Two-column grid of labels, right-aligned on the left, left-aligned on the right."""
    cells = []
    for i, text in enumerate(chain.from_iterable(content)):
        cell = label(text)
        cell.style["justify_self"] = "end" if i % 2 == 0 else "start"
        cells.append(cell)
    return _grid_node("Grid", cells)


def play_target(all_done: bool) -> Screen:
    """Go straight to gameplay if every asset is loaded, else to the loading screen."""
    return Screen.GAMEPLAY if all_done else Screen.LOADING


def settings_back_target(screen: Screen) -> Menu:
    """Where leaving the settings menu returns to."""
    return Menu.MAIN if screen is Screen.TITLE else Menu.PAUSE


def lower_volume(volume: float) -> float:
    return max(volume - VOLUME_STEP, MIN_VOLUME)


def raise_volume(volume: float) -> float:
    return min(volume + VOLUME_STEP, MAX_VOLUME)


def volume_label(volume: float) -> str:
    """The volume as a percentage, padded to three digits."""
    return f"{100.0 * volume:3.0f}%"


def _open_main(world: Any) -> None:
    world.menu.set(Menu.MAIN)


def _open_settings(world: Any) -> None:
    world.menu.set(Menu.SETTINGS)


def _open_credits(world: Any) -> None:
    world.menu.set(Menu.CREDITS)


def _close_menu(world: Any) -> None:
    world.menu.set(Menu.NONE)


def _quit_to_title(world: Any) -> None:
    world.screen.set(Screen.TITLE)


def _enter_loading_or_gameplay(world: Any) -> None:
    world.screen.set(play_target(world.resource_handles.is_all_done()))


def _exit_app(world: Any) -> None:
    world.exit_requested = True


def _lower_global_volume(world: Any) -> None:
    world.global_volume = lower_volume(world.global_volume)


def _raise_global_volume(world: Any) -> None:
    world.global_volume = raise_volume(world.global_volume)


def _leave_settings(world: Any) -> None:
    world.menu.set(settings_back_target(world.screen.current))


def credits_menu() -> Widget:
    return _menu_root(
        "Credits Menu",
        Menu.CREDITS,
        [
            header("Created by"),
            grid(CREATED_BY),
            header("Assets"),
            grid(ASSET_CREDITS),
            button("Back", _open_main),
        ],
    )


def main_menu(web: bool) -> Widget:
    """The title screen menu; there is no Exit button on the web."""
    buttons = [
        button("Play", _enter_loading_or_gameplay),
        button("Settings", _open_settings),
        button("Credits", _open_credits),
    ]
    if not web:
        buttons.append(button("Exit", _exit_app))
    return _menu_root("Main Menu", Menu.MAIN, buttons)


def pause_menu() -> Widget:
    return _menu_root(
        "Pause Menu",
        Menu.PAUSE,
        [
            header("Game paused"),
            button("Continue", _close_menu),
            button("Settings", _open_settings),
            button("Quit to title", _quit_to_title),
        ],
    )


def _global_volume_widget() -> Widget:
    current = label("")
    current.tag = VOLUME_LABEL_TAG
    return Widget(
        name="Global Volume Widget",
        style={"justify_self": "start"},
        children=[
            button_small("-", _lower_global_volume),
            Widget(
                name="Current Volume",
                style={"padding_horizontal": 10.0, "justify_content": "center"},
                children=[current],
            ),
            button_small("+", _raise_global_volume),
        ],
    )


def settings_menu() -> Widget:
    volume_name = label("Master Volume")
    volume_name.style["justify_self"] = "end"
    settings_grid = _grid_node("Settings Grid", [volume_name, _global_volume_widget()])
    return _menu_root(
        "Settings Menu",
        Menu.SETTINGS,
        [header("Settings"), settings_grid, button("Back", _leave_settings)],
    )