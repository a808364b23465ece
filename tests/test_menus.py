from types import SimpleNamespace

import pytest

from fireduck.asset_tracking import ResourceHandles
from fireduck.menus import (
    MAX_VOLUME,
    MIN_VOLUME,
    VOLUME_LABEL_TAG,
    CreditsAssets,
    credits_menu,
    grid,
    lower_volume,
    main_menu,
    pause_menu,
    play_target,
    raise_volume,
    settings_back_target,
    settings_menu,
    volume_label,
)
from fireduck.states import Menu, Screen, State


def make_world(screen=Screen.TITLE, menu=Menu.MAIN, volume=1.0):
    return SimpleNamespace(
        screen=State(screen),
        menu=State(menu),
        resource_handles=ResourceHandles(),
        global_volume=volume,
        exit_requested=False,
    )


def click(root, text, world):
    root.find(text).action(world)


def test_grid_alternates_justification():
    widget = grid([("a", "b"), ("c", "d")])
    cells = widget.children
    assert [c.text for c in cells] == ["a", "b", "c", "d"]
    assert [c.style["justify_self"] for c in cells] == ["end", "start", "end", "start"]


def test_credits_menu_lists_people_and_goes_back():
    root = credits_menu()
    assert root.scope is Menu.CREDITS
    assert root.find("Joe Shmoe").text == "Joe Shmoe"
    assert root.find("Created by").text == "Created by"
    world = make_world(menu=Menu.CREDITS)
    click(root, "Back", world)
    assert world.menu.pending is Menu.MAIN


def test_credits_assets_music_path():
    assert CreditsAssets().music == "audio/music/Monkeys Spinning Monkeys.ogg"


def test_main_menu_play_goes_to_loading_while_assets_wait():
    world = make_world()
    world.resource_handles.load_resource("handle", lambda h: None)
    click(main_menu(False), "Play", world)
    assert world.screen.pending is Screen.LOADING


def test_main_menu_play_goes_to_gameplay_when_loaded():
    world = make_world()
    click(main_menu(False), "Play", world)
    assert world.screen.pending is Screen.GAMEPLAY


def test_main_menu_opens_settings_and_credits():
    root = main_menu(False)
    world = make_world()
    click(root, "Settings", world)
    assert world.menu.pending is Menu.SETTINGS
    click(root, "Credits", world)
    assert world.menu.pending is Menu.CREDITS


def test_exit_only_outside_web():
    world = make_world()
    click(main_menu(False), "Exit", world)
    assert world.exit_requested is True
    with pytest.raises(KeyError):
        main_menu(True).find("Exit")


def test_pause_menu_actions():
    root = pause_menu()
    assert root.scope is Menu.PAUSE
    world = make_world(screen=Screen.GAMEPLAY, menu=Menu.PAUSE)
    click(root, "Continue", world)
    assert world.menu.pending is Menu.NONE
    click(root, "Quit to title", world)
    assert world.screen.pending is Screen.TITLE
    click(root, "Settings", world)
    assert world.menu.pending is Menu.SETTINGS


def test_volume_limits():
    assert lower_volume(MIN_VOLUME) == MIN_VOLUME
    assert raise_volume(MAX_VOLUME) == MAX_VOLUME
    assert lower_volume(raise_volume(1.0)) == pytest.approx(1.0)


def test_volume_label_format():
    assert volume_label(1.0) == "100%"
    assert volume_label(0.0) == "  0%"


@pytest.mark.parametrize(
    "screen, expected",
    [(Screen.TITLE, Menu.MAIN), (Screen.GAMEPLAY, Menu.PAUSE), (Screen.LOADING, Menu.PAUSE)],
)
def test_settings_back_target(screen, expected):
    assert settings_back_target(screen) is expected


def test_play_target():
    assert play_target(True) is Screen.GAMEPLAY
    assert play_target(False) is Screen.LOADING


def test_settings_menu_volume_buttons_change_volume():
    root = settings_menu()
    world = make_world(volume=1.0)
    click(root, "+", world)
    assert world.global_volume == raise_volume(1.0)
    click(root, "-", world)
    click(root, "-", world)
    assert world.global_volume == lower_volume(lower_volume(raise_volume(1.0)))


def test_settings_menu_has_tagged_volume_label():
    tagged = [w for w in settings_menu() if w.tag == VOLUME_LABEL_TAG]
    assert len(tagged) == 1
    assert tagged[0].text == ""


def test_settings_back_depends_on_screen():
    root = settings_menu()
    title_world = make_world(screen=Screen.TITLE, menu=Menu.SETTINGS)
    click(root, "Back", title_world)
    assert title_world.menu.pending is Menu.MAIN
    game_world = make_world(screen=Screen.GAMEPLAY, menu=Menu.SETTINGS)
    click(root, "Back", game_world)
    assert game_world.menu.pending is Menu.PAUSE