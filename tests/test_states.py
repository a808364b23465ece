from fireduck.states import AppSystems, Menu, Screen, State


def test_defaults():
    assert Screen.default() is Screen.SPLASH
    assert Menu.default() is Menu.NONE


def test_app_systems_order():
    assert AppSystems(AppSystems.UPDATE.value) is AppSystems.UPDATE
    shuffled = [AppSystems.UPDATE, AppSystems.TICK_TIMERS, AppSystems.RECORD_INPUT]
    assert sorted(shuffled) == [
        AppSystems.TICK_TIMERS,
        AppSystems.RECORD_INPUT,
        AppSystems.UPDATE,
    ]


def test_set_then_apply():
    state = State(Screen.SPLASH)
    state.set(Screen.TITLE)
    assert state.current is Screen.SPLASH
    assert state.apply() == (Screen.SPLASH, Screen.TITLE)
    assert state.current is Screen.TITLE
    assert state.pending is None


def test_apply_without_pending():
    state = State(Menu.NONE)
    assert state.apply() is None
    assert state.current is Menu.NONE


def test_identity_transition_runs():
    state = State(Menu.MAIN)
    state.set(Menu.MAIN)
    assert state.apply() == (Menu.MAIN, Menu.MAIN)


def test_bool_state():
    pause = State(False)
    pause.set(True)
    assert pause.apply() == (False, True)
    assert pause.current is True