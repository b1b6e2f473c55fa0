import pytest

from bladepm.settings_options import (
    Action,
    Capabilities,
    LidTrigger,
    clamp_critical_level,
    critical_action_options,
    inactivity_timeout_state,
    lid_options,
    power_button_options,
    select_option,
    sleep_button_options,
    sleep_mode_options,
    sleep_mode_tooltip,
)

FULL = Capabilities(
    can_suspend=True, can_hibernate=True, auth_suspend=True,
    auth_hibernate=True, can_shutdown=True,
)
NONE = Capabilities()


def values(options):
    return [option.value for option in options]


def labels(options):
    return [option.label for option in options]


def test_sleep_mode_options_full():
    assert values(sleep_mode_options(FULL)) == [Action.DO_SUSPEND, Action.DO_HIBERNATE]


def test_sleep_mode_options_ignores_authorisation():
    caps = Capabilities(can_suspend=True, can_hibernate=False)
    assert labels(sleep_mode_options(caps)) == ["Suspend"]


def test_sleep_mode_tooltip_none_when_everything_available():
    assert sleep_mode_tooltip(FULL) is None


def test_sleep_mode_tooltip_hibernate_wins():
    assert sleep_mode_tooltip(NONE) == "Hibernate operation not permitted"
    caps = Capabilities(auth_hibernate=True, auth_suspend=True)
    assert sleep_mode_tooltip(caps) == "Hibernate operation not supported"


def test_sleep_mode_tooltip_suspend():
    caps = Capabilities(can_hibernate=True, auth_hibernate=True)
    assert sleep_mode_tooltip(caps) == "Suspend operation not permitted"
    caps = Capabilities(can_hibernate=True, auth_suspend=True)
    assert sleep_mode_tooltip(caps) == "Suspend operation not supported"


def test_inactivity_timeout_state():
    assert inactivity_timeout_state(FULL) == (True, None)
    assert inactivity_timeout_state(NONE) == (
        False, "Hibernate and suspend operations not supported")
    caps = Capabilities(can_suspend=True)
    assert inactivity_timeout_state(caps) == (
        False, "Hibernate and suspend operations not permitted")


def test_critical_action_options_full():
    assert labels(critical_action_options(FULL)) == [
        "Do nothing", "Suspend", "Hibernate", "Shutdown", "Ask"]


def test_critical_action_options_minimal():
    assert values(critical_action_options(NONE)) == [Action.DO_NOTHING, Action.ASK]


def test_critical_action_needs_authorisation():
    caps = Capabilities(can_suspend=True, can_hibernate=True, auth_hibernate=True)
    assert values(critical_action_options(caps)) == [
        Action.DO_NOTHING, Action.DO_HIBERNATE, Action.ASK]


def test_power_button_matches_critical_action():
    assert power_button_options(FULL) == critical_action_options(FULL)


def test_sleep_button_has_no_shutdown():
    assert labels(sleep_button_options(FULL)) == ["Do nothing", "Suspend", "Hibernate", "Ask"]
    assert Action.DO_SHUTDOWN not in values(sleep_button_options(FULL))


def test_lid_options():
    assert labels(lid_options(FULL)) == [
        "Switch off display", "Suspend", "Hibernate", "Lock screen"]
    assert values(lid_options(NONE)) == [LidTrigger.NOTHING, LidTrigger.LOCK_SCREEN]


def test_select_option_finds_value():
    options = critical_action_options(FULL)
    for index, option in enumerate(options):
        assert select_option(options, option.value) == index


def test_select_option_missing_value():
    options = critical_action_options(NONE)
    assert select_option(options, Action.DO_SHUTDOWN) is None
    assert select_option([], Action.DO_NOTHING) is None


@pytest.mark.parametrize("level", [1, 5, 20])
def test_clamp_critical_level_in_range(level):
    assert clamp_critical_level(level) == level


@pytest.mark.parametrize("level", [0, 21, -3])
def test_clamp_critical_level_out_of_range(level):
    assert clamp_critical_level(level) == 10