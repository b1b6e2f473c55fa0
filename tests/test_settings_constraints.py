import pytest

from bladepm.backlight import BRIGHTNESS_ON_AC, BRIGHTNESS_ON_BATTERY
from bladepm.settings_constraints import (
    BRIGHTNESS_DISABLED,
    ON_AC_DPMS_SLEEP,
    ON_BATT_DPMS_OFF,
    ON_BATT_DPMS_SLEEP,
    ON_BATTERY_BLANK,
    DisplayTimeouts,
    logind_handle_lid_switch,
)


def battery(**kwargs):
    values = dict(blank=1, sleep=5, off=10, brightness=120)
    values.update(kwargs)
    return DisplayTimeouts(on_battery=True, **values)


def ac(**kwargs):
    values = dict(blank=3, sleep=10, off=15, brightness=BRIGHTNESS_DISABLED)
    values.update(kwargs)
    return DisplayTimeouts(on_battery=False, **values)


def test_sleep_past_off_pushes_off():
    t = battery()
    t.set_sleep(12)
    assert t.sleep == 12
    assert t.off == t.sleep + 1
    assert t.config[ON_BATT_DPMS_SLEEP] == 12
    assert t.config[ON_BATT_DPMS_OFF] == t.off


def test_sleep_below_blank_pulls_blank():
    t = battery(blank=4, sleep=6, off=10)
    t.set_sleep(3)
    assert t.blank == t.sleep - 1
    assert t.config[ON_BATTERY_BLANK] == t.blank


def test_off_below_sleep_pulls_sleep_and_blank():
    t = battery(blank=4, sleep=6, off=10)
    t.set_off(5)
    assert t.off == 5
    assert t.blank < t.sleep < t.off


def test_blank_past_sleep_pushes_sleep_and_off():
    t = battery(brightness=BRIGHTNESS_DISABLED)
    t.set_blank(10)
    assert t.blank == 10
    assert t.blank < t.sleep < t.off


def test_blank_with_sleep_never_leaves_sleep():
    t = battery(sleep=0, off=0)
    t.set_blank(20)
    assert (t.sleep, t.off) == (0, 0)


def test_sleep_before_dimming_disables_dimming():
    t = battery(brightness=120)
    t.set_sleep(2)
    assert t.brightness == BRIGHTNESS_DISABLED
    assert t.config[BRIGHTNESS_ON_BATTERY] == BRIGHTNESS_DISABLED


def test_without_lcd_brightness_dimming_is_kept():
    t = battery(brightness=120, lcd_brightness=False)
    t.set_sleep(2)
    assert t.brightness == 120


def test_dimming_after_sleep_pushes_sleep():
    t = ac(sleep=2, off=15)
    t.set_brightness(300)
    assert t.sleep * 60 > t.brightness
    assert t.sleep < t.off
    assert t.config[BRIGHTNESS_ON_AC] == 300


def test_disabled_dimming_leaves_sleep():
    t = ac(sleep=2, brightness=120)
    t.set_brightness(BRIGHTNESS_DISABLED)
    assert t.sleep == 2


def test_ac_sleep_over_limit_is_not_stored():
    t = ac()
    t.set_sleep(61)
    assert t.sleep == 61
    assert t.off == 15
    assert ON_AC_DPMS_SLEEP not in t.config


def test_battery_sleep_over_limit_is_stored():
    t = battery()
    t.set_sleep(61)
    assert t.config[ON_BATT_DPMS_SLEEP] == 61
    assert t.off > t.sleep


def test_sleep_zero_clamps_blank_to_zero():
    t = battery(blank=3, sleep=5)
    t.set_sleep(0)
    assert t.blank == 0


def test_unchanged_value_writes_nothing():
    t = battery()
    t.set_sleep(5)
    assert t.config == {}


@pytest.mark.parametrize(
    "lock, on_ac, on_battery, expected",
    [
        (True, 1, 3, True),
        (True, 3, 1, True),
        (True, 0, 3, False),
        (False, 1, 1, False),
    ],
)
def test_logind_handle_lid_switch(lock, on_ac, on_battery, expected):
    assert logind_handle_lid_switch(lock, on_ac, on_battery) is expected