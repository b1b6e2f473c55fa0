"""Keeps the display blank, sleep, off and dimming timeouts of the settings dialog consistent."""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from dataclasses import dataclass, field
from typing import Any

from bladepm.backlight import ALARM_DISABLED, BRIGHTNESS_ON_AC, BRIGHTNESS_ON_BATTERY

_log = logging.getLogger(__name__)

# Dimming timeout value meaning "never dim".
BRIGHTNESS_DISABLED = ALARM_DISABLED

# On AC power the sleep and off scales are left alone above this many minutes.
AC_DPMS_LIMIT = 60

# Lid action value that suspends the machine.
LID_TRIGGER_SUSPEND = 1

ON_AC_BLANK = "blank-on-ac"
ON_BATTERY_BLANK = "blank-on-battery"
ON_AC_DPMS_SLEEP = "dpms-on-ac-sleep"
ON_AC_DPMS_OFF = "dpms-on-ac-off"
ON_BATT_DPMS_SLEEP = "dpms-on-battery-sleep"
ON_BATT_DPMS_OFF = "dpms-on-battery-off"


@dataclass
class DisplayTimeouts:
    """Display timeouts for one power source.

    ``blank``, ``sleep`` and ``off`` are in minutes, 0 meaning never;
    ``brightness`` is the dimming timeout in seconds. Changing one value
    adjusts the others so that blank < sleep < off and dimming happens
    before the display sleeps. Each adjustment is handled like a change
    made by the user, and values that are persisted go to ``config``.
    """

    on_battery: bool
    blank: int = 0
    sleep: int = 0
    off: int = 0
    brightness: int = BRIGHTNESS_DISABLED
    lcd_brightness: bool = True
    config: MutableMapping[str, Any] = field(default_factory=dict)

    @property
    def _keys(self) -> tuple[str, str, str, str]:
        if self.on_battery:
            return ON_BATTERY_BLANK, ON_BATT_DPMS_SLEEP, ON_BATT_DPMS_OFF, BRIGHTNESS_ON_BATTERY
        return ON_AC_BLANK, ON_AC_DPMS_SLEEP, ON_AC_DPMS_OFF, BRIGHTNESS_ON_AC

    def _assign(self, name: str, value: int) -> bool:
        value = max(0, int(value))
        if getattr(self, name) == value:
            return False
        setattr(self, name, value)
        return True

    def set_blank(self, value: int) -> None:
        """Set the blanking timeout, pushing the sleep and dimming timeouts as needed."""
        if not self._assign("blank", value):
            return
        self.config[self._keys[0]] = self.blank

        if self.sleep != 0 and self.blank >= self.sleep:
            self.set_sleep(self.blank + 1)

        self._disable_dimming_if_after(self.blank)

    def set_sleep(self, value: int) -> None:
        """Set the display sleep timeout, moving the off and blank timeouts around it."""
        if not self._assign("sleep", value):
            return
        if not self.on_battery and (self.off > AC_DPMS_LIMIT or self.sleep > AC_DPMS_LIMIT):
            return

        if self.off != 0 and self.sleep >= self.off:
            self.set_off(self.sleep + 1)

        if self.blank != 0 and self.blank >= self.sleep:
            self.set_blank(self.sleep - 1)

        self._disable_dimming_if_after(self.sleep)
        self.config[self._keys[1]] = self.sleep

    def set_off(self, value: int) -> None:
        """Set the display off timeout, pulling the sleep timeout below it."""
        if not self._assign("off", value):
            return
        if not self.on_battery and (self.off > AC_DPMS_LIMIT or self.sleep > AC_DPMS_LIMIT):
            return

        if self.sleep != 0 and self.off <= self.sleep:
            self.set_sleep(self.off - 1)

        self.config[self._keys[2]] = self.off

    def set_brightness(self, value: int) -> None:
        """Set the dimming timeout, pushing the sleep timeout after it."""
        if not self._assign("brightness", value):
            return

        if (self.brightness != BRIGHTNESS_DISABLED and self.sleep != 0
                and self.sleep * 60 <= self.brightness):
            self.set_sleep(self.brightness // 60 + 1)

        self.config[self._keys[3]] = self.brightness

    def _disable_dimming_if_after(self, minutes: int) -> None:
        if not self.lcd_brightness:
            return
        if minutes * 60 <= self.brightness and self.brightness != BRIGHTNESS_DISABLED:
            _log.debug("Disabling dimming, it would come after the display timeout")
            self.set_brightness(BRIGHTNESS_DISABLED)


def logind_handle_lid_switch(lock_on_suspend: bool, lid_on_ac: int, lid_on_battery: int) -> bool:
    """Return whether logind should handle the lid switch.

    That is the case when the screen is locked on suspend and closing the
    lid suspends the machine on either power source.
    """
    return bool(lock_on_suspend) and (
        int(lid_on_ac) == LID_TRIGGER_SUSPEND or int(lid_on_battery) == LID_TRIGGER_SUSPEND
    )