"""Screen backlight control: idle dimming, brightness keys and the kernel brightness switch."""

from __future__ import annotations

import abc
import enum
import logging
from collections.abc import Callable, MutableMapping
from typing import Any

_log = logging.getLogger(__name__)

# Configuration property names.
BRIGHTNESS_LEVEL_ON_AC = "brightness-level-on-ac"
BRIGHTNESS_LEVEL_ON_BATTERY = "brightness-level-on-battery"
BRIGHTNESS_ON_AC = "brightness-on-ac"
BRIGHTNESS_ON_BATTERY = "brightness-on-battery"
HANDLE_BRIGHTNESS_KEYS = "handle-brightness-keys"
SHOW_BRIGHTNESS_POPUP = "show-brightness-popup"
BRIGHTNESS_SWITCH = "brightness-switch"
BRIGHTNESS_SWITCH_SAVE = "brightness-switch-restore-on-exit"

# Idle timeout value meaning "never dim".
ALARM_DISABLED = 9

_DEFAULTS: dict[str, Any] = {
    BRIGHTNESS_LEVEL_ON_AC: 80,
    BRIGHTNESS_LEVEL_ON_BATTERY: 20,
    BRIGHTNESS_ON_AC: 9,
    BRIGHTNESS_ON_BATTERY: 120,
    HANDLE_BRIGHTNESS_KEYS: True,
    SHOW_BRIGHTNESS_POPUP: True,
}

SWITCH_MIN = -1
SWITCH_MAX = 1


class BrightnessDevice(abc.ABC):
    """Access to the hardware brightness control."""

    @abc.abstractmethod
    def setup(self) -> bool:
        """Probe the hardware; return True if a backlight can be controlled."""

    @abc.abstractmethod
    def get_level(self) -> int | None:
        """Return the current level, or None if it cannot be read."""

    @abc.abstractmethod
    def set_level(self, level: int) -> bool:
        """Set the level; return True on success."""

    @abc.abstractmethod
    def up(self) -> int | None:
        """Raise the level one step and return the new level, or None on failure."""

    @abc.abstractmethod
    def down(self) -> int | None:
        """Lower the level one step and return the new level, or None on failure."""

    @abc.abstractmethod
    def get_max_level(self) -> int:
        """Return the highest supported level."""

    @abc.abstractmethod
    def get_switch(self) -> int | None:
        """Return the kernel brightness switch value, or None if unavailable."""

    @abc.abstractmethod
    def set_switch(self, value: int) -> bool:
        """Set the kernel brightness switch; return True on success."""


class ButtonKey(enum.Enum):
    """Hardware buttons reported to the backlight."""

    POWER = enum.auto()
    SLEEP = enum.auto()
    HIBERNATE = enum.auto()
    MON_BRIGHTNESS_UP = enum.auto()
    MON_BRIGHTNESS_DOWN = enum.auto()


class AlarmId(enum.Enum):
    """Idle alarms used for dimming."""

    BRIGHTNESS_ON_AC = enum.auto()
    BRIGHTNESS_ON_BATTERY = enum.auto()


class Backlight:
    """Dims the screen when idle and handles brightness keys."""

    def __init__(
        self,
        brightness: BrightnessDevice,
        config: MutableMapping[str, Any] | None = None,
        on_battery: bool = False,
        presentation_mode: Callable[[], bool] | None = None,
    ) -> None:
        self.config: MutableMapping[str, Any] = {} if config is None else config
        self.on_battery = on_battery
        self._presentation_mode = presentation_mode or (lambda: False)
        self.dimmed = False
        self.block = False
        self.last_level = 0
        self.max_level = 0
        self.brightness_switch = -1
        self.brightness_switch_save = -1
        self._switch_initialized = False
        self._closed = False

        self.has_hw = brightness.setup()
        self.brightness: BrightnessDevice | None = brightness if self.has_hw else None
        if self.brightness is None:
            return

        self.max_level = self.brightness.get_max_level()

        current = self.brightness.get_switch()
        if current is not None:
            self.set_brightness_switch(current)
        self._switch_initialized = True

        saved = int(self.config.get(BRIGHTNESS_SWITCH_SAVE, -1))
        if saved == -1:
            self.config[BRIGHTNESS_SWITCH_SAVE] = self.brightness_switch
            self.brightness_switch_save = self.brightness_switch
        else:
            self.brightness_switch_save = saved
            _log.warning(
                "It seems the kernel brightness switch handling value was not "
                "restored properly on exit last time, trying to restore it this time."
            )

        handle_keys = bool(self._conf(HANDLE_BRIGHTNESS_KEYS))
        self.set_brightness_switch(0 if handle_keys else 1)

        level = self.brightness.get_level()
        if level is not None:
            self.last_level = level

    def _conf(self, key: str) -> Any:
        return self.config.get(key, _DEFAULTS.get(key))

    def __enter__(self) -> Backlight:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def dim_brightness(self) -> None:
        """Lower the brightness to the configured dim level unless presenting."""
        if self.brightness is None or self._presentation_mode():
            return
        key = BRIGHTNESS_LEVEL_ON_BATTERY if self.on_battery else BRIGHTNESS_LEVEL_ON_AC
        dim_level = int(self._conf(key))

        current = self.brightness.get_level()
        if current is None:
            _log.warning("Unable to get current brightness level")
            return
        self.last_level = current

        dim_level = dim_level * self.max_level // 100
        if self.last_level > dim_level:
            _log.debug("Current brightness level before dimming: %d, new %d",
                       self.last_level, dim_level)
            self.dimmed = self.brightness.set_level(dim_level)

    def on_alarm_expired(self, alarm_id: AlarmId) -> None:
        """Dim when the idle alarm for the current power source fires."""
        self.block = False
        if alarm_id is AlarmId.BRIGHTNESS_ON_AC and not self.on_battery:
            self.dim_brightness()
        elif alarm_id is AlarmId.BRIGHTNESS_ON_BATTERY and self.on_battery:
            self.dim_brightness()

    def on_idle_reset(self) -> None:
        """Restore the level saved before dimming once the user is active again."""
        if not self.dimmed:
            return
        if not self.block and self.brightness is not None:
            _log.debug("Alarm reset, setting level to %d", self.last_level)
            self.brightness.set_level(self.last_level)
        self.dimmed = False

    def on_button_pressed(self, button: ButtonKey) -> float | None:
        """Handle a brightness key; return the popup percentage to show, if any."""
        if self.brightness is None:
            return None
        if button not in (ButtonKey.MON_BRIGHTNESS_UP, ButtonKey.MON_BRIGHTNESS_DOWN):
            return None

        self.block = True
        if not self._conf(HANDLE_BRIGHTNESS_KEYS):
            level = self.brightness.get_level()
        elif button is ButtonKey.MON_BRIGHTNESS_UP:
            level = self.brightness.up()
        else:
            level = self.brightness.down()

        if level is not None and self._conf(SHOW_BRIGHTNESS_POPUP):
            return self.popup_percentage(level)
        return None

    def alarm_timeouts(self) -> dict[AlarmId, int | None]:
        """Return each idle alarm's timeout in milliseconds, None where disabled."""
        if self.brightness is None:
            return {}
        result: dict[AlarmId, int | None] = {}
        for alarm, key in ((AlarmId.BRIGHTNESS_ON_AC, BRIGHTNESS_ON_AC),
                           (AlarmId.BRIGHTNESS_ON_BATTERY, BRIGHTNESS_ON_BATTERY)):
            seconds = int(self._conf(key))
            result[alarm] = None if seconds == ALARM_DISABLED else seconds * 1000
        return result

    def set_brightness_switch(self, value: int) -> bool:
        """Set the kernel brightness switch value and store it in the configuration."""
        value = int(value)
        if not SWITCH_MIN <= value <= SWITCH_MAX:
            raise ValueError(
                f"brightness switch must be between {SWITCH_MIN} and {SWITCH_MAX}: {value}"
            )
        self.brightness_switch = value
        self.config[BRIGHTNESS_SWITCH] = value
        if not self._switch_initialized or self.brightness is None:
            return True
        ok = self.brightness.set_switch(value)
        if ok:
            _log.info("Set kernel brightness switch to %d", value)
        else:
            _log.warning("Unable to set the kernel brightness switch parameter to %d.", value)
        return ok

    def popup_percentage(self, level: int) -> float:
        """Return a level as a percentage of the maximum level."""
        if self.max_level == 0:
            raise ValueError("no brightness range available")
        return 100.0 * level / self.max_level

    def close(self) -> None:
        """Restore the original kernel brightness switch setting."""
        if self._closed:
            return
        self._closed = True
        if self.brightness is None or self.brightness_switch_save == -1:
            return
        ok = self.brightness.set_switch(self.brightness_switch_save)
        self.config[BRIGHTNESS_SWITCH_SAVE] = -1
        if ok:
            self.brightness_switch = self.brightness_switch_save
            _log.info("Restored brightness switch value to: %d", self.brightness_switch)
        else:
            _log.warning("Unable to restore the kernel brightness switch parameter to its "
                         "original value, still resetting the saved value.")