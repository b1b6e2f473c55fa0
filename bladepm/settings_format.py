"""Display text for the settings dialog scales and the Light Locker value mapping."""

from __future__ import annotations

from dataclasses import dataclass
from gettext import gettext as _

# Combo box entries of the Light Locker "automatic locking" setting.
LOCKING_NEVER = 0
LOCKING_WITH_SCREENSAVER = 1
LOCKING_LATE = 2

_LOCKING_MODES = (LOCKING_NEVER, LOCKING_WITH_SCREENSAVER, LOCKING_LATE)


def format_dpms_value(value: float) -> str:
    """Return the label of a display power-management timeout given in minutes."""
    minutes = int(value)
    if minutes == 0:
        return _("Never")
    if minutes == 1:
        return _("One minute")
    return f"{minutes} {_('Minutes')}"


def format_inactivity_value(value: float) -> str:
    """Return the label of a system inactivity timeout given in minutes."""
    minutes = int(value)
    if minutes <= 14:
        return _("Never")
    if minutes < 60:
        return f"{minutes} {_('Minutes')}"
    if minutes == 60:
        return _("One hour")

    hours, rest = divmod(minutes, 60)
    if hours <= 1:
        if rest == 0:
            return _("One hour")
        if rest == 1:
            return f"{_('One hour')} {_('one minute')}"
        return f"{_('One hour')} {rest} {_('minutes')}"
    if rest == 0:
        return f"{hours} {_('hours')}"
    if rest == 1:
        return f"{hours} {_('hours')} {_('one minute')}"
    return f"{hours} {_('hours')} {rest} {_('minutes')}"


def format_brightness_value(value: float) -> str:
    """Return the label of a brightness dimming timeout given in seconds."""
    seconds = int(value)
    if seconds <= 9:
        return _("Never")
    return f"{seconds} {_('Seconds')}"


def format_brightness_percentage(value: float) -> str:
    """Return the label of a brightness level given in percent."""
    return f"{int(value)} {_('%')}"


def format_critical_level(value: float) -> str:
    """Return the text shown in the critical battery level spin button."""
    return f"{int(value)} %"


def format_light_locker_value(value: float) -> str:
    """Return the label of the Light Locker delay scale."""
    position = int(value)
    if position <= 0:
        return _("Never")
    if position < 60:
        return f"{position} {_('Seconds')}"
    if position == 60:
        return _("One Minute")
    return f"{position - 60} {_('Minutes')}"


def light_locker_seconds(value: float) -> int:
    """Convert a Light Locker scale position to a delay in seconds.

    Positions up to 60 are seconds; beyond that each step is one more minute.
    """
    position = int(value)
    if position > 60:
        return (position - 60) * 60
    return position


def light_locker_scale_value(seconds: int) -> int:
    """Convert a Light Locker delay in seconds to a scale position."""
    seconds = int(seconds)
    if seconds > 60:
        return seconds // 60 + 60
    return seconds


@dataclass(frozen=True)
class LockingSettings:
    """Light Locker settings derived from the automatic locking choice."""

    lock_after_screensaver: int
    late_locking: bool
    delay_sensitive: bool


def automatic_locking_settings(mode: int, delay: float) -> LockingSettings:
    """Return the Light Locker settings for a locking mode and delay scale position."""
    if mode not in _LOCKING_MODES:
        raise ValueError(f"unknown automatic locking mode: {mode}")
    lock_after = 0 if mode == LOCKING_NEVER else light_locker_seconds(delay)
    return LockingSettings(
        lock_after_screensaver=lock_after,
        late_locking=mode == LOCKING_LATE,
        delay_sensitive=mode != LOCKING_NEVER,
    )