"""Choices offered by the settings dialog, filtered by what the system can do."""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from gettext import gettext as _
from typing import NamedTuple

_log = logging.getLogger(__name__)

CRITICAL_LEVEL_MIN = 1
CRITICAL_LEVEL_MAX = 20
CRITICAL_LEVEL_DEFAULT = 10


class Action(enum.IntEnum):
    """Action taken on a button press, inactivity or a critical battery."""

    DO_NOTHING = 0
    DO_SUSPEND = 1
    DO_HIBERNATE = 2
    ASK = 3
    DO_SHUTDOWN = 4


class LidTrigger(enum.IntEnum):
    """Action taken when the laptop lid is closed."""

    NOTHING = 0
    SUSPEND = 1
    HIBERNATE = 2
    LOCK_SCREEN = 3


@dataclass(frozen=True)
class Capabilities:
    """Which power operations the system supports and the user may run."""

    can_suspend: bool = False
    can_hibernate: bool = False
    auth_suspend: bool = False
    auth_hibernate: bool = False
    can_shutdown: bool = False

    @property
    def suspend_allowed(self) -> bool:
        return self.can_suspend and self.auth_suspend

    @property
    def hibernate_allowed(self) -> bool:
        return self.can_hibernate and self.auth_hibernate


class Option(NamedTuple):
    """One entry of a combo box: its label and the value stored for it."""

    label: str
    value: int


class WidgetState(NamedTuple):
    """Whether a widget is usable, and the tooltip explaining why not."""

    sensitive: bool
    tooltip: str | None


def sleep_mode_options(caps: Capabilities) -> list[Option]:
    """Return the system sleep modes offered for inactivity."""
    options = []
    if caps.can_suspend:
        options.append(Option(_("Suspend"), Action.DO_SUSPEND))
    if caps.can_hibernate:
        options.append(Option(_("Hibernate"), Action.DO_HIBERNATE))
    return options


def sleep_mode_tooltip(caps: Capabilities) -> str | None:
    """Return the tooltip of the sleep mode choice, or None if all modes are available.

    A missing hibernate mode is reported in preference to a missing suspend mode.
    """
    if not caps.can_hibernate:
        if not caps.auth_hibernate:
            return _("Hibernate operation not permitted")
        return _("Hibernate operation not supported")
    if not caps.can_suspend:
        if not caps.auth_suspend:
            return _("Suspend operation not permitted")
        return _("Suspend operation not supported")
    return None


def inactivity_timeout_state(caps: Capabilities) -> WidgetState:
    """Return whether sleep-related settings can be changed at all."""
    if not caps.can_suspend and not caps.can_hibernate:
        return WidgetState(False, _("Hibernate and suspend operations not supported"))
    if not caps.auth_suspend and not caps.auth_hibernate:
        return WidgetState(False, _("Hibernate and suspend operations not permitted"))
    return WidgetState(True, None)


def _sleep_actions(caps: Capabilities) -> list[Option]:
    options = []
    if caps.suspend_allowed:
        options.append(Option(_("Suspend"), Action.DO_SUSPEND))
    if caps.hibernate_allowed:
        options.append(Option(_("Hibernate"), Action.DO_HIBERNATE))
    return options


def critical_action_options(caps: Capabilities) -> list[Option]:
    """Return the actions offered when the battery reaches the critical level."""
    options = [Option(_("Do nothing"), Action.DO_NOTHING)]
    options.extend(_sleep_actions(caps))
    if caps.can_shutdown:
        options.append(Option(_("Shutdown"), Action.DO_SHUTDOWN))
    options.append(Option(_("Ask"), Action.ASK))
    return options


def power_button_options(caps: Capabilities) -> list[Option]:
    """Return the actions offered for the power button."""
    return critical_action_options(caps)


def sleep_button_options(caps: Capabilities) -> list[Option]:
    """Return the actions offered for the sleep and hibernate buttons."""
    options = [Option(_("Do nothing"), Action.DO_NOTHING)]
    options.extend(_sleep_actions(caps))
    options.append(Option(_("Ask"), Action.ASK))
    return options


def lid_options(caps: Capabilities) -> list[Option]:
    """Return the actions offered for closing the lid."""
    options = [Option(_("Switch off display"), LidTrigger.NOTHING)]
    if caps.suspend_allowed:
        options.append(Option(_("Suspend"), LidTrigger.SUSPEND))
    if caps.hibernate_allowed:
        options.append(Option(_("Hibernate"), LidTrigger.HIBERNATE))
    options.append(Option(_("Lock screen"), LidTrigger.LOCK_SCREEN))
    return options


def select_option(options: Sequence[Option], value: int) -> int | None:
    """Return the index of the first option holding ``value``, or None if none does."""
    return next(
        (index for index, option in enumerate(options) if option.value == int(value)),
        None,
    )


def clamp_critical_level(value: int) -> int:
    """Return the critical battery level to show, falling back to the default when out of range."""
    value = int(value)
    if value > CRITICAL_LEVEL_MAX or value < CRITICAL_LEVEL_MIN:
        _log.critical("Value %d is out of range for the critical power level", value)
        return CRITICAL_LEVEL_DEFAULT
    return value