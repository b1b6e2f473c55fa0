"""Attribute rows and the device list shown on the Devices tab of the settings dialog."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from gettext import gettext as _

_log = logging.getLogger(__name__)

UPOWER_PATH_DEVICE = "/org/freedesktop/UPower/devices/"


@dataclass(frozen=True)
class DeviceInfo:
    """Properties of a power device as reported by the power daemon.

    ``kind`` is the translated device type, or None when the type is unknown;
    ``technology`` is the translated battery technology. Negative energy,
    voltage and percentage values mean the property is not available.
    """

    object_path: str
    kind: str | None = None
    line_power: bool = False
    power_supply: bool = False
    model: str = ""
    vendor: str = ""
    serial: str = ""
    technology: str = ""
    energy_full_design: float = -1.0
    energy_full: float = -1.0
    energy_empty: float = -1.0
    voltage: float = -1.0
    percentage: float = -1.0


def device_label(object_path: str) -> str:
    """Return the object path without the daemon's device path prefix."""
    if object_path.startswith(UPOWER_PATH_DEVICE):
        return object_path[len(UPOWER_PATH_DEVICE):]
    return object_path


def energy_text(energy: float, unit: str) -> str:
    """Return a quantity with one decimal followed by its unit."""
    return f"{energy:.1f} {unit}"


def device_details(info: DeviceInfo) -> list[tuple[str, str]]:
    """Return the attribute rows describing a device, in display order."""
    rows: list[tuple[str, str]] = [(_("Device"), device_label(info.object_path))]

    if info.kind is not None:
        rows.append((_("Type"), info.kind))

    rows.append((_("PowerSupply"), _("True") if info.power_supply else _("False")))

    if info.line_power:
        return rows

    if info.model:
        rows.append((_("Model"), info.model))

    rows.append((_("Technology"), info.technology))

    if info.percentage >= 0:
        rows.append((_("Current charge"), f"{int(info.percentage)}%"))

    if info.energy_full_design > 0:
        rows.append((_("Fully charged (design)"),
                     energy_text(info.energy_full_design, _("Wh"))))

    if info.energy_full > 0:
        text = energy_text(info.energy_full, _("Wh"))
        if info.energy_full_design > 0:
            text = f"{text} ({int(info.energy_full / info.energy_full_design * 100)}%)"
        rows.append((_("Fully charged"), text))

    if info.energy_empty > 0:
        rows.append((_("Energy empty"), energy_text(info.energy_empty, _("Wh"))))

    if info.voltage > 0:
        rows.append((_("Voltage"), energy_text(info.voltage, _("V"))))

    if info.vendor:
        rows.append((_("Vendor"), info.vendor))

    if info.serial:
        rows.append((_("Serial"), info.serial))

    return rows


@dataclass
class _Entry:
    info: DeviceInfo
    page: int
    rows: dict[str, str] = field(default_factory=dict)

    def apply(self, details: Iterable[tuple[str, str | None]]) -> None:
        # Existing rows keep their place; a None value removes the row.
        for name, value in details:
            if value is None:
                self.rows.pop(name, None)
            else:
                self.rows[name] = value


class DeviceList:
    """The devices of the sidebar, each with its own page of attribute rows."""

    def __init__(self, starting_device_id: str | None = None) -> None:
        self.starting_device_id = starting_device_id
        self._entries: dict[str, _Entry] = {}
        self._next_page = 0
        self._first_run = True
        self._selected: str | None = None

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, object_path: object) -> bool:
        return object_path in self._entries

    def __iter__(self):
        return iter(self._entries)

    def add(self, object_path: str, info: DeviceInfo) -> bool:
        """Add a device; return False if it is already listed."""
        if object_path in self._entries:
            return False

        entry = _Entry(info=info, page=self._next_page)
        self._next_page += 1
        entry.apply(device_details(info))
        self._entries[object_path] = entry
        _log.debug("added device %s on page %d", object_path, entry.page)

        if ((self.starting_device_id is None and self._first_run)
                or object_path == self.starting_device_id):
            self._selected = object_path
        self._first_run = False
        return True

    def update(self, object_path: str, info: DeviceInfo) -> bool:
        """Refresh the rows of a listed device; return False if it is not listed."""
        entry = self._entries.get(object_path)
        if entry is None:
            return False
        entry.info = info
        entry.apply(device_details(info))
        return True

    def remove(self, object_path: str) -> bool:
        """Remove a device; return False if it was not listed."""
        if self._entries.pop(object_path, None) is None:
            return False
        if self._selected == object_path:
            self._selected = None
        return True

    def select(self, object_path: str) -> None:
        """Select a listed device."""
        if object_path not in self._entries:
            raise KeyError(object_path)
        self._selected = object_path

    def selected(self) -> str | None:
        """Return the object path of the selected device, or None."""
        return self._selected

    @property
    def current_page(self) -> int | None:
        """Page number of the selected device's details, or None."""
        if self._selected is None:
            return None
        return self._entries[self._selected].page

    def page(self, object_path: str) -> int:
        """Return the details page number of a device."""
        return self._entries[object_path].page

    def rows(self, object_path: str) -> list[tuple[str, str]]:
        """Return the attribute rows currently shown for a device."""
        return list(self._entries[object_path].rows.items())

    def info(self, object_path: str) -> DeviceInfo:
        """Return the last known properties of a device."""
        return self._entries[object_path].info

    @property
    def tab_visible(self) -> bool:
        """Whether the Devices tab is shown."""
        return bool(self._entries)