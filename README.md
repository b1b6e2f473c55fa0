# bladepm

The core logic of a desktop power manager, packaged as plain Python:

- **`bladepm.backlight`** provides `Backlight`. It dims the screen when the
  machine is idle and restores the level afterwards. It also handles the
  brightness keys, and it saves the kernel brightness switch and restores it
  on `close()`. Hardware access comes from a `BrightnessDevice` subclass that
  you supply.
- **`bladepm.settings_format`** turns slider values into labels such as
  "Never", "One hour" or "2 hours 5 minutes". It also converts the
  Light Locker delay values.
- **`bladepm.settings_constraints`** provides `DisplayTimeouts`, which keeps
  the display blank, sleep, off and dimming timeouts consistent with one
  another. Its `logind_handle_lid_switch` works out the logind lid-switch flag.
- **`bladepm.settings_options`** builds the action choices (suspend,
  hibernate, shutdown, ask and so on). The choices depend on what the system
  can do and on what the user may do.
- **`bladepm.device_info`** builds the attribute rows shown for a power device
  and keeps track of the device list.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Backlight

```python
from bladepm.backlight import AlarmId, Backlight, BrightnessDevice, ButtonKey


class MyBrightness(BrightnessDevice):
    ...  # implement setup, get_level, set_level, up, down,
         # get_max_level, get_switch and set_switch


with Backlight(MyBrightness(), config={}, on_battery=True) as backlight:
    backlight.alarm_timeouts()          # {AlarmId.BRIGHTNESS_ON_AC: None, ...}
    backlight.on_alarm_expired(AlarmId.BRIGHTNESS_ON_BATTERY)   # dims
    backlight.on_idle_reset()           # restores the previous level
    backlight.on_button_pressed(ButtonKey.MON_BRIGHTNESS_UP)    # popup percentage
```

## Settings helpers

```python
from bladepm.settings_format import format_inactivity_value, format_dpms_value
from bladepm.settings_options import Capabilities, power_button_options, select_option
from bladepm.settings_constraints import DisplayTimeouts

format_inactivity_value(125)   # "2 hours 5 minutes"
format_dpms_value(1)           # "One minute"

caps = Capabilities(can_suspend=True, auth_suspend=True, can_shutdown=True)
options = power_button_options(caps)   # Do nothing, Suspend, Shutdown, Ask
select_option(options, 1)              # 1

timeouts = DisplayTimeouts(on_battery=True, blank=5, sleep=10, off=15)
timeouts.set_blank(12)
timeouts.sleep                         # 13, pushed after the blank timeout
```

## Devices

```python
from bladepm.device_info import DeviceInfo, DeviceList

devices = DeviceList()
path = "/org/freedesktop/UPower/devices/battery_BAT0"
devices.add(path, DeviceInfo(object_path=path, kind="Battery", percentage=80))
devices.rows(path)      # [("Device", "battery_BAT0"), ("Type", "Battery"), ...]
devices.selected()      # the first device added is selected
```

## What this package does not do

It has no command-line tool and no graphical settings dialog. It does not talk
to the power daemon or the session bus, and it does not read or write the
kernel's backlight files itself. The caller supplies brightness hardware access
by implementing `BrightnessDevice`, and device properties by filling in
`DeviceInfo`.