"""Power manager logic: backlight dimming, brightness keys and settings dialog rules."""

__version__ = "0.1.0"
__all__ = [
    "backlight",
    "device_info",
    "settings_constraints",
    "settings_format",
    "settings_options",
]