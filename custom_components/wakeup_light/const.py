"""Constants for the wake-up light integration."""
from __future__ import annotations

from homeassistant.const import Platform

DOMAIN = "wakeup_light"

MANUFACTURER = "DIY"
MODEL = "ESP32 wake-up light"

# Config entry data / options
CONF_BRIGHTNESS_MAX = "brightness_max"

# Status poll interval (seconds)
DEFAULT_SCAN_INTERVAL = 1

# Consecutive failed status reads before the panel is shown as disconnected
MAX_POLL_FAILURES = 3

# How long the "alarm saved" banner stays on (seconds)
ALARM_SAVED_BANNER_SECONDS = 3

# Entity services
SERVICE_PREVIEW_BRIGHTNESS = "preview_brightness"
ATTR_VALUE = "value"

# Extra state attributes
ATTR_LAST_ERROR = "last_error"
ATTR_PENDING = "pending"
ATTR_EDIT_STATE = "edit_state"

PLATFORMS: list[Platform] = [
    Platform.BINARY_SENSOR,
    Platform.BUTTON,
    Platform.NUMBER,
    Platform.SENSOR,
    Platform.SWITCH,
    Platform.TEXT,
]

# Config entry version for migrations
CONFIG_ENTRY_VERSION = 1
