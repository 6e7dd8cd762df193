"""Voluptuous schemas for wake-up light request and response bodies.

Brightness schemas are built per client because the upper bound depends on
the firmware revision the user configured.
"""
from __future__ import annotations

from typing import Any

import voluptuous as vol

from .const import (
    BRIGHTNESS_MIN,
    HOUR_MAX,
    HOUR_MIN,
    MINUTE_MAX,
    MINUTE_MIN,
)

ALARM_TIME_PATTERN = r"^([01]?\d|2[0-3]):[0-5]\d$"


def strict_int(value: Any) -> int:
    """Accept JSON integers only (no bools, floats or numeric strings)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise vol.Invalid(f"expected integer, got {type(value).__name__}")
    return value


def _int_range(minimum: int, maximum: int) -> vol.All:
    return vol.All(strict_int, vol.Range(min=minimum, max=maximum))


HOUR = _int_range(HOUR_MIN, HOUR_MAX)
MINUTE = _int_range(MINUTE_MIN, MINUTE_MAX)

ALARM_REQUEST_SCHEMA = vol.Schema(
    {
        vol.Required("hour"): HOUR,
        vol.Required("minute"): MINUTE,
    }
)

ALARM_RESPONSE_SCHEMA = vol.Schema(
    {
        vol.Required("hour"): HOUR,
        vol.Required("minute"): MINUTE,
        vol.Required("isSet"): bool,
    },
    extra=vol.REMOVE_EXTRA,
)

TOGGLE_ALARM_REQUEST_SCHEMA = vol.Schema({vol.Required("enabled"): bool})

TOGGLE_ALARM_RESPONSE_SCHEMA = vol.Schema(
    {
        vol.Required("isAlarmSet"): bool,
        vol.Required("alarmTime"): str,
    },
    extra=vol.REMOVE_EXTRA,
)


def brightness_schema(brightness_max: int, *, response: bool = False) -> vol.Schema:
    """Return the schema of a `{warm, cool}` body bounded by brightness_max."""
    level = _int_range(BRIGHTNESS_MIN, brightness_max)
    return vol.Schema(
        {
            vol.Required("warm"): level,
            vol.Required("cool"): level,
        },
        extra=vol.REMOVE_EXTRA if response else vol.PREVENT_EXTRA,
    )


def status_schema(brightness_max: int) -> vol.Schema:
    """Return the `/status` response schema bounded by brightness_max."""
    level = _int_range(BRIGHTNESS_MIN, brightness_max)
    return vol.Schema(
        {
            vol.Required("currentTime"): str,
            vol.Required("alarmTime"): vol.All(str, vol.Match(ALARM_TIME_PATTERN)),
            vol.Required("isAlarmSet"): bool,
            vol.Required("isSunriseActive"): bool,
            vol.Required("warmBrightness"): level,
            vol.Required("coolBrightness"): level,
        },
        extra=vol.REMOVE_EXTRA,
    )
