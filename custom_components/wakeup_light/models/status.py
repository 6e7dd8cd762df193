"""Device status snapshot.

A status is only ever built from a complete, validated `/status` body and
is never modified afterwards; a refresh replaces the whole object.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def split_alarm_time(alarm_time: str) -> tuple[str, str]:
    """Split `H:MM` or `HH:MM` into zero-padded hour and minute text."""
    hour, _, minute = alarm_time.partition(":")
    return hour.zfill(2), minute.zfill(2)


@dataclass(frozen=True)
class DeviceStatus:
    """Immutable snapshot of the device's reported status."""

    current_time: str
    alarm_time: str
    is_alarm_set: bool
    is_sunrise_active: bool
    warm_brightness: int
    cool_brightness: int

    @property
    def alarm_hour(self) -> str:
        """Alarm hour as two-digit text."""
        return split_alarm_time(self.alarm_time)[0]

    @property
    def alarm_minute(self) -> str:
        """Alarm minute as two-digit text."""
        return split_alarm_time(self.alarm_time)[1]

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> DeviceStatus:
        """Create from a validated `/status` response body."""
        hour, minute = split_alarm_time(data["alarmTime"])
        return cls(
            current_time=data["currentTime"],
            alarm_time=f"{hour}:{minute}",
            is_alarm_set=data["isAlarmSet"],
            is_sunrise_active=data["isSunriseActive"],
            warm_brightness=data["warmBrightness"],
            cool_brightness=data["coolBrightness"],
        )

    def as_dict(self) -> dict[str, Any]:
        """Return the snapshot in the device's wire format."""
        return {
            "currentTime": self.current_time,
            "alarmTime": self.alarm_time,
            "isAlarmSet": self.is_alarm_set,
            "isSunriseActive": self.is_sunrise_active,
            "warmBrightness": self.warm_brightness,
            "coolBrightness": self.cool_brightness,
        }
