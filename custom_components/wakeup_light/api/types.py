from __future__ import annotations

from typing import TypedDict


class StatusPayload(TypedDict):
    # GET /status
    currentTime: str
    alarmTime: str
    isAlarmSet: bool
    isSunriseActive: bool
    warmBrightness: int
    coolBrightness: int


class AlarmPayload(TypedDict):
    # GET /get-alarm
    hour: int
    minute: int
    isSet: bool


class ToggleAlarmPayload(TypedDict):
    isAlarmSet: bool
    alarmTime: str


class BrightnessPayload(TypedDict):
    # POST /set-brightness, both directions
    warm: int
    cool: int
