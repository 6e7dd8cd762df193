"""Wake-up light models."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .buffer import (
    AlarmEditBuffer,
    AlarmFields,
    BrightnessEditBuffer,
    BrightnessLevels,
    BufferState,
    EditBuffer,
)
from .health import ConnectionHealth, ConnectionState
from .mirror import StatusMirror
from .mutation import MutationKind, MutationTracker
from .presets import LIGHT_PRESETS, LightPreset
from .status import DeviceStatus

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry

    from ..api.client import WakeupLightApiClient
    from ..coordinator import WakeupLightCoordinator


@dataclass
class WakeupLightRuntimeData:
    """Runtime data for the wake-up light integration."""

    client: WakeupLightApiClient
    coordinator: WakeupLightCoordinator


type WakeupLightConfigEntry = ConfigEntry[WakeupLightRuntimeData]


__all__ = [
    "AlarmEditBuffer",
    "AlarmFields",
    "BrightnessEditBuffer",
    "BrightnessLevels",
    "BufferState",
    "ConnectionHealth",
    "ConnectionState",
    "DeviceStatus",
    "EditBuffer",
    "LIGHT_PRESETS",
    "LightPreset",
    "MutationKind",
    "MutationTracker",
    "StatusMirror",
    "WakeupLightConfigEntry",
    "WakeupLightRuntimeData",
]
