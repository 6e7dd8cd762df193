from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from homeassistant.components.binary_sensor import BinarySensorEntityDescription

if TYPE_CHECKING:
    from ..coordinator import WakeupLightCoordinator


@dataclass(frozen=True, kw_only=True)
class WakeupLightBinarySensorEntityDescription(BinarySensorEntityDescription):
    """Describes a wake-up light binary sensor entity."""

    is_on_fn: Callable[[WakeupLightCoordinator], bool | None]


BINARY_SENSOR_DESCRIPTIONS: dict[str, WakeupLightBinarySensorEntityDescription] = {
    "sunrise_active": WakeupLightBinarySensorEntityDescription(
        key="sunrise_active",
        translation_key="sunrise_active",
        icon="mdi:weather-sunset-up",
        is_on_fn=lambda coordinator: (
            coordinator.status.is_sunrise_active if coordinator.status else None
        ),
    ),
    "alarm_saved": WakeupLightBinarySensorEntityDescription(
        key="alarm_saved",
        translation_key="alarm_saved",
        icon="mdi:alarm-check",
        is_on_fn=lambda coordinator: coordinator.alarm_saved,
    ),
}
