from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from homeassistant.components.sensor import SensorDeviceClass, SensorEntityDescription
from homeassistant.const import EntityCategory
from homeassistant.helpers.typing import StateType

from ..models import ConnectionState

if TYPE_CHECKING:
    from ..coordinator import WakeupLightCoordinator


@dataclass(frozen=True, kw_only=True)
class WakeupLightSensorEntityDescription(SensorEntityDescription):
    """Describes a wake-up light sensor entity."""

    value_fn: Callable[[WakeupLightCoordinator], StateType | datetime]
    # Diagnostic sensors keep reporting while the panel is disconnected.
    always_available: bool = False


SENSOR_DESCRIPTIONS: dict[str, WakeupLightSensorEntityDescription] = {
    "current_time": WakeupLightSensorEntityDescription(
        key="current_time",
        translation_key="current_time",
        icon="mdi:clock-outline",
        value_fn=lambda coordinator: (
            coordinator.status.current_time if coordinator.status else None
        ),
    ),
    "alarm_time": WakeupLightSensorEntityDescription(
        key="alarm_time",
        translation_key="alarm_time",
        icon="mdi:alarm",
        value_fn=lambda coordinator: (
            coordinator.status.alarm_time if coordinator.status else None
        ),
    ),
    "connection": WakeupLightSensorEntityDescription(
        key="connection",
        translation_key="connection",
        entity_category=EntityCategory.DIAGNOSTIC,
        device_class=SensorDeviceClass.ENUM,
        options=[state.value for state in ConnectionState],
        icon="mdi:lan-connect",
        always_available=True,
        value_fn=lambda coordinator: coordinator.connection_state.value,
    ),
    "last_update": WakeupLightSensorEntityDescription(
        key="last_update",
        translation_key="last_update",
        entity_category=EntityCategory.DIAGNOSTIC,
        entity_registry_enabled_default=False,
        device_class=SensorDeviceClass.TIMESTAMP,
        always_available=True,
        value_fn=lambda coordinator: coordinator.mirror.updated_at,
    ),
}
