"""Sensor platform for the wake-up light: clock, alarm time and connection."""
from __future__ import annotations

from datetime import datetime
import logging

from homeassistant.components.sensor import SensorEntity
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.typing import StateType

from .coordinator import WakeupLightCoordinator
from .entity import WakeupLightEntity
from .entity_descriptions.sensor import (
    SENSOR_DESCRIPTIONS,
    WakeupLightSensorEntityDescription,
)
from .models import WakeupLightConfigEntry

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: WakeupLightConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up wake-up light sensors from a config entry."""
    coordinator = entry.runtime_data.coordinator

    entities = [
        WakeupLightSensor(coordinator, description)
        for description in SENSOR_DESCRIPTIONS.values()
    ]

    _LOGGER.debug("Adding %d sensor entities", len(entities))
    async_add_entities(entities)


class WakeupLightSensor(WakeupLightEntity, SensorEntity):
    """Read-only value from the status mirror or the coordinator."""

    entity_description: WakeupLightSensorEntityDescription

    def __init__(
        self,
        coordinator: WakeupLightCoordinator,
        description: WakeupLightSensorEntityDescription,
    ) -> None:
        """Initialize the sensor."""
        super().__init__(coordinator, description.key)
        self.entity_description = description

    @property
    def available(self) -> bool:
        """Diagnostic sensors stay available while disconnected."""
        if self.entity_description.always_available:
            return True
        return super().available

    @property
    def native_value(self) -> StateType | datetime:
        """Return the sensor value."""
        return self.entity_description.value_fn(self.coordinator)
