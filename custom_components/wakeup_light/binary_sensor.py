"""Binary sensor platform for the wake-up light: sunrise and alarm-saved banner."""
from __future__ import annotations

import logging

from homeassistant.components.binary_sensor import BinarySensorEntity
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .coordinator import WakeupLightCoordinator
from .entity import WakeupLightEntity
from .entity_descriptions.binary_sensor import (
    BINARY_SENSOR_DESCRIPTIONS,
    WakeupLightBinarySensorEntityDescription,
)
from .models import WakeupLightConfigEntry

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: WakeupLightConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up wake-up light binary sensors from a config entry."""
    coordinator = entry.runtime_data.coordinator

    entities = [
        WakeupLightBinarySensor(coordinator, description)
        for description in BINARY_SENSOR_DESCRIPTIONS.values()
    ]

    _LOGGER.debug("Adding %d binary sensor entities", len(entities))
    async_add_entities(entities)


class WakeupLightBinarySensor(WakeupLightEntity, BinarySensorEntity):
    """On/off indicator driven by the mirror or a transient banner."""

    entity_description: WakeupLightBinarySensorEntityDescription

    def __init__(
        self,
        coordinator: WakeupLightCoordinator,
        description: WakeupLightBinarySensorEntityDescription,
    ) -> None:
        """Initialize the binary sensor."""
        super().__init__(coordinator, description.key)
        self.entity_description = description

    @property
    def is_on(self) -> bool | None:
        """Return true if the indicator is on."""
        return self.entity_description.is_on_fn(self.coordinator)
