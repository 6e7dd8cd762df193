"""Button platform for the wake-up light.

Provides buttons for:
- Set alarm (commits the typed hour and minute)
- Max brightness / lights off
- Brightness presets
- Reconnect after the connection has been lost
"""

from __future__ import annotations

import logging

from homeassistant.components.button import ButtonDeviceClass, ButtonEntity
from homeassistant.const import EntityCategory
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .coordinator import WakeupLightCoordinator
from .entity import WakeupLightEntity
from .entity_descriptions.button import (
    BUTTON_DESCRIPTIONS,
    PRESET_BUTTON_DESCRIPTIONS,
    WakeupLightButtonEntityDescription,
)
from .models import WakeupLightConfigEntry

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: WakeupLightConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up wake-up light buttons from a config entry."""
    coordinator = entry.runtime_data.coordinator

    entities: list[ButtonEntity] = [
        WakeupLightButton(coordinator, description)
        for description in (
            *BUTTON_DESCRIPTIONS.values(),
            *PRESET_BUTTON_DESCRIPTIONS.values(),
        )
    ]
    entities.append(WakeupLightReconnectButton(coordinator))

    async_add_entities(entities)
    _LOGGER.debug("Set up %d wake-up light button entities", len(entities))


class WakeupLightButton(WakeupLightEntity, ButtonEntity):
    """Button that sends one write to the device."""

    entity_description: WakeupLightButtonEntityDescription

    def __init__(
        self,
        coordinator: WakeupLightCoordinator,
        description: WakeupLightButtonEntityDescription,
    ) -> None:
        """Initialize the button."""
        super().__init__(coordinator, description.key)
        self.entity_description = description
        self._mutation_kind = description.mutation_kind

    async def async_press(self) -> None:
        """Handle the button press."""
        _LOGGER.debug("Button %s pressed", self.entity_description.key)
        await self.entity_description.press_fn(self.coordinator)


class WakeupLightReconnectButton(WakeupLightEntity, ButtonEntity):
    """Button to retry the connection after the poller gave up.

    Stays available while the rest of the panel is unavailable.
    """

    _attr_device_class = ButtonDeviceClass.RESTART
    _attr_entity_category = EntityCategory.DIAGNOSTIC
    _attr_translation_key = "reconnect"
    _attr_icon = "mdi:lan-pending"

    def __init__(self, coordinator: WakeupLightCoordinator) -> None:
        """Initialize the reconnect button."""
        super().__init__(coordinator, "reconnect")

    @property
    def available(self) -> bool:
        """Always available."""
        return True

    async def async_press(self) -> None:
        """Reload the entry."""
        self.coordinator.async_reconnect()
