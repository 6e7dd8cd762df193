"""Number platform for the wake-up light brightness sliders.

Dragging a slider goes through the `preview_brightness` entity service and
only updates the local buffer. Releasing it sets the native value, which
sends both channel levels in one request.
"""

from __future__ import annotations

import logging
from typing import Any

from homeassistant.components.number import NumberEntity
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .api.const import BRIGHTNESS_MIN
from .const import ATTR_EDIT_STATE
from .coordinator import WakeupLightCoordinator
from .entity import WakeupLightEntity
from .entity_descriptions.number import (
    NUMBER_DESCRIPTIONS,
    WakeupLightNumberEntityDescription,
)
from .models import MutationKind, WakeupLightConfigEntry
from .services import async_setup_number_services

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: WakeupLightConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up wake-up light brightness sliders from a config entry."""
    coordinator = entry.runtime_data.coordinator

    entities = [
        WakeupLightBrightnessNumber(coordinator, description)
        for description in NUMBER_DESCRIPTIONS.values()
    ]

    async_add_entities(entities)
    await async_setup_number_services(hass)
    _LOGGER.debug("Set up %d wake-up light number entities", len(entities))


class WakeupLightBrightnessNumber(WakeupLightEntity, NumberEntity):
    """Slider for one white channel.

    The slider stays usable while a brightness write is in flight so the
    user can keep dragging; the pending flag is exposed as an attribute.
    """

    entity_description: WakeupLightNumberEntityDescription
    _mutation_kind = MutationKind.SET_BRIGHTNESS
    _disable_while_pending = False

    def __init__(
        self,
        coordinator: WakeupLightCoordinator,
        description: WakeupLightNumberEntityDescription,
    ) -> None:
        """Initialize the slider."""
        super().__init__(coordinator, description.key)
        self.entity_description = description
        self._channel = description.channel
        self._attr_native_min_value = BRIGHTNESS_MIN
        self._attr_native_max_value = coordinator.brightness_max

    @property
    def native_value(self) -> float | None:
        """Return the buffered level, or the mirrored one when not editing."""
        levels = self.coordinator.brightness_buffer.resolve(self.status)
        if levels is None:
            return None
        return getattr(levels, self._channel)

    @property
    def extra_state_attributes(self) -> dict[str, Any] | None:
        """Add the edit buffer state."""
        attributes = dict(super().extra_state_attributes or {})
        attributes[ATTR_EDIT_STATE] = self.coordinator.brightness_buffer.state.value
        return attributes

    async def async_set_native_value(self, value: float) -> None:
        """Commit the released slider position."""
        level = int(value)
        _LOGGER.debug("Committing %s brightness %d", self._channel, level)
        await self.coordinator.async_commit_brightness(**{self._channel: level})

    async def async_preview_value(self, value: int) -> None:
        """Buffer an intermediate slider position without sending it."""
        self.coordinator.preview_brightness(**{self._channel: value})
