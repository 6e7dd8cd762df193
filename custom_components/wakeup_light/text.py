"""Text platform for the wake-up light alarm hour and minute fields.

Typing only updates the local alarm buffer. Nothing is sent until the
Set alarm button is pressed.
"""

from __future__ import annotations

import logging
from typing import Any

from homeassistant.components.text import TextEntity
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import ATTR_EDIT_STATE
from .coordinator import WakeupLightCoordinator
from .entity import WakeupLightEntity
from .entity_descriptions.text import (
    TEXT_DESCRIPTIONS,
    WakeupLightTextEntityDescription,
)
from .models import WakeupLightConfigEntry

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: WakeupLightConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the alarm fields from a config entry."""
    coordinator = entry.runtime_data.coordinator

    async_add_entities(
        WakeupLightAlarmText(coordinator, description)
        for description in TEXT_DESCRIPTIONS.values()
    )


class WakeupLightAlarmText(WakeupLightEntity, TextEntity):
    """One alarm time field."""

    entity_description: WakeupLightTextEntityDescription

    def __init__(
        self,
        coordinator: WakeupLightCoordinator,
        description: WakeupLightTextEntityDescription,
    ) -> None:
        """Initialize the field."""
        super().__init__(coordinator, description.key)
        self.entity_description = description
        self._field = description.field

    @property
    def native_value(self) -> str | None:
        """Return the typed text, or the mirrored alarm time when not editing."""
        fields = self.coordinator.alarm_buffer.resolve(self.status)
        if fields is None:
            return None
        return getattr(fields, self._field)

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        """Return the edit buffer state."""
        return {ATTR_EDIT_STATE: self.coordinator.alarm_buffer.state.value}

    async def async_set_value(self, value: str) -> None:
        """Store the typed text locally."""
        _LOGGER.debug("Alarm %s edited to %r", self._field, value)
        self.coordinator.edit_alarm(**{self._field: value})
