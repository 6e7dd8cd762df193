"""Switch platform for the wake-up light alarm."""
from __future__ import annotations

import logging
from typing import Any

from homeassistant.components.switch import SwitchDeviceClass, SwitchEntity
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .coordinator import WakeupLightCoordinator
from .entity import WakeupLightEntity
from .models import MutationKind, WakeupLightConfigEntry

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: WakeupLightConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the alarm switch from a config entry."""
    coordinator = entry.runtime_data.coordinator
    async_add_entities([WakeupLightAlarmSwitch(coordinator)])


class WakeupLightAlarmSwitch(WakeupLightEntity, SwitchEntity):
    """Alarm enabled switch.

    The state always comes from the last status read. Flipping the switch
    does not change it until the device has accepted the toggle and the
    follow-up read reports the new value.
    """

    _attr_device_class = SwitchDeviceClass.SWITCH
    _attr_translation_key = "alarm"
    _attr_icon = "mdi:alarm-check"
    _mutation_kind = MutationKind.TOGGLE_ALARM

    def __init__(self, coordinator: WakeupLightCoordinator) -> None:
        """Initialize the alarm switch."""
        super().__init__(coordinator, "alarm")

    @property
    def is_on(self) -> bool | None:
        """Return true if the alarm is set."""
        status = self.status
        if status is None:
            return None
        return status.is_alarm_set

    async def async_turn_on(self, **kwargs: Any) -> None:
        """Enable the alarm."""
        _LOGGER.debug("Enabling alarm")
        await self.coordinator.async_toggle_alarm(True)

    async def async_turn_off(self, **kwargs: Any) -> None:
        """Disable the alarm."""
        _LOGGER.debug("Disabling alarm")
        await self.coordinator.async_toggle_alarm(False)
