"""Service registration for the wake-up light integration."""
from __future__ import annotations

import logging

import voluptuous as vol

from homeassistant.core import HomeAssistant
from homeassistant.helpers import entity_platform

from .const import ATTR_VALUE, SERVICE_PREVIEW_BRIGHTNESS

_LOGGER = logging.getLogger(__name__)


async def async_setup_number_services(hass: HomeAssistant) -> None:
    """Set up number platform services."""
    _LOGGER.debug("Setting up wake-up light number services")

    platform = entity_platform.async_get_current_platform()

    # Slider drag without release: buffer the value, send nothing
    platform.async_register_entity_service(
        SERVICE_PREVIEW_BRIGHTNESS,
        {
            vol.Required(ATTR_VALUE): vol.All(vol.Coerce(int), vol.Range(min=0)),
        },
        "async_preview_value",
    )
