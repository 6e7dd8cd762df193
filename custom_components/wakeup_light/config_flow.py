"""Config flow for the wake-up light integration."""
from __future__ import annotations

import logging
from typing import Any

import voluptuous as vol

from homeassistant import config_entries, core, exceptions
from homeassistant.config_entries import ConfigFlowResult
from homeassistant.const import CONF_HOST, CONF_SCAN_INTERVAL
from homeassistant.core import callback
from homeassistant.helpers import config_validation as cv
from homeassistant.helpers.aiohttp_client import async_get_clientsession

from .api import (
    SUPPORTED_BRIGHTNESS_MAX,
    WakeupLightApiClient,
    WakeupLightApiError,
    WakeupLightResponseError,
    normalize_base_url,
)
from .const import (
    CONF_BRIGHTNESS_MAX,
    CONFIG_ENTRY_VERSION,
    DEFAULT_SCAN_INTERVAL,
    DOMAIN,
)

_LOGGER = logging.getLogger(__name__)


async def validate_device(
    hass: core.HomeAssistant, host: str, brightness_max: int
) -> None:
    """Validate the device answers /status within the chosen range."""
    session = async_get_clientsession(hass)

    async with WakeupLightApiClient(host, brightness_max, session=session) as client:
        try:
            await client.get_status()
        except WakeupLightResponseError as err:
            raise InvalidResponse(str(err)) from err
        except WakeupLightApiError as err:
            raise CannotConnect(str(err)) from err


BRIGHTNESS_MAX_OPTIONS = vol.In(
    {value: f"0-{value}" for value in SUPPORTED_BRIGHTNESS_MAX}
)


class WakeupLightFlowHandler(config_entries.ConfigFlow, domain=DOMAIN):
    """Handle a config flow for the wake-up light."""

    VERSION = CONFIG_ENTRY_VERSION

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """Handle the initial step."""
        errors: dict[str, str] = {}

        if user_input is not None:
            base_url = normalize_base_url(user_input[CONF_HOST])
            await self.async_set_unique_id(base_url)
            self._abort_if_unique_id_configured()

            try:
                await validate_device(
                    self.hass, base_url, user_input[CONF_BRIGHTNESS_MAX]
                )
            except CannotConnect as conn_ex:
                _LOGGER.warning("Cannot connect to %s: %s", base_url, conn_ex)
                errors[CONF_HOST] = "cannot_connect"
            except InvalidResponse as resp_ex:
                _LOGGER.warning("Unexpected status from %s: %s", base_url, resp_ex)
                errors["base"] = "invalid_response"
            except Exception as ex:  # pylint: disable=broad-except
                _LOGGER.exception("Unexpected exception: %s", ex)
                errors["base"] = "unknown"

            if not errors:
                return self.async_create_entry(
                    title=base_url,
                    data={
                        CONF_HOST: base_url,
                        CONF_BRIGHTNESS_MAX: user_input[CONF_BRIGHTNESS_MAX],
                    },
                )

        return self.async_show_form(
            step_id="user",
            data_schema=vol.Schema(
                {
                    vol.Required(CONF_HOST): cv.string,
                    vol.Required(CONF_BRIGHTNESS_MAX): BRIGHTNESS_MAX_OPTIONS,
                }
            ),
            errors=errors,
        )

    @staticmethod
    @callback
    def async_get_options_flow(
        config_entry: config_entries.ConfigEntry,
    ) -> WakeupLightOptionsFlowHandler:
        """Get the options flow."""
        return WakeupLightOptionsFlowHandler()


class WakeupLightOptionsFlowHandler(config_entries.OptionsFlow):
    """Handle options."""

    async def async_step_init(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """Manage the options."""
        entry = self.config_entry
        current_max = entry.options.get(
            CONF_BRIGHTNESS_MAX, entry.data.get(CONF_BRIGHTNESS_MAX)
        )
        errors: dict[str, str] = {}

        if user_input is not None:
            if user_input[CONF_BRIGHTNESS_MAX] != current_max:
                try:
                    await validate_device(
                        self.hass, entry.data[CONF_HOST], user_input[CONF_BRIGHTNESS_MAX]
                    )
                except CannotConnect:
                    errors["base"] = "cannot_connect"
                except InvalidResponse:
                    errors[CONF_BRIGHTNESS_MAX] = "invalid_response"

            if not errors:
                return self.async_create_entry(title="", data=user_input)

        options_schema = vol.Schema(
            {
                vol.Optional(
                    CONF_SCAN_INTERVAL,
                    default=entry.options.get(CONF_SCAN_INTERVAL, DEFAULT_SCAN_INTERVAL),
                ): cv.positive_int,
                vol.Required(
                    CONF_BRIGHTNESS_MAX,
                    default=current_max,
                ): BRIGHTNESS_MAX_OPTIONS,
            },
        )

        return self.async_show_form(
            step_id="init",
            data_schema=options_schema,
            errors=errors,
        )


class CannotConnect(exceptions.HomeAssistantError):
    """Error to indicate we cannot connect."""


class InvalidResponse(exceptions.HomeAssistantError):
    """Error to indicate the device answered with an unexpected body."""
