"""The wake-up light integration."""
from __future__ import annotations

from datetime import timedelta
import logging

from homeassistant.config_entries import ConfigEntry
from homeassistant.const import CONF_HOST, CONF_SCAN_INTERVAL
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import ConfigEntryError, ConfigEntryNotReady
from homeassistant.helpers.aiohttp_client import async_get_clientsession

from .api import WakeupLightApiClient
from .const import (
    CONF_BRIGHTNESS_MAX,
    CONFIG_ENTRY_VERSION,
    DEFAULT_SCAN_INTERVAL,
    PLATFORMS,
)
from .coordinator import WakeupLightCoordinator
from .models import WakeupLightConfigEntry, WakeupLightRuntimeData
from .repairs import async_delete_connection_issue

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(hass: HomeAssistant, entry: WakeupLightConfigEntry) -> bool:
    """Set up the wake-up light from a config entry."""
    _LOGGER.debug("Setting up wake-up light integration")

    config = entry.data
    options = entry.options
    host = config[CONF_HOST]
    brightness_max = options.get(CONF_BRIGHTNESS_MAX, config.get(CONF_BRIGHTNESS_MAX))
    scan_interval = options.get(CONF_SCAN_INTERVAL, DEFAULT_SCAN_INTERVAL)

    session = async_get_clientsession(hass)
    try:
        client = WakeupLightApiClient(host, brightness_max, session=session)
    except ValueError as err:
        raise ConfigEntryError(str(err)) from err

    coordinator = WakeupLightCoordinator(
        hass,
        entry,
        client,
        update_interval=timedelta(seconds=scan_interval),
    )

    # The panel is not shown until the first status read succeeds
    try:
        await coordinator.async_config_entry_first_refresh()
    except ConfigEntryNotReady:
        _LOGGER.error("Failed to load initial status from %s", client.base_url)
        await client.close()
        raise

    entry.runtime_data = WakeupLightRuntimeData(
        client=client,
        coordinator=coordinator,
    )

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)

    entry.async_on_unload(entry.add_update_listener(async_options_updated))

    _LOGGER.info(
        "Wake-up light at %s set up (brightness 0-%d, polling every %ss)",
        client.base_url,
        brightness_max,
        scan_interval,
    )

    return True


async def async_unload_entry(hass: HomeAssistant, entry: WakeupLightConfigEntry) -> bool:
    """Unload a config entry."""
    _LOGGER.debug("Unloading wake-up light integration")

    unload_ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)

    if unload_ok:
        await entry.runtime_data.coordinator.async_shutdown()
        await entry.runtime_data.client.close()
        await async_delete_connection_issue(hass, entry)

    return unload_ok


async def async_options_updated(hass: HomeAssistant, entry: WakeupLightConfigEntry) -> None:
    """Handle options update."""
    _LOGGER.debug("Options updated, reloading integration")
    await hass.config_entries.async_reload(entry.entry_id)


async def async_migrate_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Migrate old entry to new version."""
    _LOGGER.debug("Migrating config entry from version %s", entry.version)

    if entry.version > CONFIG_ENTRY_VERSION:
        # Downgrade from a future version
        return False

    return True
