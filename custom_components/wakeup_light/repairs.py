"""Repairs framework integration for the wake-up light.

A fixable `connection_lost` issue is raised when the status poller gives up
on the device. Fixing it reloads the config entry, which repeats the initial
status load before the panel entities come back.
"""

from __future__ import annotations

import logging
from typing import Any

from homeassistant.components.repairs import ConfirmRepairFlow, RepairsFlow
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.data_entry_flow import FlowResult
from homeassistant.helpers import issue_registry as ir

from .const import DOMAIN

_LOGGER = logging.getLogger(__name__)


# Issue IDs
ISSUE_CONNECTION_LOST = "connection_lost"


def connection_issue_id(entry: ConfigEntry) -> str:
    """Return the connection issue id for an entry."""
    return f"{ISSUE_CONNECTION_LOST}_{entry.entry_id}"


async def async_create_connection_issue(
    hass: HomeAssistant,
    entry: ConfigEntry,
    error: str,
) -> None:
    """Create a repair issue for a lost device connection.

    This issue is fixable - the repair flow reloads the entry.
    """
    ir.async_create_issue(
        hass,
        DOMAIN,
        connection_issue_id(entry),
        is_fixable=True,
        is_persistent=False,
        severity=ir.IssueSeverity.ERROR,
        translation_key=ISSUE_CONNECTION_LOST,
        translation_placeholders={
            "entry_title": entry.title,
            "error": error,
        },
        data={"entry_id": entry.entry_id, "entry_title": entry.title},
    )
    _LOGGER.info("Created connection_lost repair issue for entry %s", entry.entry_id)


async def async_delete_connection_issue(
    hass: HomeAssistant,
    entry: ConfigEntry,
) -> None:
    """Delete the connection issue once status reads succeed again."""
    ir.async_delete_issue(hass, DOMAIN, connection_issue_id(entry))
    _LOGGER.debug("Deleted connection_lost repair issue for entry %s", entry.entry_id)


async def async_create_fix_flow(
    hass: HomeAssistant,
    issue_id: str,
    data: dict[str, Any] | None,
) -> RepairsFlow:
    """Create repair flow for fixable issues."""
    if issue_id.startswith(ISSUE_CONNECTION_LOST):
        return ReconnectRepairFlow()

    return ConfirmRepairFlow()


class ReconnectRepairFlow(RepairsFlow):
    """Repair flow that reloads the entry to retry the connection."""

    async def async_step_init(
        self,
        user_input: dict[str, Any] | None = None,
    ) -> FlowResult:
        """Handle the initial step of the repair flow."""
        return await self.async_step_confirm()

    async def async_step_confirm(
        self,
        user_input: dict[str, Any] | None = None,
    ) -> FlowResult:
        """Handle confirmation and reload the entry."""
        if user_input is not None:
            entry_id = str(self.data.get("entry_id", "")) if self.data else ""
            if entry_id and self.hass.config_entries.async_get_entry(entry_id):
                _LOGGER.debug("Reloading entry %s from repair flow", entry_id)
                self.hass.async_create_task(
                    self.hass.config_entries.async_reload(entry_id)
                )
            return self.async_create_entry(data={})

        entry_title = "Wake-up light"
        if self.data:
            entry_title = str(self.data.get("entry_title", entry_title))

        return self.async_show_form(
            step_id="confirm",
            description_placeholders={"entry_title": entry_title},
        )
