"""Diagnostics support for the wake-up light integration."""

from __future__ import annotations

from typing import Any

from homeassistant.core import HomeAssistant

from .api import WakeupLightApiError
from .models import MutationKind, WakeupLightConfigEntry


async def async_get_config_entry_diagnostics(
    hass: HomeAssistant,
    entry: WakeupLightConfigEntry,
) -> dict[str, Any]:
    """Return diagnostics for a config entry."""
    coordinator = entry.runtime_data.coordinator
    mirror = coordinator.mirror
    health = coordinator.health

    # Live read, the mirror never holds the alarm endpoint's answer
    alarm: dict[str, Any]
    try:
        alarm = await coordinator.async_get_alarm()
    except WakeupLightApiError as err:
        alarm = {"error": str(err)}

    return {
        "config_entry": {
            "entry_id": entry.entry_id,
            "version": entry.version,
            "data": dict(entry.data),
            "options": dict(entry.options),
        },
        "mirror": {
            "status": mirror.snapshot.as_dict() if mirror.snapshot else None,
            "applied_ticket": mirror.applied_ticket,
            "last_issued": mirror.last_issued,
            "read_in_flight": mirror.read_in_flight,
            "updated_at": mirror.updated_at.isoformat() if mirror.updated_at else None,
        },
        "connection": {
            "state": health.state.value,
            "failures": health.failures,
            "max_failures": health.max_failures,
            "last_error": health.last_error,
        },
        "buffers": {
            name: {
                "state": buffer.state.value,
                "awaiting_sync": buffer.awaiting_sync,
            }
            for name, buffer in (
                ("alarm", coordinator.alarm_buffer),
                ("brightness", coordinator.brightness_buffer),
            )
        },
        "mutations": {
            kind.value: {
                "pending": coordinator.mutations.is_pending(kind),
                "last_error": coordinator.mutations.last_error(kind),
            }
            for kind in MutationKind
        },
        "alarm": alarm,
    }
