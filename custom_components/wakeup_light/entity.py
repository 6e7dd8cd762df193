"""Base entity for the wake-up light integration."""
from __future__ import annotations

from typing import Any

from homeassistant.helpers.device_registry import DeviceInfo
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .const import ATTR_LAST_ERROR, ATTR_PENDING, DOMAIN, MANUFACTURER, MODEL
from .coordinator import WakeupLightCoordinator
from .models import DeviceStatus, MutationKind


class WakeupLightEntity(CoordinatorEntity[WakeupLightCoordinator]):
    """Base entity for one control of the wake-up light panel.

    Entities that trigger a device write set `_mutation_kind`. While that
    write is in flight the entity reports itself unavailable, which disables
    it in the frontend without touching any other control.
    """

    _attr_has_entity_name = True
    _mutation_kind: MutationKind | None = None
    _disable_while_pending = True

    def __init__(self, coordinator: WakeupLightCoordinator, key: str) -> None:
        """Initialize the entity."""
        super().__init__(coordinator)
        entry = coordinator.config_entry

        self._attr_unique_id = f"{entry.entry_id}_{key}"
        self._attr_device_info = DeviceInfo(
            identifiers={(DOMAIN, entry.entry_id)},
            name=entry.title,
            manufacturer=MANUFACTURER,
            model=MODEL,
            configuration_url=coordinator.client.base_url,
        )

    @property
    def status(self) -> DeviceStatus | None:
        """Get the mirrored device status from the coordinator."""
        return self.coordinator.status

    @property
    def available(self) -> bool:
        """Return if entity is available."""
        if not super().available or self.status is None:
            return False

        if self._mutation_kind is not None and self._disable_while_pending:
            return not self.coordinator.mutations.is_pending(self._mutation_kind)

        return True

    @property
    def extra_state_attributes(self) -> dict[str, Any] | None:
        """Return the pending flag and last error of this control's write."""
        if self._mutation_kind is None:
            return None
        mutation = self.coordinator.mutations.status(self._mutation_kind)
        return {
            ATTR_PENDING: mutation.pending,
            ATTR_LAST_ERROR: mutation.last_error,
        }
