"""DataUpdateCoordinator for the wake-up light.

Owns the status mirror, the edit buffers and the mutation tracker. The
coordinator is the only writer of the mirror; entities read the mirror
through it and write only to their own edit buffer.
"""
from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta
import logging
from typing import TYPE_CHECKING, Any

from homeassistant.core import CALLBACK_TYPE, HomeAssistant, callback
from homeassistant.helpers.event import async_call_later
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator, UpdateFailed

from .api import WakeupLightApiClient, WakeupLightApiError
from .const import ALARM_SAVED_BANNER_SECONDS, DOMAIN, MAX_POLL_FAILURES
from .exceptions import (
    BrightnessOutOfRangeError,
    InvalidAlarmError,
    MutationFailedError,
    MutationInProgressError,
    WakeupLightException,
)
from .models import (
    AlarmEditBuffer,
    AlarmFields,
    BrightnessEditBuffer,
    BrightnessLevels,
    ConnectionHealth,
    ConnectionState,
    DeviceStatus,
    EditBuffer,
    LightPreset,
    MutationKind,
    MutationTracker,
    StatusMirror,
)
from .models.commands import (
    CommandValidationError,
    DeviceCommand,
    LightsOffCommand,
    LightsOnCommand,
    SetAlarmCommand,
    SetBrightnessCommand,
    ToggleAlarmCommand,
)
from .models.mutation import MutationAlreadyPending
from .repairs import async_create_connection_issue, async_delete_connection_issue

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry

_LOGGER = logging.getLogger(__name__)


class WakeupLightCoordinator(DataUpdateCoordinator[DeviceStatus]):
    """Coordinator for wake-up light status polling and writes."""

    config_entry: ConfigEntry

    def __init__(
        self,
        hass: HomeAssistant,
        config_entry: ConfigEntry,
        client: WakeupLightApiClient,
        update_interval: timedelta,
    ) -> None:
        """Initialize the coordinator."""
        self.client = client
        self.mirror = StatusMirror()
        self.health = ConnectionHealth(MAX_POLL_FAILURES)
        self.mutations = MutationTracker()
        self.alarm_buffer = AlarmEditBuffer()
        self.brightness_buffer = BrightnessEditBuffer()

        self.alarm_saved = False
        self._alarm_saved_unsub: CALLBACK_TYPE | None = None
        self._connection_issue_open = False

        super().__init__(
            hass,
            _LOGGER,
            config_entry=config_entry,
            name=DOMAIN,
            update_interval=update_interval,
        )

    @property
    def status(self) -> DeviceStatus | None:
        """Current mirror snapshot."""
        return self.mirror.snapshot

    @property
    def brightness_max(self) -> int:
        """Configured brightness upper bound."""
        return self.client.brightness_max

    @property
    def connection_state(self) -> ConnectionState:
        """Poller connection state."""
        return self.health.state

    # === Status polling ===

    async def _async_update_data(self) -> DeviceStatus:
        """Read /status and apply it to the mirror if it is the freshest."""
        ticket = self.mirror.issue()
        _LOGGER.debug("Reading status (ticket %d)", ticket)

        try:
            raw_status = await self.client.get_status()
        except WakeupLightApiError as err:
            self.mirror.release(ticket)
            return await self._async_handle_poll_failure(err)

        status = DeviceStatus.from_api(raw_status)
        self.mirror.apply(ticket, status)
        self._sync_buffers()
        await self._async_handle_poll_success()

        # A stale response leaves the newer snapshot in place
        return self.mirror.snapshot or status

    @callback
    def _sync_buffers(self) -> None:
        applied = self.mirror.applied_ticket
        if self.alarm_buffer.sync(applied):
            _LOGGER.debug("Alarm fields follow the device again (ticket %d)", applied)
        if self.brightness_buffer.sync(applied):
            _LOGGER.debug("Sliders follow the device again (ticket %d)", applied)

    async def _async_handle_poll_success(self) -> None:
        previous = self.health.state
        self.health.record_success()

        if self._connection_issue_open:
            await async_delete_connection_issue(self.hass, self.config_entry)
            self._connection_issue_open = False

        if previous is not ConnectionState.HEALTHY:
            _LOGGER.info("Connection to wake-up light restored (was %s)", previous)

    async def _async_handle_poll_failure(self, err: WakeupLightApiError) -> DeviceStatus:
        state = self.health.record_failure(str(err))

        if state is ConnectionState.DISCONNECTED:
            if not self._connection_issue_open:
                _LOGGER.error(
                    "Lost connection to wake-up light after %d failed reads: %s",
                    self.health.failures,
                    err,
                )
                await async_create_connection_issue(
                    self.hass, self.config_entry, str(err)
                )
                self._connection_issue_open = True
            raise UpdateFailed(f"Lost connection to wake-up light: {err}") from err

        snapshot = self.mirror.snapshot
        if snapshot is None:
            raise UpdateFailed(f"Failed to read status: {err}") from err

        _LOGGER.warning(
            "Status read failed (%d/%d), keeping last known status: %s",
            self.health.failures,
            self.health.max_failures,
            err,
        )
        return snapshot

    # === Edit buffers ===

    def _require_status(self) -> DeviceStatus:
        status = self.mirror.snapshot
        if status is None:
            raise WakeupLightException(translation_key="status_unavailable")
        return status

    @callback
    def edit_alarm(
        self, *, hour: str | None = None, minute: str | None = None
    ) -> AlarmFields:
        """Store typed alarm text locally without sending it."""
        changes = {
            name: value
            for name, value in (("hour", hour), ("minute", minute))
            if value is not None
        }
        fields = self.alarm_buffer.edit(self._require_status(), **changes)
        self.async_update_listeners()
        return fields

    @callback
    def preview_brightness(
        self, *, warm: int | None = None, cool: int | None = None
    ) -> BrightnessLevels:
        """Store an intermediate slider position locally without sending it."""
        status = self._require_status()
        target = self._changed_levels(
            self.brightness_buffer.current(status), warm, cool
        )
        self._brightness_command(target)
        levels = self.brightness_buffer.edit(
            status, warm=target.warm, cool=target.cool
        )
        self.async_update_listeners()
        return levels

    # === Writes ===

    async def async_commit_alarm(self) -> None:
        """Validate the alarm fields and send them to the device."""
        status = self._require_status()
        try:
            command = SetAlarmCommand.from_fields(self.alarm_buffer.current(status))
        except CommandValidationError as err:
            _LOGGER.debug("Rejected alarm input %s", err)
            raise InvalidAlarmError(err.field, str(err.value), err.reason) from err

        self._ensure_idle(command.kind)
        token = self.alarm_buffer.commit(status)
        await self._async_dispatch(command, self.alarm_buffer, token)

        self._show_alarm_saved()
        self.async_update_listeners()

    async def async_commit_brightness(
        self, *, warm: int | None = None, cool: int | None = None
    ) -> None:
        """Send the buffered levels, with the released channel replaced."""
        status = self._require_status()
        target = self._changed_levels(
            self.brightness_buffer.current(status), warm, cool
        )
        command = self._brightness_command(target)

        if self.mutations.is_pending(command.kind):
            # The slider stays where it was released
            self.brightness_buffer.edit(status, warm=target.warm, cool=target.cool)
            self.async_update_listeners()
            raise MutationInProgressError(command.kind)

        token = self.brightness_buffer.commit(
            status, warm=target.warm, cool=target.cool
        )
        response = await self._async_dispatch(command, self.brightness_buffer, token)

        _LOGGER.debug(
            "Device acknowledged brightness warm=%s cool=%s",
            response["warm"],
            response["cool"],
        )
        self.async_update_listeners()

    async def async_apply_preset(self, preset: LightPreset) -> None:
        """Send a brightness preset scaled to the firmware range."""
        levels = preset.levels(self.brightness_max)
        _LOGGER.debug("Applying preset %s: %s", preset.key, levels)
        await self.async_commit_brightness(warm=levels.warm, cool=levels.cool)

    async def async_toggle_alarm(self, enabled: bool) -> None:
        """Enable or disable the alarm."""
        try:
            response = await self._async_dispatch(ToggleAlarmCommand(enabled))
        finally:
            self.async_update_listeners()
        _LOGGER.debug(
            "Device acknowledged alarm toggle: set=%s time=%s",
            response["isAlarmSet"],
            response["alarmTime"],
        )

    async def async_lights_on(self) -> None:
        """Turn the lights to full brightness."""
        try:
            await self._async_dispatch(LightsOnCommand())
        finally:
            self.async_update_listeners()

    async def async_lights_off(self) -> None:
        """Turn the lights off."""
        try:
            await self._async_dispatch(LightsOffCommand())
        finally:
            self.async_update_listeners()

    async def _async_dispatch(
        self,
        command: DeviceCommand,
        buffer: EditBuffer[Any] | None = None,
        token: int = 0,
    ) -> Any:
        """Send a command and refresh the mirror once the device accepts it.

        The mirror is never predicted from the command; the status read that
        follows the acknowledgment is the only source of new state. A buffer
        committed under token is rejected if the write does not go through,
        and otherwise held until a read issued after the ack is applied.

        Raises:
            MutationInProgressError: same kind already in flight
            MutationFailedError: transport error, non-2xx or invalid response
        """
        kind = command.kind
        try:
            self.mutations.begin(kind)
        except MutationAlreadyPending as err:
            self._abort_commit(buffer, token)
            raise MutationInProgressError(kind) from err
        self.async_update_listeners()

        try:
            response = await command.async_send(self.client)
        except WakeupLightApiError as err:
            self.mutations.fail(kind, str(err))
            self._abort_commit(buffer, token)
            _LOGGER.error("Failed to %s: %s", kind.replace("_", " "), err)
            raise MutationFailedError(kind, str(err)) from err
        except BaseException as err:
            # Cancelled or crashed writes must not leave the control disabled
            self.mutations.fail(kind, str(err) or type(err).__name__)
            self._abort_commit(buffer, token)
            _LOGGER.debug("Write %s interrupted: %r", kind, err)
            raise

        self.mutations.succeed(kind)
        if buffer is not None:
            buffer.acknowledge(token, self.mirror.last_issued)
        _LOGGER.debug("Device accepted %s, refreshing status", kind)
        await self.async_refresh()
        return response

    @callback
    def _abort_commit(self, buffer: EditBuffer[Any] | None, token: int) -> None:
        if buffer is not None:
            buffer.reject(token)
        self.async_update_listeners()

    def _ensure_idle(self, kind: MutationKind) -> None:
        if self.mutations.is_pending(kind):
            raise MutationInProgressError(kind)

    @staticmethod
    def _changed_levels(
        current: BrightnessLevels, warm: int | None, cool: int | None
    ) -> BrightnessLevels:
        changes = {
            name: value
            for name, value in (("warm", warm), ("cool", cool))
            if value is not None
        }
        return replace(current, **changes)

    def _brightness_command(self, levels: BrightnessLevels) -> SetBrightnessCommand:
        try:
            return SetBrightnessCommand(
                warm=levels.warm,
                cool=levels.cool,
                brightness_max=self.brightness_max,
            )
        except CommandValidationError as err:
            raise BrightnessOutOfRangeError(
                err.field, str(err.value), self.brightness_max
            ) from err

    # === Banners ===

    @callback
    def _show_alarm_saved(self) -> None:
        self._cancel_alarm_saved()
        self.alarm_saved = True
        self._alarm_saved_unsub = async_call_later(
            self.hass, ALARM_SAVED_BANNER_SECONDS, self._hide_alarm_saved
        )

    @callback
    def _hide_alarm_saved(self, _now: datetime) -> None:
        self._alarm_saved_unsub = None
        self.alarm_saved = False
        self.async_update_listeners()

    @callback
    def _cancel_alarm_saved(self) -> None:
        if self._alarm_saved_unsub is not None:
            self._alarm_saved_unsub()
            self._alarm_saved_unsub = None

    # === Connection ===

    @callback
    def async_reconnect(self) -> None:
        """Reload the entry, repeating the initial status load."""
        _LOGGER.info("Reconnecting to wake-up light at %s", self.client.base_url)
        self.hass.config_entries.async_schedule_reload(self.config_entry.entry_id)

    async def async_get_alarm(self) -> dict[str, Any]:
        """Read the alarm straight from the device."""
        return dict(await self.client.get_alarm())

    async def async_shutdown(self) -> None:
        """Cancel the banner timer and stop polling."""
        self._cancel_alarm_saved()
        await super().async_shutdown()
