"""Test wake-up light alarm fields."""
from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from homeassistant.core import HomeAssistant

from custom_components.wakeup_light.entity_descriptions.text import TEXT_DESCRIPTIONS
from custom_components.wakeup_light.models import MutationKind
from custom_components.wakeup_light.text import WakeupLightAlarmText, async_setup_entry


class TestAsyncSetupEntry:
    """Test platform setup."""

    @pytest.mark.asyncio
    async def test_setup_entry_creates_fields(
        self,
        hass: HomeAssistant,
        mock_config_entry,
        mock_coordinator,
    ):
        """Test setup creates the hour and minute fields."""
        mock_config_entry.runtime_data = MagicMock()
        mock_config_entry.runtime_data.coordinator = mock_coordinator
        async_add_entities = MagicMock()

        await async_setup_entry(hass, mock_config_entry, async_add_entities)

        entities = list(async_add_entities.call_args[0][0])
        assert [entity.entity_description.key for entity in entities] == [
            "alarm_hour",
            "alarm_minute",
        ]


class TestWakeupLightAlarmText:
    """Test WakeupLightAlarmText class."""

    def test_value_from_mirror(self, mock_coordinator):
        """Test the fields show the mirrored alarm when not editing."""
        hour = WakeupLightAlarmText(mock_coordinator, TEXT_DESCRIPTIONS["alarm_hour"])
        minute = WakeupLightAlarmText(
            mock_coordinator, TEXT_DESCRIPTIONS["alarm_minute"]
        )

        assert hour.native_value == "07"
        assert minute.native_value == "00"
        assert hour.extra_state_attributes == {"edit_state": "synced"}

    def test_value_from_buffer(self, mock_coordinator, device_status):
        """Test typed text wins over the mirror."""
        hour = WakeupLightAlarmText(mock_coordinator, TEXT_DESCRIPTIONS["alarm_hour"])
        mock_coordinator.alarm_buffer.edit(device_status, hour="25")

        assert hour.native_value == "25"

    @pytest.mark.asyncio
    async def test_typing_only_edits(self, mock_coordinator):
        """Test typing goes to the buffer and sends nothing."""
        minute = WakeupLightAlarmText(
            mock_coordinator, TEXT_DESCRIPTIONS["alarm_minute"]
        )

        await minute.async_set_value("45")

        mock_coordinator.edit_alarm.assert_called_once_with(minute="45")
        mock_coordinator.async_commit_alarm.assert_not_called()

    def test_available_while_alarm_saving(self, mock_coordinator):
        """Test the fields stay editable while the alarm is being saved."""
        hour = WakeupLightAlarmText(mock_coordinator, TEXT_DESCRIPTIONS["alarm_hour"])
        mock_coordinator.mutations.begin(MutationKind.SET_ALARM)

        assert hour.available is True
