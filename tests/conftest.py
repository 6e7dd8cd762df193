"""Shared test fixtures for wake-up light integration tests."""
from __future__ import annotations

from collections.abc import Callable, Generator
from datetime import timedelta
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from homeassistant.const import CONF_HOST, CONF_SCAN_INTERVAL
from homeassistant.core import HomeAssistant
from pytest_homeassistant_custom_component.common import MockConfigEntry

from custom_components.wakeup_light.const import CONF_BRIGHTNESS_MAX, DOMAIN
from custom_components.wakeup_light.coordinator import WakeupLightCoordinator
from custom_components.wakeup_light.models import DeviceStatus

BASE_URL = "http://192.168.1.50"


# ==============================================================================
# Config Entry Fixtures
# ==============================================================================


@pytest.fixture
def mock_config_entry() -> MockConfigEntry:
    """Create a mock wake-up light config entry."""
    return MockConfigEntry(
        domain=DOMAIN,
        title="Bedroom light",
        data={
            CONF_HOST: BASE_URL,
            CONF_BRIGHTNESS_MAX: 1023,
        },
        options={
            CONF_SCAN_INTERVAL: 1,
        },
        entry_id="test_entry_id",
        unique_id=BASE_URL,
    )


# ==============================================================================
# Device Status Fixtures
# ==============================================================================


def make_status_payload(**overrides: Any) -> dict[str, Any]:
    """Build a `/status` body, overriding selected fields."""
    payload: dict[str, Any] = {
        "currentTime": "22:15:03",
        "alarmTime": "07:00",
        "isAlarmSet": True,
        "isSunriseActive": False,
        "warmBrightness": 400,
        "coolBrightness": 100,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def status_factory() -> Callable[..., dict[str, Any]]:
    """Return the `/status` body builder."""
    return make_status_payload


@pytest.fixture
def status_payload() -> dict[str, Any]:
    """Create a valid `/status` body."""
    return make_status_payload()


@pytest.fixture
def device_status(status_payload: dict[str, Any]) -> DeviceStatus:
    """Create the snapshot matching status_payload."""
    return DeviceStatus.from_api(status_payload)


# ==============================================================================
# API Client Fixtures
# ==============================================================================


@pytest.fixture
def mock_api_client(status_payload: dict[str, Any]) -> MagicMock:
    """Create a mocked wake-up light API client."""
    client = MagicMock()
    client.base_url = BASE_URL
    client.brightness_max = 1023

    client.get_status = AsyncMock(return_value=status_payload)
    client.get_alarm = AsyncMock(return_value={"hour": 7, "minute": 0, "isSet": True})
    client.set_alarm = AsyncMock(return_value=None)
    client.toggle_alarm = AsyncMock(
        return_value={"isAlarmSet": False, "alarmTime": "07:00"}
    )
    client.set_brightness = AsyncMock(return_value={"warm": 400, "cool": 100})
    client.lights_on = AsyncMock(return_value=None)
    client.lights_off = AsyncMock(return_value=None)
    client.close = AsyncMock(return_value=None)

    return client


# ==============================================================================
# Coordinator Fixtures
# ==============================================================================


@pytest.fixture
def coordinator(
    hass: HomeAssistant,
    mock_config_entry: MockConfigEntry,
    mock_api_client: MagicMock,
) -> WakeupLightCoordinator:
    """Create a real coordinator backed by the mocked client."""
    mock_config_entry.add_to_hass(hass)
    return WakeupLightCoordinator(
        hass,
        mock_config_entry,
        mock_api_client,
        update_interval=timedelta(seconds=1),
    )


@pytest.fixture
async def loaded_coordinator(
    coordinator: WakeupLightCoordinator,
) -> WakeupLightCoordinator:
    """Coordinator after its initial status load."""
    await coordinator.async_refresh()
    assert coordinator.status is not None
    return coordinator


@pytest.fixture
def mock_coordinator(
    hass: HomeAssistant,
    mock_config_entry: MockConfigEntry,
    mock_api_client: MagicMock,
    device_status: DeviceStatus,
) -> MagicMock:
    """Create a mocked coordinator for entity tests."""
    from custom_components.wakeup_light.models import (
        AlarmEditBuffer,
        BrightnessEditBuffer,
        ConnectionState,
        MutationTracker,
        StatusMirror,
    )

    mirror = StatusMirror()
    mirror.apply(mirror.issue(), device_status)

    coordinator = MagicMock(spec=WakeupLightCoordinator)
    coordinator.hass = hass
    coordinator.config_entry = mock_config_entry
    coordinator.client = mock_api_client
    coordinator.brightness_max = 1023
    coordinator.mirror = mirror
    coordinator.status = device_status
    coordinator.data = device_status
    coordinator.last_update_success = True
    coordinator.connection_state = ConnectionState.HEALTHY
    coordinator.mutations = MutationTracker()
    coordinator.alarm_buffer = AlarmEditBuffer()
    coordinator.brightness_buffer = BrightnessEditBuffer()
    coordinator.alarm_saved = False
    coordinator.async_add_listener = MagicMock()
    coordinator.async_request_refresh = AsyncMock()
    coordinator.async_commit_alarm = AsyncMock()
    coordinator.async_commit_brightness = AsyncMock()
    coordinator.async_apply_preset = AsyncMock()
    coordinator.async_toggle_alarm = AsyncMock()
    coordinator.async_lights_on = AsyncMock()
    coordinator.async_lights_off = AsyncMock()

    return coordinator


# ==============================================================================
# Home Assistant Fixtures
# ==============================================================================


@pytest.fixture(autouse=True)
def auto_enable_custom_integrations(
    enable_custom_integrations: Generator[None, None, None],
) -> Generator[None, None, None]:
    """Enable custom integrations for all tests."""
    yield


@pytest.fixture
async def init_integration(
    hass: HomeAssistant,
    mock_config_entry: MockConfigEntry,
    mock_api_client: MagicMock,
) -> MockConfigEntry:
    """Set up the integration with the mocked client."""
    mock_config_entry.add_to_hass(hass)

    with patch(
        "custom_components.wakeup_light.WakeupLightApiClient",
        return_value=mock_api_client,
    ):
        assert await hass.config_entries.async_setup(mock_config_entry.entry_id)
        await hass.async_block_till_done()

    return mock_config_entry
