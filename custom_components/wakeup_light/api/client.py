"""Wake-up light HTTP API client."""
from __future__ import annotations

import asyncio
import logging
from typing import Any, cast

import aiohttp
import async_timeout
import voluptuous as vol

from .const import (
    DEFAULT_SCHEME,
    ENDPOINT_GET_ALARM,
    ENDPOINT_MANUAL_OFF,
    ENDPOINT_MANUAL_ON,
    ENDPOINT_SET_ALARM,
    ENDPOINT_SET_BRIGHTNESS,
    ENDPOINT_STATUS,
    ENDPOINT_TOGGLE_ALARM,
    REQUEST_TIMEOUT,
    SUPPORTED_BRIGHTNESS_MAX,
)
from .exceptions import (
    WakeupLightApiError,
    WakeupLightConnectionError,
    WakeupLightRequestError,
    WakeupLightResponseError,
)
from .schemas import (
    ALARM_REQUEST_SCHEMA,
    ALARM_RESPONSE_SCHEMA,
    TOGGLE_ALARM_REQUEST_SCHEMA,
    TOGGLE_ALARM_RESPONSE_SCHEMA,
    brightness_schema,
    status_schema,
)
from .types import (
    AlarmPayload,
    BrightnessPayload,
    StatusPayload,
    ToggleAlarmPayload,
)

_LOGGER = logging.getLogger(__name__)


def normalize_base_url(host: str) -> str:
    """Return host as a base URL with a scheme and no trailing slash."""
    base_url = host.strip()
    if "://" not in base_url:
        base_url = f"{DEFAULT_SCHEME}{base_url}"
    return base_url.rstrip("/")


class WakeupLightApiClient:
    """Client for the wake-up light JSON API."""

    def __init__(
        self,
        host: str,
        brightness_max: int,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        """Initialize API client.

        Raises:
            ValueError: brightness_max is not a known firmware range.
        """
        if brightness_max not in SUPPORTED_BRIGHTNESS_MAX:
            raise ValueError(
                f"Unsupported brightness range 0-{brightness_max}, "
                f"expected one of {SUPPORTED_BRIGHTNESS_MAX}"
            )
        self._base_url = normalize_base_url(host)
        self._brightness_max = brightness_max
        self._session = session
        self._owns_session = session is None

        self._status_schema = status_schema(brightness_max)
        self._brightness_request_schema = brightness_schema(brightness_max)
        self._brightness_response_schema = brightness_schema(
            brightness_max, response=True
        )

    async def __aenter__(self) -> WakeupLightApiClient:
        """Async context manager entry."""
        if self._session is None:
            self._session = aiohttp.ClientSession()
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the session if we own it."""
        if self._owns_session and self._session:
            await self._session.close()
            self._session = None

    @property
    def base_url(self) -> str:
        """Return the device base URL."""
        return self._base_url

    @property
    def brightness_max(self) -> int:
        """Return the configured brightness upper bound."""
        return self._brightness_max

    async def _request(
        self,
        method: str,
        endpoint: str,
        json_data: dict[str, Any] | None = None,
        response_schema: vol.Schema | None = None,
    ) -> dict[str, Any] | None:
        """Make an API request.

        Args:
            method: HTTP method (GET, POST)
            endpoint: Endpoint path without leading slash
            json_data: Optional JSON payload
            response_schema: Schema the JSON body must match. When None the
                body is ignored.

        Returns:
            Validated response body, or None when no schema was given.

        Raises:
            WakeupLightConnectionError: Network error or timeout
            WakeupLightResponseError: Body is not JSON or fails the schema
            WakeupLightApiError: Non-2xx status
        """
        if self._session is None:
            self._session = aiohttp.ClientSession()
            self._owns_session = True

        url = f"{self._base_url}/{endpoint}"

        try:
            async with async_timeout.timeout(REQUEST_TIMEOUT):
                async with self._session.request(
                    method,
                    url,
                    headers={"Content-Type": "application/json"},
                    json=json_data,
                ) as response:
                    if response.status < 200 or response.status >= 300:
                        raise WakeupLightApiError(
                            f"HTTP {response.status} {response.reason or ''}".strip(),
                            code=response.status,
                        )

                    if response_schema is None:
                        return None

                    try:
                        data = await response.json(content_type=None)
                    except ValueError as err:
                        raise WakeupLightResponseError(
                            endpoint, "body is not JSON"
                        ) from err

        except asyncio.TimeoutError as err:
            raise WakeupLightConnectionError("Request timed out") from err
        except aiohttp.ClientError as err:
            raise WakeupLightConnectionError(str(err)) from err

        if not isinstance(data, dict):
            raise WakeupLightResponseError(endpoint, "expected a JSON object")
        try:
            return response_schema(data)
        except vol.Invalid as err:
            raise WakeupLightResponseError(endpoint, str(err)) from err

    @staticmethod
    def _validate_request(
        schema: vol.Schema, endpoint: str, payload: dict[str, Any]
    ) -> dict[str, Any]:
        try:
            return schema(payload)
        except vol.Invalid as err:
            raise WakeupLightRequestError(endpoint, str(err)) from err

    # === Status ===

    async def get_status(self) -> StatusPayload:
        """Read the full device status snapshot."""
        data = await self._request(
            "GET", ENDPOINT_STATUS, response_schema=self._status_schema
        )
        return cast(StatusPayload, data)

    async def get_alarm(self) -> AlarmPayload:
        """Read the configured alarm."""
        data = await self._request(
            "GET", ENDPOINT_GET_ALARM, response_schema=ALARM_RESPONSE_SCHEMA
        )
        return cast(AlarmPayload, data)

    # === Commands ===

    async def set_alarm(self, hour: int, minute: int) -> None:
        """Set the alarm time (24-hour clock)."""
        payload = self._validate_request(
            ALARM_REQUEST_SCHEMA, ENDPOINT_SET_ALARM, {"hour": hour, "minute": minute}
        )
        _LOGGER.debug("Set alarm: %02d:%02d", hour, minute)
        await self._request("POST", ENDPOINT_SET_ALARM, payload)

    async def toggle_alarm(self, enabled: bool) -> ToggleAlarmPayload:
        """Enable or disable the alarm."""
        payload = self._validate_request(
            TOGGLE_ALARM_REQUEST_SCHEMA, ENDPOINT_TOGGLE_ALARM, {"enabled": enabled}
        )
        _LOGGER.debug("Toggle alarm: enabled=%s", enabled)
        data = await self._request(
            "POST",
            ENDPOINT_TOGGLE_ALARM,
            payload,
            response_schema=TOGGLE_ALARM_RESPONSE_SCHEMA,
        )
        return cast(ToggleAlarmPayload, data)

    async def set_brightness(self, warm: int, cool: int) -> BrightnessPayload:
        """Set warm and cool channel brightness."""
        payload = self._validate_request(
            self._brightness_request_schema,
            ENDPOINT_SET_BRIGHTNESS,
            {"warm": warm, "cool": cool},
        )
        _LOGGER.debug("Set brightness: warm=%d cool=%d", warm, cool)
        data = await self._request(
            "POST",
            ENDPOINT_SET_BRIGHTNESS,
            payload,
            response_schema=self._brightness_response_schema,
        )
        return cast(BrightnessPayload, data)

    async def lights_on(self) -> None:
        """Turn both channels to full brightness."""
        _LOGGER.debug("Manual lights on")
        await self._request("POST", ENDPOINT_MANUAL_ON)

    async def lights_off(self) -> None:
        """Turn both channels off."""
        _LOGGER.debug("Manual lights off")
        await self._request("POST", ENDPOINT_MANUAL_OFF)
