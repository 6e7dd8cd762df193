"""Wake-up light HTTP API client package."""
from __future__ import annotations

from .client import WakeupLightApiClient, normalize_base_url
from .const import (
    BRIGHTNESS_MAX_10BIT,
    BRIGHTNESS_MAX_8BIT,
    BRIGHTNESS_MIN,
    SUPPORTED_BRIGHTNESS_MAX,
)
from .exceptions import (
    WakeupLightApiError,
    WakeupLightConnectionError,
    WakeupLightRequestError,
    WakeupLightResponseError,
)

__all__ = [
    # Client
    "WakeupLightApiClient",
    "normalize_base_url",
    # Exceptions
    "WakeupLightApiError",
    "WakeupLightConnectionError",
    "WakeupLightRequestError",
    "WakeupLightResponseError",
    # Constants - Ranges
    "BRIGHTNESS_MAX_10BIT",
    "BRIGHTNESS_MAX_8BIT",
    "BRIGHTNESS_MIN",
    "SUPPORTED_BRIGHTNESS_MAX",
]
