"""Exceptions for the wake-up light API client."""
from __future__ import annotations


class WakeupLightApiError(Exception):
    """Base exception for wake-up light API errors."""

    def __init__(self, message: str, code: int | None = None) -> None:
        """Initialize the exception."""
        super().__init__(message)
        self.code = code


class WakeupLightConnectionError(WakeupLightApiError):
    """Connection error - device unreachable or request timed out."""

    def __init__(self, message: str = "Failed to connect to wake-up light") -> None:
        """Initialize connection error."""
        super().__init__(message)


class WakeupLightResponseError(WakeupLightApiError):
    """Response body missing, not JSON, or failing schema validation.

    Handled exactly like a transport failure by callers.
    """

    def __init__(self, endpoint: str, reason: str) -> None:
        """Initialize response error."""
        super().__init__(f"Invalid response from /{endpoint}: {reason}")
        self.endpoint = endpoint


class WakeupLightRequestError(WakeupLightApiError):
    """Request payload failed validation and was not sent."""

    def __init__(self, endpoint: str, reason: str) -> None:
        """Initialize request error."""
        super().__init__(f"Invalid request for /{endpoint}: {reason}")
        self.endpoint = endpoint
