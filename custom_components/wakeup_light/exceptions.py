"""Translatable exceptions for the wake-up light integration.

These are raised from entity actions so the frontend shows the message next
to the control the user just used.

Exception Hierarchy:
    WakeupLightException (HomeAssistantError)
    ├── MutationFailedError - device rejected or never received a write
    └── MutationInProgressError - same write already in flight
    WakeupLightValidationError (ServiceValidationError)
    ├── InvalidAlarmError - alarm fields not a valid time
    └── BrightnessOutOfRangeError - level outside the firmware range
"""

from __future__ import annotations

from homeassistant.exceptions import HomeAssistantError, ServiceValidationError

from .const import DOMAIN


class WakeupLightException(HomeAssistantError):
    """Base exception for the integration with translation support.

    Attributes:
        translation_domain: Always set to DOMAIN ("wakeup_light")
        translation_key: Key to look up in strings.json exceptions section
        translation_placeholders: Dynamic values to substitute in message
    """

    translation_domain: str = DOMAIN
    translation_key: str = "unknown_error"

    def __init__(
        self,
        translation_key: str | None = None,
        translation_placeholders: dict[str, str] | None = None,
    ) -> None:
        """Initialize translatable exception."""
        effective_key = (
            translation_key if translation_key is not None else type(self).translation_key
        )
        super().__init__(
            translation_domain=type(self).translation_domain,
            translation_key=effective_key,
            translation_placeholders=translation_placeholders or {},
        )


class MutationFailedError(WakeupLightException):
    """A device write failed (transport error, non-2xx or invalid response)."""

    translation_key = "mutation_failed"

    def __init__(self, action: str, error: str) -> None:
        """Initialize with the failed action and the underlying error."""
        super().__init__(
            translation_placeholders={"action": action, "error": error},
        )
        self.action = action
        self.error = error


class MutationInProgressError(WakeupLightException):
    """The same write is still waiting for the device."""

    translation_key = "mutation_in_progress"

    def __init__(self, action: str) -> None:
        """Initialize with the pending action."""
        super().__init__(translation_placeholders={"action": action})
        self.action = action


class WakeupLightValidationError(ServiceValidationError):
    """Base for input rejected before any request is sent."""

    translation_domain: str = DOMAIN
    translation_key: str = "invalid_input"

    def __init__(self, translation_placeholders: dict[str, str]) -> None:
        """Initialize translatable validation error."""
        super().__init__(
            translation_domain=type(self).translation_domain,
            translation_key=type(self).translation_key,
            translation_placeholders=translation_placeholders,
        )


class InvalidAlarmError(WakeupLightValidationError):
    """Alarm hour or minute is not a number or out of range.

    Raised when:
    - A field is empty or contains non-digits
    - Hour is outside 00-23 or minute outside 00-59
    """

    translation_key = "invalid_alarm"

    def __init__(self, field: str, value: str, reason: str) -> None:
        """Initialize with the offending field."""
        super().__init__({"field": field, "value": value, "reason": reason})
        self.field = field


class BrightnessOutOfRangeError(WakeupLightValidationError):
    """A brightness level falls outside the configured firmware range."""

    translation_key = "brightness_out_of_range"

    def __init__(self, channel: str, value: str, maximum: int) -> None:
        """Initialize with the offending channel."""
        super().__init__(
            {"channel": channel, "value": value, "maximum": str(maximum)}
        )
        self.channel = channel
