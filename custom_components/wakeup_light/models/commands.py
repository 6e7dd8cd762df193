"""Command pattern models for device writes.

Each command is an immutable value object that validates its input on
construction and knows how to send itself through the API client.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..api.const import (
    BRIGHTNESS_MIN,
    HOUR_MAX,
    HOUR_MIN,
    MINUTE_MAX,
    MINUTE_MIN,
)
from .buffer import AlarmFields
from .mutation import MutationKind

if TYPE_CHECKING:
    from ..api.client import WakeupLightApiClient


class CommandValidationError(ValueError):
    """User input rejected before any request is made."""

    def __init__(self, field: str, value: Any, reason: str) -> None:
        super().__init__(f"{field}={value!r}: {reason}")
        self.field = field
        self.value = value
        self.reason = reason


def _check_range(field: str, value: int, minimum: int, maximum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise CommandValidationError(field, value, "not a whole number")
    if not minimum <= value <= maximum:
        raise CommandValidationError(
            field, value, f"must be between {minimum} and {maximum}"
        )


def _parse_int(field: str, text: str) -> int:
    digits = text.strip()
    # int() would also take "1_0", signs and non-ASCII digits
    if not (digits.isascii() and digits.isdigit()):
        raise CommandValidationError(field, text, "not a number")
    return int(digits)


@dataclass(frozen=True)
class DeviceCommand(ABC):
    """Base class for device write commands."""

    @property
    @abstractmethod
    def kind(self) -> MutationKind:
        """Mutation kind this command belongs to."""
        ...

    @abstractmethod
    async def async_send(self, client: WakeupLightApiClient) -> Any:
        """Send the command, returning the validated response body if any."""
        ...


@dataclass(frozen=True)
class SetAlarmCommand(DeviceCommand):
    """Set the alarm time."""

    hour: int
    minute: int

    def __post_init__(self) -> None:
        _check_range("hour", self.hour, HOUR_MIN, HOUR_MAX)
        _check_range("minute", self.minute, MINUTE_MIN, MINUTE_MAX)

    @classmethod
    def from_fields(cls, fields: AlarmFields) -> SetAlarmCommand:
        """Parse typed alarm fields.

        Raises:
            CommandValidationError: a field is not a number or out of range.
        """
        return cls(
            hour=_parse_int("hour", fields.hour),
            minute=_parse_int("minute", fields.minute),
        )

    @property
    def kind(self) -> MutationKind:
        return MutationKind.SET_ALARM

    async def async_send(self, client: WakeupLightApiClient) -> None:
        await client.set_alarm(self.hour, self.minute)


@dataclass(frozen=True)
class ToggleAlarmCommand(DeviceCommand):
    """Enable or disable the alarm."""

    enabled: bool

    @property
    def kind(self) -> MutationKind:
        return MutationKind.TOGGLE_ALARM

    async def async_send(self, client: WakeupLightApiClient) -> Any:
        return await client.toggle_alarm(self.enabled)


@dataclass(frozen=True)
class SetBrightnessCommand(DeviceCommand):
    """Set both channel levels at once."""

    warm: int
    cool: int
    brightness_max: int

    def __post_init__(self) -> None:
        _check_range("warm", self.warm, BRIGHTNESS_MIN, self.brightness_max)
        _check_range("cool", self.cool, BRIGHTNESS_MIN, self.brightness_max)

    @property
    def kind(self) -> MutationKind:
        return MutationKind.SET_BRIGHTNESS

    async def async_send(self, client: WakeupLightApiClient) -> Any:
        return await client.set_brightness(self.warm, self.cool)


@dataclass(frozen=True)
class LightsOnCommand(DeviceCommand):
    """Turn the lights to full brightness."""

    @property
    def kind(self) -> MutationKind:
        return MutationKind.LIGHTS_ON

    async def async_send(self, client: WakeupLightApiClient) -> None:
        await client.lights_on()


@dataclass(frozen=True)
class LightsOffCommand(DeviceCommand):
    """Turn the lights off."""

    @property
    def kind(self) -> MutationKind:
        return MutationKind.LIGHTS_OFF

    async def async_send(self, client: WakeupLightApiClient) -> None:
        await client.lights_off()
