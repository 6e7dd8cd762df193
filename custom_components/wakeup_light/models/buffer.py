"""Local edit buffers shadowing the status mirror.

A control shows the mirror value while its buffer is SYNCED. The first user
interaction seeds the buffer from the mirror and moves it to EDITING; from
then on the control shows the local value and status refreshes cannot
overwrite it. A commit moves the buffer to COMMITTING under a fresh token.

When the device accepts the write, the commit is acknowledged with the last
status ticket issued so far. The buffer stays COMMITTING until a status read
issued after that ticket has been applied to the mirror; only then does it
return to SYNCED. Until then the control keeps showing the committed value,
even if the forced read fails. A value typed or dragged while the commit is
in flight moves the buffer back to EDITING, so the commit never releases it.
A rejected commit goes back to EDITING with the value untouched.

    SYNCED --edit--> EDITING --commit--> COMMITTING --acknowledge+sync--> SYNCED
                        ^                    |
                        +------reject--------+
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Any, Generic, TypeVar

from .status import DeviceStatus


class BufferState(StrEnum):
    """Edit buffer states."""

    SYNCED = "synced"
    EDITING = "editing"
    COMMITTING = "committing"


@dataclass(frozen=True)
class AlarmFields:
    """Alarm hour and minute exactly as typed."""

    hour: str
    minute: str


@dataclass(frozen=True)
class BrightnessLevels:
    """Warm and cool channel levels."""

    warm: int
    cool: int


T = TypeVar("T", AlarmFields, BrightnessLevels)


class EditBuffer(ABC, Generic[T]):
    """Base class for a per-control local override of mirror state."""

    def __init__(self) -> None:
        self._state = BufferState.SYNCED
        self._value: T | None = None
        self._token = 0
        self._sync_after: int | None = None

    @abstractmethod
    def seed(self, status: DeviceStatus) -> T:
        """Derive the buffer value from a mirror snapshot."""

    @property
    def state(self) -> BufferState:
        """Current buffer state."""
        return self._state

    @property
    def awaiting_sync(self) -> bool:
        """True while an acknowledged commit waits for a fresh status read."""
        return self._state is BufferState.COMMITTING and self._sync_after is not None

    def resolve(self, status: DeviceStatus | None) -> T | None:
        """Return the value a control should display."""
        if self._state is BufferState.SYNCED:
            return self.seed(status) if status is not None else None
        return self._value

    def current(self, status: DeviceStatus) -> T:
        """Return the displayed value for a loaded mirror."""
        return self._base(status)

    def edit(self, status: DeviceStatus | None, **changes: Any) -> T:
        """Apply a local change without committing it."""
        self._value = replace(self._base(status), **changes)
        self._state = BufferState.EDITING
        return self._value

    def commit(self, status: DeviceStatus | None, **changes: Any) -> int:
        """Freeze the current value (plus changes) for sending.

        Returns:
            Token identifying this commit for acknowledge/reject.
        """
        self._value = replace(self._base(status), **changes)
        self._state = BufferState.COMMITTING
        self._sync_after = None
        self._token += 1
        return self._token

    def acknowledge(self, token: int, last_issued: int) -> bool:
        """Record that the device accepted commit token.

        The buffer is released by the first status read with a ticket above
        last_issued, see sync().
        """
        if self._state is not BufferState.COMMITTING or token != self._token:
            return False
        self._sync_after = last_issued
        return True

    def sync(self, applied_ticket: int) -> bool:
        """Return to SYNCED if the mirror holds a read newer than the ack."""
        if self._state is not BufferState.COMMITTING or self._sync_after is None:
            return False
        if applied_ticket <= self._sync_after:
            return False
        self.reset()
        return True

    def reject(self, token: int) -> bool:
        """Keep the committed value as an edit after a failed commit."""
        if self._state is not BufferState.COMMITTING or token != self._token:
            return False
        self._state = BufferState.EDITING
        return True

    def reset(self) -> None:
        """Drop any local value and follow the mirror again."""
        self._state = BufferState.SYNCED
        self._value = None
        self._sync_after = None

    def _base(self, status: DeviceStatus | None) -> T:
        if self._state is not BufferState.SYNCED and self._value is not None:
            return self._value
        if status is None:
            raise ValueError("Cannot start editing before status is loaded")
        return self.seed(status)


class AlarmEditBuffer(EditBuffer[AlarmFields]):
    """Buffer behind the alarm hour and minute text fields."""

    def seed(self, status: DeviceStatus) -> AlarmFields:
        return AlarmFields(hour=status.alarm_hour, minute=status.alarm_minute)


class BrightnessEditBuffer(EditBuffer[BrightnessLevels]):
    """Buffer behind the warm and cool sliders."""

    def seed(self, status: DeviceStatus) -> BrightnessLevels:
        return BrightnessLevels(
            warm=status.warm_brightness, cool=status.cool_brightness
        )
