"""In-flight flags and last errors for device writes.

Each kind of write is tracked on its own so that one pending request only
disables the control that triggered it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class MutationKind(StrEnum):
    """Kinds of user-triggered device writes."""

    SET_ALARM = "set_alarm"
    TOGGLE_ALARM = "toggle_alarm"
    SET_BRIGHTNESS = "set_brightness"
    LIGHTS_ON = "lights_on"
    LIGHTS_OFF = "lights_off"


class MutationAlreadyPending(Exception):
    """A write of this kind is already in flight."""

    def __init__(self, kind: MutationKind) -> None:
        super().__init__(f"{kind} is already in progress")
        self.kind = kind


@dataclass(frozen=True)
class MutationStatus:
    """Snapshot of one mutation kind."""

    kind: MutationKind
    pending: bool
    last_error: str | None


class MutationTracker:
    """Track pending writes and their errors per kind."""

    def __init__(self) -> None:
        self._pending: set[MutationKind] = set()
        self._errors: dict[MutationKind, str] = {}

    def begin(self, kind: MutationKind) -> None:
        """Mark kind in flight and clear its previous error.

        Raises:
            MutationAlreadyPending: kind is already in flight.
        """
        if kind in self._pending:
            raise MutationAlreadyPending(kind)
        self._pending.add(kind)
        self._errors.pop(kind, None)

    def succeed(self, kind: MutationKind) -> None:
        """Mark kind finished successfully."""
        self._pending.discard(kind)

    def fail(self, kind: MutationKind, error: str) -> None:
        """Mark kind finished with an error."""
        self._pending.discard(kind)
        self._errors[kind] = error

    def is_pending(self, kind: MutationKind) -> bool:
        """True while a write of kind is in flight."""
        return kind in self._pending

    def last_error(self, kind: MutationKind) -> str | None:
        """Error of the last failed write of kind, if it was the latest one."""
        return self._errors.get(kind)

    def status(self, kind: MutationKind) -> MutationStatus:
        """Return a snapshot for kind."""
        return MutationStatus(
            kind=kind,
            pending=self.is_pending(kind),
            last_error=self.last_error(kind),
        )

    @property
    def pending(self) -> frozenset[MutationKind]:
        """All kinds currently in flight."""
        return frozenset(self._pending)
