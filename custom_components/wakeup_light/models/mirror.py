"""Status mirror: the single cached copy of device status.

Every status read takes a ticket from a monotonically increasing counter
before it is sent. A response is applied only if its ticket is newer than
the ticket of the snapshot currently held, so a slow read that completes
after a fresher one is discarded instead of rolling the mirror back.
"""

from __future__ import annotations

from datetime import UTC, datetime
import logging

from .status import DeviceStatus

_LOGGER = logging.getLogger(__name__)


class StatusMirror:
    """Owned cache of the last confirmed device status."""

    def __init__(self) -> None:
        self._last_issued = 0
        self._applied_ticket = 0
        self._outstanding: set[int] = set()
        self._snapshot: DeviceStatus | None = None
        self._updated_at: datetime | None = None

    def issue(self) -> int:
        """Reserve a ticket for a status read about to be sent."""
        self._last_issued += 1
        self._outstanding.add(self._last_issued)
        return self._last_issued

    def apply(
        self,
        ticket: int,
        status: DeviceStatus,
        now: datetime | None = None,
    ) -> bool:
        """Replace the snapshot with status if ticket is the freshest seen.

        Returns:
            True if the snapshot was replaced, False if the response was stale.
        """
        self._outstanding.discard(ticket)
        if ticket <= self._applied_ticket:
            _LOGGER.debug(
                "Discarding stale status response (ticket %d, applied %d)",
                ticket,
                self._applied_ticket,
            )
            return False

        self._snapshot = status
        self._applied_ticket = ticket
        self._updated_at = now or datetime.now(UTC)
        return True

    def release(self, ticket: int) -> None:
        """Forget a ticket whose read failed."""
        self._outstanding.discard(ticket)

    @property
    def snapshot(self) -> DeviceStatus | None:
        """Current snapshot, or None until the first successful read."""
        return self._snapshot

    @property
    def applied_ticket(self) -> int:
        """Ticket of the snapshot currently held (0 when empty)."""
        return self._applied_ticket

    @property
    def last_issued(self) -> int:
        """Most recently issued ticket."""
        return self._last_issued

    @property
    def updated_at(self) -> datetime | None:
        """When the current snapshot was applied."""
        return self._updated_at

    @property
    def read_in_flight(self) -> bool:
        """True while any issued read has neither been applied nor released."""
        return bool(self._outstanding)
