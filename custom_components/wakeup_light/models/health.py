"""Connection health of the status poller.

HEALTHY -> DEGRADED(n) -> DISCONNECTED

Each failed status read moves one step towards DISCONNECTED; the stale
snapshot keeps being shown while DEGRADED. Any successful read returns to
HEALTHY.
"""

from __future__ import annotations

from enum import StrEnum
import logging

_LOGGER = logging.getLogger(__name__)


class ConnectionState(StrEnum):
    """Poller connection states."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    DISCONNECTED = "disconnected"


class ConnectionHealth:
    """Track consecutive status read failures."""

    def __init__(self, max_failures: int) -> None:
        if max_failures < 1:
            raise ValueError("max_failures must be at least 1")
        self._max_failures = max_failures
        self._failures = 0
        self._last_error: str | None = None

    def record_success(self) -> ConnectionState:
        """Record a successful read."""
        if self._failures:
            _LOGGER.debug(
                "Status read succeeded, resetting health (was %d failures)",
                self._failures,
            )
        self._failures = 0
        self._last_error = None
        return self.state

    def record_failure(self, error: str) -> ConnectionState:
        """Record a failed read and return the resulting state."""
        self._failures = min(self._failures + 1, self._max_failures)
        self._last_error = error
        return self.state

    @property
    def state(self) -> ConnectionState:
        """Current connection state."""
        if self._failures == 0:
            return ConnectionState.HEALTHY
        if self._failures < self._max_failures:
            return ConnectionState.DEGRADED
        return ConnectionState.DISCONNECTED

    @property
    def failures(self) -> int:
        """Consecutive failures, capped at max_failures."""
        return self._failures

    @property
    def max_failures(self) -> int:
        """Failures needed to reach DISCONNECTED."""
        return self._max_failures

    @property
    def last_error(self) -> str | None:
        """Message of the most recent failure, cleared on success."""
        return self._last_error
