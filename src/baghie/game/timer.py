"""Advisory per-turn timer.

Running over the limit only produces a warning; it never rejects a move.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

_LOGGER = logging.getLogger(__name__)

DEFAULT_TURN_LIMIT = 15.0  # seconds


@dataclass(frozen=True, slots=True)
class TurnTiming:
    """How long a finished turn took."""

    elapsed: float
    limit: float

    @property
    def overdue(self) -> bool:
        return self.elapsed > self.limit


class TurnTimer:
    """Measures how long the player to move takes to answer.

    Uses monotonic time. A limit of ``float("inf")`` disables the warning.
    """

    __slots__ = ("_limit", "_started_at")

    def __init__(self, limit: float = DEFAULT_TURN_LIMIT) -> None:
        if limit <= 0:
            raise ValueError(f"Turn limit must be positive, got {limit}")
        self._limit = limit
        self._started_at: float | None = None

    @property
    def limit(self) -> float:
        return self._limit

    @property
    def is_running(self) -> bool:
        return self._started_at is not None

    def start(self) -> None:
        self._started_at = time.monotonic()

    def elapsed(self) -> float:
        if self._started_at is None:
            return 0.0
        return time.monotonic() - self._started_at

    def stop(self) -> TurnTiming:
        """Stop timing and report the turn; warns when over the limit."""
        timing = TurnTiming(self.elapsed(), self._limit)
        self._started_at = None
        if timing.overdue:
            _LOGGER.warning(
                "Turn took %.1fs (limit %.0fs)", timing.elapsed, timing.limit
            )
        return timing
