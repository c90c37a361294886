"""Session counters and elapsed time reporting."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable

__all__ = ["Clock", "StatsSnapshot", "GameStats", "format_elapsed"]

Clock = Callable[[], float]


def format_elapsed(seconds: float) -> str:
    """Format ``seconds`` as zero padded ``MM:SS``."""

    whole = max(0, int(seconds))
    minutes, secs = divmod(whole, 60)
    return f"{minutes:02d}:{secs:02d}"


@dataclass(frozen=True, slots=True)
class StatsSnapshot:
    """Read-only view of the session statistics handed to the UI."""

    elapsed_time: str
    sets_found: int
    hints_used: int
    cards_dealt: int


@dataclass(slots=True)
class GameStats:
    """Monotonic counters owned by a :class:`~setgame.session.GameSession`."""

    clock: Clock = field(default=time.monotonic, repr=False)
    sets_found: int = 0
    hints_used: int = 0
    cards_dealt: int = 0
    started_at: float = field(init=False)
    _last_elapsed: float = field(init=False, default=0.0, repr=False)

    def __post_init__(self) -> None:
        self.started_at = self.clock()

    def record_deal(self, count: int) -> None:
        if count < 0:
            raise ValueError("count must be non-negative")
        self.cards_dealt += count

    def record_set(self) -> None:
        self.sets_found += 1

    def record_hint(self) -> None:
        self.hints_used += 1

    def elapsed_seconds(self) -> float:
        """Seconds since the session started, never decreasing between calls."""

        elapsed = max(self._last_elapsed, self.clock() - self.started_at)
        self._last_elapsed = elapsed
        return elapsed

    def elapsed_time(self) -> str:
        return format_elapsed(self.elapsed_seconds())

    def snapshot(self) -> StatsSnapshot:
        return StatsSnapshot(
            elapsed_time=self.elapsed_time(),
            sets_found=self.sets_found,
            hints_used=self.hints_used,
            cards_dealt=self.cards_dealt,
        )
