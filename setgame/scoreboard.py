"""Helpers for tracking results across several SET sessions."""

from __future__ import annotations

from dataclasses import dataclass, field

from .stats import StatsSnapshot

__all__ = ["SessionSummary", "HistoryTotals", "SessionHistory"]


@dataclass(frozen=True, slots=True)
class SessionSummary:
    """Summary captured when a session ends."""

    session_number: int
    seed: int | None
    stats: StatsSnapshot
    cards_left_on_board: int
    cards_left_in_deck: int

    @property
    def cleared(self) -> bool:
        """``True`` when every card was matched away."""

        return self.cards_left_on_board == 0 and self.cards_left_in_deck == 0


@dataclass(frozen=True, slots=True)
class HistoryTotals:
    """Aggregate totals accumulated across all recorded sessions."""

    sessions: int
    sets_found: int
    hints_used: int
    cards_dealt: int
    leftover_cards: int


@dataclass(slots=True)
class SessionHistory:
    """Mutable tracker that accumulates session summaries."""

    sessions: list[SessionSummary] = field(default_factory=list)
    _sets: int = field(init=False, default=0, repr=False)
    _hints: int = field(init=False, default=0, repr=False)
    _dealt: int = field(init=False, default=0, repr=False)
    _leftover: int = field(init=False, default=0, repr=False)

    def record(self, summary: SessionSummary) -> None:
        """Record ``summary`` and update cumulative totals."""

        if summary.cards_left_on_board < 0 or summary.cards_left_in_deck < 0:
            raise ValueError("card counts must be non-negative")
        self.sessions.append(summary)
        self._sets += summary.stats.sets_found
        self._hints += summary.stats.hints_used
        self._dealt += summary.stats.cards_dealt
        self._leftover += summary.cards_left_on_board

    def totals(self) -> HistoryTotals:
        return HistoryTotals(
            sessions=len(self.sessions),
            sets_found=self._sets,
            hints_used=self._hints,
            cards_dealt=self._dealt,
            leftover_cards=self._leftover,
        )
