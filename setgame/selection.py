"""Manual three-card selection with timed rejection, for interactive front ends."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, List

from .rules import MATCH_SIZE
from .stats import Clock

if TYPE_CHECKING:
    from .session import GameSession


class SelectionOutcome(str, Enum):
    """Result of submitting the current selection to a session."""

    PENDING = "pending"
    MATCHED = "matched"
    REJECTED = "rejected"


@dataclass(slots=True)
class SelectionTracker:
    """Tracks up to three picked board positions.

    A full selection that is not a match stays visible until ``timeout``
    seconds have passed, after which :meth:`expire` clears it.
    """

    timeout: float = 1.0
    clock: Clock = field(default=time.monotonic, repr=False)
    indices: List[int] = field(default_factory=list)
    rejected_at: float | None = None

    def __post_init__(self) -> None:
        if self.timeout < 0:
            raise ValueError("timeout must be non-negative")

    def is_selected(self, index: int) -> bool:
        return index in self.indices

    @property
    def is_complete(self) -> bool:
        return len(self.indices) == MATCH_SIZE

    def toggle(self, index: int) -> None:
        """Select or deselect ``index``; extra picks beyond three are ignored."""

        if index in self.indices:
            self.indices.remove(index)
            self.rejected_at = None
        elif len(self.indices) < MATCH_SIZE:
            self.indices.append(index)

    def clear(self) -> None:
        self.indices.clear()
        self.rejected_at = None

    def submit(self, session: "GameSession") -> SelectionOutcome:
        """Remove the selected cards from ``session`` when they form a match."""

        if not self.is_complete:
            return SelectionOutcome.PENDING
        first, second, third = self.indices
        if session.is_match_at(first, second, third):
            session.remove_match(first, second, third)
            self.clear()
            return SelectionOutcome.MATCHED
        if self.rejected_at is None:
            self.rejected_at = self.clock()
        return SelectionOutcome.REJECTED

    def expire(self) -> bool:
        """Clear a rejected selection once its timeout has elapsed."""

        if self.rejected_at is None:
            return False
        if self.clock() - self.rejected_at < self.timeout:
            return False
        self.clear()
        return True
