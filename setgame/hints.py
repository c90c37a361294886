"""Hint visibility state machine."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Sequence

from .rules import Triple

logger = logging.getLogger(__name__)


class HintPhase(str, Enum):
    """Whether the hint highlight is currently on screen."""

    HIDDEN = "hidden"
    SHOWN = "shown"


@dataclass(slots=True)
class HintState:
    """Visibility flag plus the triple recorded by the last reveal."""

    visible: bool = False
    triple: Triple | None = None

    @property
    def phase(self) -> HintPhase:
        return HintPhase.SHOWN if self.visible else HintPhase.HIDDEN

    @property
    def current(self) -> Triple | None:
        """Return the highlighted triple, or ``None`` while hidden."""

        return self.triple if self.visible else None

    def toggle(self, find_matches: Callable[[], Sequence[Triple]]) -> bool:
        """Flip visibility and return ``True`` when a hint was consumed.

        Revealing runs ``find_matches`` and records the first triple. With no
        matches the hint is still shown but nothing is highlighted. Hiding
        leaves the recorded triple untouched.
        """

        if self.visible:
            self.visible = False
            logger.debug("hint hidden")
            return False

        matches = find_matches()
        self.visible = True
        if not matches:
            self.triple = None
            logger.debug("hint shown with no match on board")
            return False
        first, second, third = matches[0]
        self.triple = (first, second, third)
        logger.debug("hint shown for %s", self.triple)
        return True

    def hide(self) -> None:
        self.visible = False

    def is_hint_card(self, index: int) -> bool:
        return self.visible and self.triple is not None and index in self.triple
