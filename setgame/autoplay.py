"""Self-play harness that runs seeded SET sessions to exhaustion."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from . import scoreboard
from .session import GameSession, new_game
from .state import SessionConfig

__all__ = ["AutoplayReport", "play_session", "run_autoplay"]

logger = logging.getLogger(__name__)

TURN_LIMIT = 200


@dataclass(frozen=True, slots=True)
class AutoplayReport:
    """Summary of an autoplay run across several sessions."""

    history: scoreboard.SessionHistory
    totals: scoreboard.HistoryTotals


def _take_turn(session: GameSession, use_hints: bool) -> bool:
    """Play one step; return ``False`` once nothing more can happen."""

    if use_hints:
        if not session.hint.visible:
            session.toggle_hint()
        triple = session.current_hint
        if triple is None:
            # hide the empty hint so the next reveal is counted again
            session.toggle_hint()
    else:
        matches = session.find_all_matches()
        triple = matches[0] if matches else None

    if triple is not None:
        session.remove_match(*triple)
        return True
    return session.deal_three() > 0


def play_session(session: GameSession, *, use_hints: bool = True) -> int:
    """Drive ``session`` until the deck is empty and no match is left.

    Returns the number of steps taken.
    """

    for step in range(TURN_LIMIT):
        if not _take_turn(session, use_hints):
            return step
    logger.warning("session stopped after %d steps", TURN_LIMIT)
    return TURN_LIMIT


def run_autoplay(sessions: int, *, seed: int = 0, use_hints: bool = True) -> AutoplayReport:
    """Play ``sessions`` games with seeds drawn from ``seed``."""

    if sessions <= 0:
        raise ValueError("sessions must be positive")
    rng = random.Random(seed)
    history = scoreboard.SessionHistory()
    for number in range(1, sessions + 1):
        session_seed = rng.randrange(0, 2**63)
        session = new_game(SessionConfig(seed=session_seed))
        steps = play_session(session, use_hints=use_hints)
        summary = scoreboard.SessionSummary(
            session_number=number,
            seed=session_seed,
            stats=session.get_stats(),
            cards_left_on_board=len(session.board),
            cards_left_in_deck=session.deck_size,
        )
        history.record(summary)
        logger.info(
            "session %d: %d set(s) in %d step(s), %d card(s) left",
            number,
            summary.stats.sets_found,
            steps,
            summary.cards_left_on_board,
        )
    return AutoplayReport(history=history, totals=history.totals())
