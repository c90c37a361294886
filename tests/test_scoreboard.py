from __future__ import annotations

import pytest

from setgame import scoreboard
from setgame.stats import StatsSnapshot


def _summary(number: int, sets: int, hints: int, dealt: int, board: int, deck: int = 0) -> scoreboard.SessionSummary:
    return scoreboard.SessionSummary(
        session_number=number,
        seed=number,
        stats=StatsSnapshot(elapsed_time="00:00", sets_found=sets, hints_used=hints, cards_dealt=dealt),
        cards_left_on_board=board,
        cards_left_in_deck=deck,
    )


def test_session_history_accumulates_totals() -> None:
    history = scoreboard.SessionHistory()
    history.record(_summary(1, sets=25, hints=25, dealt=81, board=6))
    history.record(_summary(2, sets=27, hints=20, dealt=81, board=0))

    totals = history.totals()

    assert totals.sessions == 2
    assert totals.sets_found == 52
    assert totals.hints_used == 45
    assert totals.cards_dealt == 162
    assert totals.leftover_cards == 6
    assert not history.sessions[0].cleared
    assert history.sessions[1].cleared


def test_session_history_validates_counts() -> None:
    history = scoreboard.SessionHistory()
    with pytest.raises(ValueError):
        history.record(_summary(1, sets=0, hints=0, dealt=12, board=-1))
