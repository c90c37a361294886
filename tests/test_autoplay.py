from __future__ import annotations

import pytest

from setgame import new_game
from setgame.autoplay import play_session, run_autoplay
from setgame.state import SessionConfig


def test_play_session_runs_until_exhausted() -> None:
    session = new_game(SessionConfig(seed=21))

    play_session(session)

    stats = session.get_stats()
    assert session.deck_size == 0
    assert session.find_all_matches() == []
    assert stats.cards_dealt == 81
    assert stats.sets_found * 3 + len(session.cards) == 81
    assert stats.hints_used == stats.sets_found


def test_play_session_without_hints_leaves_hint_counter_alone() -> None:
    session = new_game(SessionConfig(seed=21))

    play_session(session, use_hints=False)

    assert session.get_stats().hints_used == 0
    assert session.deck_size == 0


def test_run_autoplay_returns_report() -> None:
    report = run_autoplay(3, seed=7)

    assert len(report.history.sessions) == 3
    assert report.totals.sessions == 3
    assert report.totals.cards_dealt == 3 * 81
    assert report.totals.sets_found * 3 + report.totals.leftover_cards == 3 * 81


def test_run_autoplay_is_deterministic() -> None:
    first = run_autoplay(2, seed=11)
    second = run_autoplay(2, seed=11)

    assert first.totals == second.totals
    assert [s.seed for s in first.history.sessions] == [s.seed for s in second.history.sessions]


def test_run_autoplay_requires_sessions() -> None:
    with pytest.raises(ValueError):
        run_autoplay(0)
