from __future__ import annotations

import pytest

from setgame import new_game
from setgame.cards import Card
from setgame.selection import SelectionOutcome, SelectionTracker
from setgame.session import GameSession
from setgame.state import SessionConfig


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def _session_with_match() -> GameSession:
    session = new_game(SessionConfig(seed=3))
    session.set_card_at(0, Card(0, 0, 0, 0))
    session.set_card_at(1, Card(0, 0, 0, 1))
    session.set_card_at(2, Card(0, 0, 0, 2))
    session.set_card_at(3, Card(1, 1, 1, 1))
    return session


def test_toggle_caps_selection_at_three() -> None:
    tracker = SelectionTracker()
    for idx in (4, 2, 9, 7):
        tracker.toggle(idx)

    assert tracker.indices == [4, 2, 9]
    tracker.toggle(2)
    assert tracker.indices == [4, 9]
    assert not tracker.is_complete


def test_submit_pending_until_three_selected() -> None:
    session = _session_with_match()
    tracker = SelectionTracker()
    tracker.toggle(0)

    assert tracker.submit(session) is SelectionOutcome.PENDING


def test_submit_removes_matching_cards() -> None:
    session = _session_with_match()
    tracker = SelectionTracker()
    for idx in (2, 0, 1):
        tracker.toggle(idx)

    assert tracker.submit(session) is SelectionOutcome.MATCHED
    assert tracker.indices == []
    assert session.get_stats().sets_found == 1
    assert session.get_card_at(0) == Card(1, 1, 1, 1)


def test_rejected_selection_clears_after_timeout() -> None:
    clock = FakeClock()
    session = _session_with_match()
    tracker = SelectionTracker(timeout=1.0, clock=clock)
    for idx in (0, 1, 3):
        tracker.toggle(idx)

    assert tracker.submit(session) is SelectionOutcome.REJECTED
    assert session.get_stats().sets_found == 0

    clock.now = 0.5
    assert not tracker.expire()
    # resubmitting does not restart the timer
    assert tracker.submit(session) is SelectionOutcome.REJECTED
    assert tracker.indices == [0, 1, 3]

    clock.now = 1.0
    assert tracker.expire()
    assert tracker.indices == []
    assert tracker.rejected_at is None


def test_deselecting_cancels_the_timer() -> None:
    clock = FakeClock()
    session = _session_with_match()
    tracker = SelectionTracker(timeout=1.0, clock=clock)
    for idx in (0, 1, 3):
        tracker.toggle(idx)
    tracker.submit(session)

    tracker.toggle(3)
    clock.now = 5.0

    assert not tracker.expire()
    assert tracker.indices == [0, 1]


def test_expire_is_noop_without_rejection() -> None:
    tracker = SelectionTracker(clock=FakeClock())
    tracker.toggle(1)

    assert not tracker.expire()
    assert tracker.indices == [1]


def test_negative_timeout_is_rejected() -> None:
    with pytest.raises(ValueError):
        SelectionTracker(timeout=-1)
