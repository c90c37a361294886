from __future__ import annotations

import pytest

from setgame.stats import GameStats, format_elapsed


class FakeClock:
    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        (0, "00:00"),
        (59.9, "00:59"),
        (61, "01:01"),
        (3600, "60:00"),
        (-5, "00:00"),
    ],
)
def test_format_elapsed(seconds: float, expected: str) -> None:
    assert format_elapsed(seconds) == expected


def test_elapsed_time_is_measured_from_start() -> None:
    clock = FakeClock()
    stats = GameStats(clock=clock)

    clock.now += 75
    assert stats.elapsed_time() == "01:15"


def test_elapsed_time_never_decreases() -> None:
    clock = FakeClock()
    stats = GameStats(clock=clock)
    clock.now += 30
    assert stats.elapsed_seconds() == 30

    clock.now -= 20
    assert stats.elapsed_seconds() == 30


def test_counters_and_snapshot() -> None:
    stats = GameStats(clock=FakeClock())
    stats.record_deal(12)
    stats.record_deal(0)
    stats.record_set()
    stats.record_hint()

    snapshot = stats.snapshot()

    assert snapshot.cards_dealt == 12
    assert snapshot.sets_found == 1
    assert snapshot.hints_used == 1
    assert snapshot.elapsed_time == "00:00"
    with pytest.raises(ValueError):
        stats.record_deal(-1)
