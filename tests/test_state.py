from __future__ import annotations

import pytest

from setgame.cards import Card, full_deck
from setgame.state import Board, Deck, SessionConfig


def test_deck_draws_from_the_end() -> None:
    deck = Deck(full_deck()[:5])

    drawn = deck.draw(2)

    assert [card.id for card in drawn] == [4, 3]
    assert len(deck) == 3


def test_deck_draw_is_partial_when_exhausted() -> None:
    deck = Deck(full_deck()[:2])

    assert len(deck.draw(3)) == 2
    assert deck.draw(3) == []
    assert len(deck) == 0


def test_deck_draw_rejects_negative_count() -> None:
    with pytest.raises(ValueError):
        Deck().draw(-1)


def test_board_remove_preserves_order() -> None:
    cards = full_deck()[:6]
    board = Board(list(cards))

    removed = board.remove_indices((4, 0, 2))

    assert removed == [cards[0], cards[2], cards[4]]
    assert board.view() == (cards[1], cards[3], cards[5])


def test_board_get_and_set_are_bounds_checked() -> None:
    board = Board(full_deck()[:3])

    assert board.get(3) is None
    assert board.get(-1) is None
    assert not board.set(3, Card())
    assert board.set(1, Card(2, 2, 2, 2))
    assert board.get(1) == Card(2, 2, 2, 2)


def test_session_config_validates_counts() -> None:
    with pytest.raises(ValueError):
        SessionConfig(initial_cards=-1)
    with pytest.raises(ValueError):
        SessionConfig(replenish_cards=-3)
