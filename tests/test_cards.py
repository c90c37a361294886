from __future__ import annotations

import random
from typing import MutableSequence

import pytest

from setgame import cards
from setgame.cards import Card


def test_full_deck_is_the_whole_universe() -> None:
    deck = cards.full_deck()

    assert len(deck) == 81
    assert len(set(deck)) == 81
    assert [card.id for card in deck] == list(range(81))


def test_new_deck_is_a_permutation() -> None:
    deck = cards.new_deck(random.Random(5))

    assert len(deck) == 81
    assert set(deck) == set(cards.full_deck())


def test_new_deck_is_reproducible_with_a_seeded_rng() -> None:
    assert cards.new_deck(random.Random(42)) == cards.new_deck(random.Random(42))
    assert cards.new_deck(random.Random(42)) != cards.new_deck(random.Random(43))


def test_new_deck_uses_custom_shuffler() -> None:
    class ReverseShuffle:
        def shuffle(self, seq: MutableSequence[object]) -> None:
            seq.reverse()

    deck = cards.new_deck(ReverseShuffle())

    assert deck == list(reversed(cards.full_deck()))


def test_card_equality_is_attribute_wise() -> None:
    assert Card(1, 2, 0, 1) == Card(shape=1, color=2, number=0, shading=1)
    assert Card(1, 2, 0, 1) != Card(1, 2, 0, 2)
    assert hash(Card(1, 2, 0, 1)) == hash(Card(1, 2, 0, 1))


def test_card_rejects_invalid_attribute() -> None:
    with pytest.raises(ValueError):
        Card(shape=0, color=3, number=0, shading=0)


def test_card_code_and_label() -> None:
    card = Card.from_code("2RSD")

    assert card == Card(shape=0, color=2, number=1, shading=0)
    assert card.code == "2RSD"
    assert card.label() == "two red solid diamonds"
    assert Card(1, 0, 0, 2).label() == "one purple outline oval"


def test_with_attribute_returns_a_new_card() -> None:
    card = Card(0, 0, 0, 0)
    edited = card.with_attribute("shading", 2)

    assert edited == Card(0, 0, 0, 2)
    assert card == cards.DEFAULT_CARD
    with pytest.raises(ValueError):
        card.with_attribute("size", 1)


@pytest.mark.parametrize("value", [1.0, True, False, "1", None])
def test_card_rejects_non_integer_attribute(value: object) -> None:
    with pytest.raises(ValueError):
        Card(shape=value, color=0, number=0, shading=0)  # type: ignore[arg-type]
