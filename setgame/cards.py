"""Card value object and deck assembly utilities."""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import Final, Iterator, List, MutableSequence, Protocol

from . import encoding


class Shuffler(Protocol):
    """Anything able to permute a list in place, e.g. ``random.Random``."""

    def shuffle(self, x: MutableSequence[object], /) -> None: ...


@dataclass(frozen=True, slots=True)
class Card:
    """Value object describing one of the 81 SET cards."""

    shape: int = 0
    color: int = 0
    number: int = 0
    shading: int = 0

    def __post_init__(self) -> None:
        # card_id validates every attribute
        encoding.card_id(self.shape, self.color, self.number, self.shading)

    @classmethod
    def from_id(cls, card_identifier: int) -> "Card":
        decoded = encoding.decode_id(card_identifier)
        return cls(decoded.shape, decoded.color, decoded.number, decoded.shading)

    @classmethod
    def from_code(cls, code: str) -> "Card":
        decoded = encoding.decode_code(code)
        return cls(decoded.shape, decoded.color, decoded.number, decoded.shading)

    @property
    def id(self) -> int:
        """Atlas index of the card face, also its canonical identifier."""

        return encoding.card_id(self.shape, self.color, self.number, self.shading)

    @property
    def code(self) -> str:
        return encoding.encode_code(encoding.decode_id(self.id))

    def attributes(self) -> tuple[int, int, int, int]:
        return (self.shape, self.color, self.number, self.shading)

    def with_attribute(self, name: str, value: int) -> "Card":
        """Return a copy of the card with one attribute replaced."""

        if name not in encoding.ATTRIBUTES:
            raise ValueError(f"unknown attribute '{name}'")
        return replace(self, **{name: value})

    def label(self) -> str:
        """Create a long-form label such as ``two red solid diamonds``."""

        shape = encoding.SHAPE_NAMES[self.shape]
        if self.number > 0:
            shape += "s"
        return " ".join(
            (
                encoding.NUMBER_NAMES[self.number],
                encoding.COLOR_NAMES[self.color],
                encoding.SHADING_NAMES[self.shading],
                shape,
            )
        )


DEFAULT_CARD: Final[Card] = Card(0, 0, 0, 0)


def iter_full_deck() -> Iterator[Card]:
    """Yield all 81 cards in identifier order."""

    for card_identifier in range(encoding.DECK_CARD_COUNT):
        yield Card.from_id(card_identifier)


def full_deck() -> List[Card]:
    """Return a deterministic ordering of all cards."""

    return list(iter_full_deck())


def new_deck(rng: Shuffler | None = None) -> List[Card]:
    """Return the full deck permuted by ``rng``.

    Without an explicit ``rng`` a fresh ``random.Random`` seeded from the
    operating system's entropy source is used.
    """

    cards = full_deck()
    (rng if rng is not None else random.Random()).shuffle(cards)
    return cards
