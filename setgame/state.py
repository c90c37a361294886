"""Core table state data structures for SET."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Sequence

from .cards import Card


@dataclass(slots=True)
class SessionConfig:
    """Runtime configuration for a single SET session."""

    initial_cards: int = 12
    replenish_cards: int = 3
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.initial_cards < 0:
            raise ValueError("initial_cards must be non-negative")
        if self.replenish_cards < 0:
            raise ValueError("replenish_cards must be non-negative")


@dataclass(slots=True)
class Deck:
    """Undealt cards; dealing consumes from the end of the list."""

    cards: List[Card] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def draw(self, count: int) -> list[Card]:
        """Remove and return up to ``count`` cards, fewer when the deck runs out."""

        if count < 0:
            raise ValueError("count must be non-negative")
        drawn: list[Card] = []
        while self.cards and len(drawn) < count:
            drawn.append(self.cards.pop())
        return drawn


@dataclass(slots=True)
class Board:
    """Ordered, index-addressable cards currently in play."""

    cards: List[Card] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def view(self) -> tuple[Card, ...]:
        """Return a read-only snapshot of the board."""

        return tuple(self.cards)

    def get(self, index: int) -> Card | None:
        if 0 <= index < len(self.cards):
            return self.cards[index]
        return None

    def set(self, index: int, card: Card) -> bool:
        if 0 <= index < len(self.cards):
            self.cards[index] = card
            return True
        return False

    def extend(self, cards: Iterable[Card]) -> None:
        self.cards.extend(cards)

    def remove_indices(self, indices: Sequence[int]) -> list[Card]:
        """Drop the cards at ``indices`` keeping the order of the rest."""

        doomed = set(indices)
        removed = [card for idx, card in enumerate(self.cards) if idx in doomed]
        self.cards = [card for idx, card in enumerate(self.cards) if idx not in doomed]
        return removed
