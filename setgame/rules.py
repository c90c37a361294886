"""Matching rule and exhaustive match discovery for SET."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, Sequence

import numpy as np

from .cards import Card

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from numpy.typing import NDArray

__all__ = [
    "Triple",
    "MATCH_SIZE",
    "IllegalRemoval",
    "is_match",
    "board_matrix",
    "find_all_matches",
    "first_match",
    "validate_triple",
]

Triple = tuple[int, int, int]

MATCH_SIZE: Final[int] = 3


class IllegalRemoval(RuntimeError):
    """Raised when a removal names out-of-range or repeated board positions."""


def is_match(first: Card, second: Card, third: Card) -> bool:
    """Return ``True`` when the three cards form a SET.

    Every attribute must sum to a multiple of three, which is the same as
    "all equal or all different" for ternary values.
    """

    return all(
        (a + b + c) % 3 == 0
        for a, b, c in zip(first.attributes(), second.attributes(), third.attributes())
    )


def board_matrix(cards: Sequence[Card]) -> "NDArray[np.int8]":
    """Return an ``(n, 4)`` attribute matrix for ``cards``."""

    return np.array([card.attributes() for card in cards], dtype=np.int8).reshape(-1, 4)


def find_all_matches(cards: Sequence[Card]) -> list[Triple]:
    """Return every matching index triple ``i < j < k`` in lexicographic order."""

    matrix = board_matrix(cards)
    size = len(matrix)
    found: list[Triple] = []
    for i in range(size - 2):
        for j in range(i + 1, size - 1):
            sums = (matrix[j + 1 :] + matrix[i] + matrix[j]) % 3
            for offset in np.flatnonzero(~sums.any(axis=1)):
                found.append((i, j, j + 1 + int(offset)))
    return found


def first_match(cards: Sequence[Card]) -> Triple | None:
    """Return the lexicographically smallest matching triple, if any."""

    matches = find_all_matches(cards)
    return matches[0] if matches else None


def validate_triple(indices: Sequence[int], board_size: int) -> Triple:
    """Check that ``indices`` name three distinct in-range board positions."""

    if len(indices) != MATCH_SIZE:
        raise IllegalRemoval(f"expected {MATCH_SIZE} indices, got {len(indices)}")
    for index in indices:
        if not 0 <= index < board_size:
            raise IllegalRemoval(f"index {index} outside board of size {board_size}")
    if len(set(indices)) != MATCH_SIZE:
        raise IllegalRemoval(f"indices {tuple(indices)} are not distinct")
    first, second, third = indices
    return first, second, third
