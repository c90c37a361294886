"""Card identifier encoding utilities for SET."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

ATTRIBUTES: Final[tuple[str, ...]] = ("shape", "color", "number", "shading")
ATTRIBUTE_VALUES: Final[tuple[int, ...]] = (0, 1, 2)
DECK_CARD_COUNT: Final[int] = 81
ATLAS_COLUMNS: Final[int] = 9
ATLAS_ROWS: Final[int] = 9

SHAPE_NAMES: Final[list[str]] = ["diamond", "oval", "squiggle"]
COLOR_NAMES: Final[list[str]] = ["purple", "green", "red"]
NUMBER_NAMES: Final[list[str]] = ["one", "two", "three"]
SHADING_NAMES: Final[list[str]] = ["solid", "striped", "outline"]

# Positional display code: number, color, shading, shape.
NUMBER_SYMBOLS: Final[list[str]] = ["1", "2", "3"]
COLOR_SYMBOLS: Final[list[str]] = ["P", "G", "R"]
SHADING_SYMBOLS: Final[list[str]] = ["S", "T", "O"]
SHAPE_SYMBOLS: Final[list[str]] = ["D", "O", "S"]


@dataclass(frozen=True, slots=True)
class CardDecoding:
    """Typed container describing a decoded card identifier."""

    shape: int
    color: int
    number: int
    shading: int


def _validate_value(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or value not in ATTRIBUTE_VALUES:
        raise ValueError(f"{name} must be 0, 1 or 2 (got {value!r})")


def card_id(shape: int, color: int, number: int, shading: int) -> int:
    """Encode the four attributes into the atlas index used as card identifier."""

    _validate_value("shape", shape)
    _validate_value("color", color)
    _validate_value("number", number)
    _validate_value("shading", shading)
    return color * 27 + shading * 9 + shape * 3 + number


def decode_id(card_identifier: int) -> CardDecoding:
    """Decode a card identifier into its attributes."""

    if not 0 <= card_identifier < DECK_CARD_COUNT:
        raise ValueError(f"card identifier {card_identifier} out of range")
    color, rest = divmod(card_identifier, 27)
    shading, rest = divmod(rest, 9)
    shape, number = divmod(rest, 3)
    return CardDecoding(shape=shape, color=color, number=number, shading=shading)


def atlas_cell(card_identifier: int) -> tuple[int, int]:
    """Return the ``(row, col)`` of a card face inside the 9x9 image grid."""

    if not 0 <= card_identifier < DECK_CARD_COUNT:
        raise ValueError(f"card identifier {card_identifier} out of range")
    return divmod(card_identifier, ATLAS_COLUMNS)


def atlas_uv(card_identifier: int) -> tuple[tuple[float, float], tuple[float, float]]:
    """Return the normalised ``((u0, v0), (u1, v1))`` rectangle of a card face."""

    row, col = atlas_cell(card_identifier)
    width = 1.0 / ATLAS_COLUMNS
    height = 1.0 / ATLAS_ROWS
    return (col * width, row * height), ((col + 1) * width, (row + 1) * height)


def encode_code(decoded: CardDecoding) -> str:
    """Return the four character display code, e.g. ``2RSD``."""

    return (
        NUMBER_SYMBOLS[decoded.number]
        + COLOR_SYMBOLS[decoded.color]
        + SHADING_SYMBOLS[decoded.shading]
        + SHAPE_SYMBOLS[decoded.shape]
    )


def decode_code(code: str) -> CardDecoding:
    """Parse a display code produced by :func:`encode_code`."""

    text = code.strip().upper()
    if len(text) != 4:
        raise ValueError(f"invalid card code '{code}'")
    number_symbol, color_symbol, shading_symbol, shape_symbol = text
    try:
        return CardDecoding(
            shape=SHAPE_SYMBOLS.index(shape_symbol),
            color=COLOR_SYMBOLS.index(color_symbol),
            number=NUMBER_SYMBOLS.index(number_symbol),
            shading=SHADING_SYMBOLS.index(shading_symbol),
        )
    except ValueError as exc:
        raise ValueError(f"invalid card code '{code}'") from exc
