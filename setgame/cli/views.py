"""Composable view primitives for the SET CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence, Set

from rich import box
from rich.console import RenderableType
from rich.table import Table
from rich.text import Text

from ..cards import Card

COLUMNS = 3


@dataclass(slots=True)
class BoardView:
    """Renderable grid of board cards with selection and hint highlights."""

    cards: Sequence[Card]
    selected: Set[int]
    hinted: Set[int]
    matched: Set[int]
    card_formatter: Callable[[Card], str]

    def cell(self, index: int) -> Text:
        card = self.cards[index]
        markup = f"[dim]{index:>2}[/dim] {self.card_formatter(card)} [dim]{card.code}[/dim]"
        text = Text.from_markup(markup)
        if index in self.selected:
            text.stylize("reverse")
        elif index in self.hinted:
            text.stylize("on yellow4")
        elif index in self.matched:
            text.stylize("on dark_green")
        return text

    def render(self) -> RenderableType:
        if not self.cards:
            return Text("Board is empty", style="dim")

        table = Table(box=box.ROUNDED, show_header=False, expand=True)
        for _ in range(COLUMNS):
            table.add_column(justify="left")
        for start in range(0, len(self.cards), COLUMNS):
            row: list[RenderableType] = [
                self.cell(idx) for idx in range(start, min(start + COLUMNS, len(self.cards)))
            ]
            row.extend(Text("") for _ in range(COLUMNS - len(row)))
            table.add_row(*row)
        return table
