"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Collection, Sequence

from rich.console import RenderableType
from rich.panel import Panel

from ..cards import Card
from ..stats import StatsSnapshot
from .views import BoardView

_COLOR_STYLES = ("magenta", "green", "red")

# glyphs indexed by [shape][shading]
_GLYPHS = (
    ("◆", "◈", "◇"),
    ("●", "◍", "○"),
    ("▲", "◭", "△"),
)


def format_card(card: Card) -> str:
    """Return a Rich-rendered label for ``card``."""

    style = _COLOR_STYLES[card.color]
    glyph = _GLYPHS[card.shape][card.shading]
    return f"[{style}]{glyph * (card.number + 1)}[/{style}]"


def render_board(
    cards: Sequence[Card],
    *,
    selected: Collection[int] = (),
    hinted: Collection[int] = (),
    matched: Collection[int] = (),
    title: str = "Board",
) -> RenderableType:
    """Return a Rich panel laying the board out in rows of three."""

    view = BoardView(
        cards=cards,
        selected=set(selected),
        hinted=set(hinted),
        matched=set(matched),
        card_formatter=format_card,
    )
    return Panel(view.render(), title=title, padding=(0, 1), border_style="cyan")


def stats_lines(stats: StatsSnapshot, deck_size: int, matches_on_board: int | None = None) -> list[str]:
    lines = [
        f"[cyan]Time[/cyan]: {stats.elapsed_time}",
        f"[cyan]Sets found[/cyan]: {stats.sets_found}",
        f"[cyan]Cards dealt[/cyan]: {stats.cards_dealt}",
        f"[cyan]Hints used[/cyan]: {stats.hints_used}",
        f"[cyan]Deck[/cyan]: {deck_size} card(s)",
    ]
    if matches_on_board is not None:
        lines.append(f"[cyan]Sets on board[/cyan]: {matches_on_board}")
    return lines
