"""Typer entry-point wiring for the SET CLI."""

from __future__ import annotations

import logging
from typing import List, Optional

import typer
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .. import autoplay, rules
from ..cards import Card
from ..session import new_game
from ..state import SessionConfig
from .render import format_card, render_board
from .textual import run_textual_app

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()


def _configure_logging(level: str) -> None:
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise typer.BadParameter(f"unknown log level '{level}'")
    logging.basicConfig(
        level=numeric,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def _parse_cards(codes: List[str]) -> list[Card]:
    cards: list[Card] = []
    for code in codes:
        try:
            cards.append(Card.from_code(code))
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="CARDS") from exc
    return cards


def _matches_table(cards: list[Card], matches: list[rules.Triple]) -> Table:
    table = Table(title="Sets", box=box.SIMPLE_HEAVY)
    table.add_column("#", justify="right")
    table.add_column("Positions", justify="center")
    table.add_column("Cards", justify="left")
    for number, triple in enumerate(matches, start=1):
        faces = "  ".join(format_card(cards[idx]) for idx in triple)
        table.add_row(str(number), " ".join(str(idx) for idx in triple), faces)
    return table


@app.callback()
def configure(
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level for engine diagnostics."),
) -> None:
    """SET rules engine and terminal front end."""

    _configure_logging(log_level)


@app.command()
def play(
    seed: Optional[int] = typer.Option(None, help="Random seed for reproducible deals (omit for randomness)."),
    selection_timeout: float = typer.Option(
        1.0,
        min=0.0,
        help="Seconds a rejected three-card selection stays visible.",
    ),
) -> None:
    """Play interactively in the terminal."""

    run_textual_app(seed=seed, selection_timeout=selection_timeout)


@app.command()
def solve(
    cards: Optional[List[str]] = typer.Argument(None, help="Card codes such as 2RSD (number, color, shading, shape)."),
    seed: Optional[int] = typer.Option(None, help="Deal a fresh board with this seed when no cards are given."),
) -> None:
    """List every set on a board."""

    if cards:
        board = _parse_cards(cards)
    else:
        board = list(new_game(SessionConfig(seed=seed)).cards)

    matches = rules.find_all_matches(board)
    first = rules.first_match(board)
    hinted = set(first) if first is not None else set()
    console.print(render_board(board, hinted=hinted, title=f"Board ({len(board)} cards)"))
    if matches:
        console.print(_matches_table(board, matches))
    console.print(f"[cyan]{len(matches)} set(s) on board.[/cyan]")


@app.command("autoplay")
def autoplay_cli(
    sessions: int = typer.Option(10, min=1, help="Number of sessions to play."),
    seed: int = typer.Option(123, help="Random seed for the run."),
    hints: bool = typer.Option(
        True,
        "--hints/--no-hints",
        help="Pick sets through the hint mechanism so hints are counted.",
    ),
) -> None:
    """Play seeded sessions automatically and summarise the results."""

    report = autoplay.run_autoplay(sessions, seed=seed, use_hints=hints)

    table = Table(title="Autoplay", box=box.SIMPLE_HEAVY)
    table.add_column("Session", justify="right")
    table.add_column("Sets", justify="right")
    table.add_column("Hints", justify="right")
    table.add_column("Dealt", justify="right")
    table.add_column("Left", justify="right")

    for summary in report.history.sessions:
        label = str(summary.session_number)
        if summary.cleared:
            label = f"[bold green]{label}[/bold green]"
        table.add_row(
            label,
            str(summary.stats.sets_found),
            str(summary.stats.hints_used),
            str(summary.stats.cards_dealt),
            str(summary.cards_left_on_board),
        )

    totals = report.totals
    table.add_row(
        "[bold]Total[/bold]",
        str(totals.sets_found),
        str(totals.hints_used),
        str(totals.cards_dealt),
        str(totals.leftover_cards),
    )
    console.print(table)
    console.print(f"[cyan]{totals.sessions} session(s) simulated.[/cyan]")


def main() -> None:
    """Entry-point for the ``setgame`` console script."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
