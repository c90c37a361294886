"""Textual-powered interactive SET interface."""

from __future__ import annotations

import random

from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Grid, Horizontal, Vertical
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Footer, Header, Static

from ... import encoding
from ...hints import HintPhase
from ...rules import Triple
from ...selection import SelectionOutcome, SelectionTracker
from ...session import GameSession, new_game
from ...state import SessionConfig
from ..render import format_card, stats_lines

MAX_EVENT_LINES = 12
EXPIRY_INTERVAL = 0.25


class EventLog(Static):
    """Simple rolling log rendered inside a panel."""

    lines: reactive[tuple[str, ...]] = reactive((), init=False)

    def on_mount(self) -> None:  # pragma: no cover - widget lifecycle glue
        self._refresh()

    def add(self, message: str) -> None:
        log = list(self.lines)
        log.append(message)
        self.lines = tuple(log[-MAX_EVENT_LINES:])

    def watch_lines(self, value: tuple[str, ...]) -> None:
        self._refresh(value)

    def _refresh(self, lines: tuple[str, ...] | None = None) -> None:
        content = Table.grid(padding=(0, 1))
        content.expand = True
        content.add_column(justify="left")
        rows = lines if lines is not None else self.lines
        if rows:
            for line in rows:
                content.add_row(Text.from_markup(line))
        else:
            content.add_row(Text.from_markup("[dim]Event log will appear here[/dim]"))
        self.update(Panel(content, title="Events", border_style="magenta"))


class StatsPanel(Static):
    """Live counters for the running session."""

    def update_stats(self, lines: list[str]) -> None:
        grid = Table.grid(padding=(0, 1))
        grid.add_column(justify="left")
        for line in lines:
            grid.add_row(Text.from_markup(line))
        self.update(Panel(grid, title="Stats", border_style="bright_blue"))


class StatusStrip(Static):
    """Single line status helper."""

    message: reactive[str] = reactive("", init=False)

    def watch_message(self, value: str) -> None:
        self.update(Panel(Text.from_markup(value or "[dim]Ready[/dim]"), border_style="green"))


class CardTile(Static):
    """One clickable board position."""

    class Selected(Message):
        def __init__(self, index: int) -> None:
            super().__init__()
            self.index = index

    def __init__(self, index: int) -> None:
        super().__init__()
        self.index = index

    def show(self, markup: str, style: str) -> None:
        self.update(Panel(Text.from_markup(markup), border_style=style))

    def on_click(self, event: events.Click) -> None:  # pragma: no cover - driven by UI interaction
        event.stop()
        self.post_message(self.Selected(self.index))


class SetTextualApp(App):
    """Textual SET game UI."""

    CSS = """
    Screen {
        layout: vertical;
    }

    #main {
        height: 1fr;
    }

    #board {
        grid-size: 3;
        grid-gutter: 0 1;
        width: 3fr;
        height: auto;
        padding: 0 1;
    }

    #side {
        width: 1fr;
        padding: 0 1;
    }

    CardTile {
        height: 5;
    }

    StatsPanel, EventLog {
        width: 100%;
        min-height: 6;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("n", "new_game", "New game"),
        Binding("h", "toggle_hint", "Hint"),
        Binding("d", "deal_three", "Deal 3"),
        Binding("f", "find_all", "Find all"),
        Binding("e", "toggle_edit", "Edit mode"),
        Binding("escape", "clear_selection", "Clear", show=False),
        Binding("1", "cycle('shape')", "Shape", show=False),
        Binding("2", "cycle('color')", "Color", show=False),
        Binding("3", "cycle('number')", "Number", show=False),
        Binding("4", "cycle('shading')", "Shading", show=False),
    ]

    def __init__(self, *, seed: int | None, selection_timeout: float) -> None:
        super().__init__()
        if seed is None:
            seed = random.SystemRandom().randrange(0, 2**63)
        self.rng = random.Random(seed)
        self.seed = seed
        self.selection = SelectionTracker(timeout=selection_timeout)
        self.session: GameSession = new_game(SessionConfig(seed=self.rng.randrange(0, 2**63)))
        self.found_matches: list[Triple] = []
        # edit mode is a UI capability; the engine exposes set_card_at unconditionally
        self.edit_mode = False
        self.edit_index: int | None = None

        self.board_grid: Grid | None = None
        self.status_strip: StatusStrip | None = None
        self.stats_panel: StatsPanel | None = None
        self.event_log: EventLog | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        self.status_strip = StatusStrip(id="status")
        yield self.status_strip

        self.board_grid = Grid(id="board")
        self.stats_panel = StatsPanel(id="stats")
        self.event_log = EventLog(id="events")
        yield Horizontal(self.board_grid, Vertical(self.stats_panel, self.event_log, id="side"), id="main")
        yield Footer()

    async def on_mount(self) -> None:
        self.set_interval(EXPIRY_INTERVAL, self._tick)
        self._log(f"[bold cyan]New game[/bold cyan] (seed {self.seed})")
        await self._refresh_ui()

    # -- actions -----------------------------------------------------------

    async def action_new_game(self) -> None:
        self.session = new_game(SessionConfig(seed=self.rng.randrange(0, 2**63)))
        self.selection.clear()
        self.found_matches = []
        self.edit_index = None
        self._log("[bold cyan]New game[/bold cyan]")
        await self._refresh_ui()

    async def action_toggle_hint(self) -> None:
        self.session.toggle_hint()
        if self.session.hint.phase is HintPhase.SHOWN and self.session.current_hint is None:
            self._log("[yellow]No set on the board[/yellow]")
        else:
            self._log(f"Hint {self.session.hint.phase.value}")
        await self._refresh_ui()

    async def action_deal_three(self) -> None:
        dealt = self.session.deal_three()
        self.found_matches = []
        self._log(f"Dealt {dealt} card(s)" if dealt else "[dim]Deck is empty[/dim]")
        await self._refresh_ui()

    async def action_find_all(self) -> None:
        self.found_matches = self.session.find_all_matches()
        self._log(f"Found {len(self.found_matches)} set(s) on the board")
        await self._refresh_ui()

    async def action_toggle_edit(self) -> None:
        self.edit_mode = not self.edit_mode
        self.edit_index = None
        self.selection.clear()
        await self._refresh_ui()

    async def action_clear_selection(self) -> None:
        self.selection.clear()
        self.edit_index = None
        await self._refresh_ui()

    async def action_cycle(self, attribute: str) -> None:
        if not self.edit_mode or self.edit_index is None:
            return
        card = self.session.get_card_at(self.edit_index)
        value = (getattr(card, attribute) + 1) % len(encoding.ATTRIBUTE_VALUES)
        edited = card.with_attribute(attribute, value)
        self.session.set_card_at(self.edit_index, edited)
        self._log(f"Card {self.edit_index} is now {edited.label()}")
        self.found_matches = []
        await self._refresh_ui()

    async def on_card_tile_selected(self, message: CardTile.Selected) -> None:
        if self.edit_mode:
            self.edit_index = message.index
            await self._refresh_ui()
            return

        self.selection.toggle(message.index)
        picked = [self.session.get_card_at(idx) for idx in self.selection.indices]
        outcome = self.selection.submit(self.session)
        if outcome is SelectionOutcome.MATCHED:
            self.found_matches = []
            self._log("[green]Set![/green] " + ", ".join(card.label() for card in picked))
        elif outcome is SelectionOutcome.REJECTED:
            self._log("[red]Not a set[/red]")
        await self._refresh_ui()

    # -- rendering ---------------------------------------------------------

    async def _tick(self) -> None:
        if self.selection.expire():
            await self._refresh_ui()
        elif self.stats_panel is not None:
            self._refresh_stats()

    def _log(self, message: str) -> None:
        if self.event_log is not None:
            self.event_log.add(message)

    def _tile_style(self, index: int) -> str:
        if self.edit_mode and index == self.edit_index:
            return "bold white"
        if self.selection.is_selected(index):
            return "bold white" if self.selection.rejected_at is None else "red"
        if self.session.is_hint_card(index):
            return "yellow"
        if any(index in triple for triple in self.found_matches):
            return "green"
        return "grey50"

    def _refresh_stats(self) -> None:
        assert self.stats_panel is not None
        matches = len(self.found_matches) if self.found_matches else None
        self.stats_panel.update_stats(
            stats_lines(self.session.get_stats(), self.session.deck_size, matches)
        )

    async def _refresh_ui(self) -> None:
        if self.board_grid is None:
            return
        cards = self.session.cards
        tiles = list(self.board_grid.query(CardTile))
        if len(tiles) != len(cards):
            await self.board_grid.remove_children()
            tiles = [CardTile(idx) for idx in range(len(cards))]
            await self.board_grid.mount(*tiles)
        for tile, card in zip(tiles, cards):
            tile.show(f"{format_card(card)}\n[dim]{card.code}[/dim]", self._tile_style(tile.index))

        if self.status_strip is not None:
            if self.edit_mode:
                target = "click a card" if self.edit_index is None else f"card {self.edit_index}"
                self.status_strip.message = f"[bold magenta]Edit mode[/bold magenta]: {target}, keys 1-4 cycle attributes"
            else:
                self.status_strip.message = "Click three cards to claim a set"
        self._refresh_stats()


def run_textual_app(*, seed: int | None, selection_timeout: float = 1.0) -> None:
    """Launch the Textual UI."""

    app = SetTextualApp(seed=seed, selection_timeout=selection_timeout)
    app.run()
