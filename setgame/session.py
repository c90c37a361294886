"""Game session orchestrating deck, board, hints and statistics."""

from __future__ import annotations

import logging
import random
import time

from . import rules
from .cards import DEFAULT_CARD, Card, Shuffler, new_deck
from .hints import HintState
from .rules import IllegalRemoval, Triple
from .state import Board, Deck, SessionConfig
from .stats import Clock, GameStats, StatsSnapshot

__all__ = ["GameSession", "new_game"]

logger = logging.getLogger(__name__)


class GameSession:
    """Single-player SET session exposed to the rendering layer.

    The session owns one deck, board, hint state and stats block. It performs
    no locking; callers sharing it across threads must serialise access.
    """

    def __init__(
        self,
        config: SessionConfig | None = None,
        rng: Shuffler | None = None,
        clock: Clock = time.monotonic,
    ) -> None:
        self.config = config or SessionConfig()
        if rng is None:
            rng = random.Random(self.config.seed)
        self.deck = Deck(new_deck(rng))
        self.board = Board()
        self.hint = HintState()
        self.stats = GameStats(clock=clock)
        self.deal(self.config.initial_cards)

    # -- dealing -----------------------------------------------------------

    def deal(self, count: int) -> int:
        """Move up to ``count`` cards from the deck onto the board.

        Returns the number of cards actually dealt.
        """

        drawn = self.deck.draw(count)
        self.board.extend(drawn)
        self.stats.record_deal(len(drawn))
        logger.debug("dealt %d of %d requested card(s); %d left in deck", len(drawn), count, len(self.deck))
        return len(drawn)

    def deal_three(self) -> int:
        return self.deal(rules.MATCH_SIZE)

    # -- queries -----------------------------------------------------------

    @property
    def cards(self) -> tuple[Card, ...]:
        """Read-only view of the board in display order."""

        return self.board.view()

    @property
    def deck_size(self) -> int:
        return len(self.deck)

    @property
    def current_hint(self) -> Triple | None:
        return self.hint.current

    def get_card_at(self, index: int) -> Card:
        """Return the card at ``index`` or ``DEFAULT_CARD`` when out of range."""

        card = self.board.get(index)
        return DEFAULT_CARD if card is None else card

    def get_stats(self) -> StatsSnapshot:
        return self.stats.snapshot()

    @staticmethod
    def is_match(first: Card, second: Card, third: Card) -> bool:
        return rules.is_match(first, second, third)

    def is_match_at(self, first: int, second: int, third: int) -> bool:
        """Return ``True`` when three distinct in-range positions hold a match."""

        try:
            i, j, k = rules.validate_triple((first, second, third), len(self.board))
        except IllegalRemoval:
            return False
        cards = self.board.cards
        return rules.is_match(cards[i], cards[j], cards[k])

    def find_all_matches(self) -> list[Triple]:
        return rules.find_all_matches(self.board.cards)

    def is_hint_card(self, index: int) -> bool:
        return self.hint.is_hint_card(index)

    # -- commands ----------------------------------------------------------

    def toggle_hint(self) -> bool:
        """Show or hide the hint; returns the new visibility."""

        if self.hint.toggle(self.find_all_matches):
            self.stats.record_hint()
        return self.hint.visible

    def remove_match(self, first: int, second: int, third: int) -> list[Card]:
        """Discard three board cards, replenish from the deck and count a set.

        The match rule is not checked here; use :meth:`is_match_at` first.
        Raises :class:`~setgame.rules.IllegalRemoval` for out-of-range or
        repeated indices, leaving the session untouched.
        """

        indices = rules.validate_triple((first, second, third), len(self.board))
        removed = self.board.remove_indices(indices)
        self.deal(self.config.replenish_cards)
        self.stats.record_set()
        self.hint.hide()
        logger.debug("removed %s at %s", " ".join(card.code for card in removed), indices)
        return removed

    def set_card_at(self, index: int, card: Card) -> bool:
        """Overwrite a board slot without touching deck or counters."""

        if self.board.set(index, card):
            return True
        logger.warning("ignored edit at index %d; board has %d card(s)", index, len(self.board))
        return False


def new_game(
    config: SessionConfig | None = None,
    rng: Shuffler | None = None,
    clock: Clock = time.monotonic,
) -> GameSession:
    """Start a fresh session with a newly shuffled deck and an initial deal."""

    return GameSession(config=config, rng=rng, clock=clock)
