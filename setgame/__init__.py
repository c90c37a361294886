"""Top-level package for the SET rules engine."""

from . import cards, encoding, hints, rules, session, state, stats
from .cards import Card
from .rules import IllegalRemoval, find_all_matches, is_match
from .session import GameSession, new_game
from .state import SessionConfig

__all__ = [
    "cards",
    "encoding",
    "hints",
    "rules",
    "session",
    "state",
    "stats",
    "Card",
    "GameSession",
    "IllegalRemoval",
    "SessionConfig",
    "find_all_matches",
    "is_match",
    "new_game",
]
