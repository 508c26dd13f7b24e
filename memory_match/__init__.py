"""Top-level package for the memory-match game engine."""

from . import actions, cards, rules, state
from .rules import InvalidMove, check_pairs, create_initial_game_state, pick_card

__all__ = [
    "actions",
    "cards",
    "rules",
    "state",
    "InvalidMove",
    "check_pairs",
    "create_initial_game_state",
    "pick_card",
]
