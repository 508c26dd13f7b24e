"""Rule engine for memory-match: dealing, picking and resolving pairs."""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import Sequence

from .cards import EASY_CARD_SET, Card, validate_card_set
from .state import GameState, place_cards

__all__ = [
    "InvalidMove",
    "create_initial_game_state",
    "pick_card",
    "check_pairs",
]

logger = logging.getLogger(__name__)


class InvalidMove(RuntimeError):
    """Raised when a pick or resolution violates the game rules."""


def create_initial_game_state(
    card_set: Sequence[Card] = EASY_CARD_SET,
    rng: random.Random | None = None,
) -> GameState:
    """Deal a fresh board holding two shuffled copies of every card in ``card_set``."""

    validate_card_set(card_set)
    rng = rng or random.Random()
    deck = list(card_set) * 2
    rng.shuffle(deck)
    logger.debug("dealt %d cards (%d pairs)", len(deck), len(card_set))
    return GameState(cards=place_cards(deck))


def pick_card(state: GameState, position: int) -> GameState:
    """Select the card at ``position`` and return the resulting snapshot.

    The first pick of a turn fills ``first_choice_position``, the second fills
    ``second_choice_position``. ``state`` is left untouched.

    Raises:
        InvalidMove: if the game is finished, the position is off the board or
            already matched, the same position is picked twice, or two cards
            are already pending.
    """

    if state.is_game_finished:
        raise InvalidMove("game is already finished")
    if not 0 <= position < len(state.cards):
        raise InvalidMove(f"position {position} is out of range")
    if state.card_at(position).is_matched:
        raise InvalidMove("cannot pick an already matched card")
    if position == state.first_choice_position:
        raise InvalidMove("cannot pick the same card twice")
    if state.first_choice_position is not None and state.second_choice_position is not None:
        raise InvalidMove("cannot pick more than two cards")

    logger.debug("picked position %d", position)
    if state.first_choice_position is None:
        return replace(state, first_choice_position=position, second_choice_position=None)
    return replace(state, second_choice_position=position)


def check_pairs(state: GameState) -> GameState:
    """Resolve the two pending choices, counting the turn.

    A match flags both instances and may finish the game; a mismatch only
    advances the turn counter. Both choices are cleared either way.
    """

    first = state.first_choice_position
    second = state.second_choice_position
    if first is None or second is None:
        raise InvalidMove("two cards must be picked first")

    if state.card_at(first).card.id != state.card_at(second).card.id:
        logger.debug("positions %d and %d do not match", first, second)
        return replace(
            state,
            turns=state.turns + 1,
            first_choice_position=None,
            second_choice_position=None,
        )

    cards = tuple(
        instance.matched() if index in (first, second) else instance
        for index, instance in enumerate(state.cards)
    )
    is_game_finished = all(instance.is_matched for instance in cards)
    logger.debug("positions %d and %d matched card %d", first, second, state.card_at(first).card.id)
    return replace(
        state,
        cards=cards,
        turns=state.turns + 1,
        matches=state.matches + 1,
        is_game_finished=is_game_finished,
        first_choice_position=None,
        second_choice_position=None,
    )
