"""Legal action generation utilities for memory-match."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from . import rules
from .state import GameState, TurnPhase


@dataclass(frozen=True)
class PickAction:
    """Turn over the card at ``position``."""

    position: int


@dataclass(frozen=True)
class ResolveAction:
    """Compare the two pending cards."""


Action = Union[PickAction, ResolveAction]


def legal_pick_positions(state: GameState) -> list[int]:
    """Return the positions ``pick_card`` would accept for ``state``."""

    if state.phase in (TurnPhase.TWO_PICKED, TurnPhase.FINISHED):
        return []
    return [position for position in state.unmatched_positions() if position != state.first_choice_position]


def legal_actions(state: GameState) -> list[Action]:
    """Return every action that can be applied to ``state``."""

    if state.phase == TurnPhase.TWO_PICKED:
        return [ResolveAction()]
    return [PickAction(position) for position in legal_pick_positions(state)]


def apply_action(state: GameState, action: Action) -> GameState:
    """Apply ``action`` through the rule engine."""

    if isinstance(action, PickAction):
        return rules.pick_card(state, action.position)
    if isinstance(action, ResolveAction):
        return rules.check_pairs(state)
    raise TypeError(f"unsupported action {action!r}")
