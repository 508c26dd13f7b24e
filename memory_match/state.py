"""Core game state data structures for memory-match."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable

from .cards import Card, Difficulty


class TurnPhase(str, Enum):
    """Phases derived from the pending selection of a snapshot."""

    IDLE = "idle"
    ONE_PICKED = "one_picked"
    TWO_PICKED = "two_picked"
    FINISHED = "finished"


@dataclass(slots=True)
class MemoryConfig:
    """Session settings shared by the CLI and the interactive UI."""

    difficulty: Difficulty = Difficulty.EASY
    seed: int | None = None
    reveal_delay: float = 1.0
    columns: int = 4

    def __post_init__(self) -> None:
        self.difficulty = Difficulty(self.difficulty)
        if self.reveal_delay < 0:
            raise ValueError("reveal_delay must be non-negative")
        if self.columns <= 0:
            raise ValueError("columns must be positive")


@dataclass(frozen=True, slots=True)
class CardInstance:
    """One placed copy of a card on the board."""

    card: Card
    position: int
    is_matched: bool = False

    def matched(self) -> "CardInstance":
        """Return a copy of this instance flagged as matched."""

        return replace(self, is_matched=True)


@dataclass(frozen=True, slots=True)
class GameState:
    """Immutable snapshot of a board and its counters.

    Snapshots are only ever replaced by the operations in :mod:`memory_match.rules`;
    callers keep the most recent one and thread it forward.
    """

    cards: tuple[CardInstance, ...]
    turns: int = 0
    matches: int = 0
    is_game_finished: bool = False
    first_choice_position: int | None = None
    second_choice_position: int | None = None

    @property
    def phase(self) -> TurnPhase:
        if self.is_game_finished:
            return TurnPhase.FINISHED
        if self.first_choice_position is None:
            return TurnPhase.IDLE
        if self.second_choice_position is None:
            return TurnPhase.ONE_PICKED
        return TurnPhase.TWO_PICKED

    @property
    def pair_count(self) -> int:
        return len(self.cards) // 2

    def card_at(self, position: int) -> CardInstance:
        """Return the instance at ``position``; negative indices do not wrap."""

        if not 0 <= position < len(self.cards):
            raise IndexError(f"position {position} is out of range")
        return self.cards[position]

    def pending_positions(self) -> tuple[int, ...]:
        """Return the choice positions awaiting resolution, in pick order."""

        return tuple(
            position
            for position in (self.first_choice_position, self.second_choice_position)
            if position is not None
        )

    def unmatched_positions(self) -> list[int]:
        """Return the positions still in play, in board order."""

        return [instance.position for instance in self.cards if not instance.is_matched]


def place_cards(cards: Iterable[Card]) -> tuple[CardInstance, ...]:
    """Assign each card an instance at its index in ``cards``."""

    return tuple(CardInstance(card=card, position=index) for index, card in enumerate(cards))
