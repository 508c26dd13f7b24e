"""Simulated memory player used by the benchmark and the CLI."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from . import actions
from .state import GameState


@dataclass(slots=True)
class MemoryAgent:
    """Heuristic player that remembers the faces it has seen.

    ``recall`` is the probability that a remembered card is actually used when
    deciding; ``1.0`` gives a perfect-memory player, ``0.0`` one that never
    pairs up remembered cards and only turns over faces it has not seen yet.
    """

    rng: random.Random
    recall: float = 1.0
    _seen: dict[int, int] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        if not 0.0 <= self.recall <= 1.0:
            raise ValueError("recall must be within [0, 1]")

    def reset(self) -> None:
        self._seen.clear()

    def observe(self, state: GameState) -> None:
        """Record the faces revealed by the pending picks of ``state``."""

        for position in state.pending_positions():
            self._seen[position] = state.card_at(position).card.id
        self._forget_matched(state)

    def choose(self, state: GameState) -> int:
        """Return the position to pick next in ``state``."""

        self._forget_matched(state)
        legal = actions.legal_pick_positions(state)
        if not legal:
            raise ValueError("no legal pick available")

        first = state.first_choice_position
        if first is None:
            pair = self._known_pair(legal)
            if pair is not None and self._recalls():
                return pair[0]
            return self._explore(legal)

        wanted = state.card_at(first).card.id
        twin = next((pos for pos in legal if self._seen.get(pos) == wanted), None)
        if twin is not None and self._recalls():
            return twin
        return self._explore(legal)

    def remembered(self) -> dict[int, int]:
        return dict(self._seen)

    def _recalls(self) -> bool:
        return self.recall >= 1.0 or self.rng.random() < self.recall

    def _forget_matched(self, state: GameState) -> None:
        for position in [pos for pos in self._seen if state.card_at(pos).is_matched]:
            del self._seen[position]

    def _known_pair(self, legal: list[int]) -> tuple[int, int] | None:
        by_id: dict[int, int] = {}
        for position in legal:
            card_id = self._seen.get(position)
            if card_id is None:
                continue
            if card_id in by_id:
                return by_id[card_id], position
            by_id[card_id] = position
        return None

    def _explore(self, legal: list[int]) -> int:
        unseen = [pos for pos in legal if pos not in self._seen]
        return self.rng.choice(unseen or legal)
