"""Benchmark harness that plays seeded games with a simulated player."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Sequence

from . import rules
from .agent import MemoryAgent
from .cards import Card, Difficulty, card_set_for

__all__ = ["GameResult", "SimulationReport", "play_game", "run_simulation"]

logger = logging.getLogger(__name__)

DEFAULT_TURN_LIMIT = 500


@dataclass(frozen=True, slots=True)
class GameResult:
    """Outcome of a single simulated game."""

    turns: int
    matches: int
    finished: bool


@dataclass(frozen=True, slots=True)
class SimulationReport:
    """Aggregate statistics collected across a simulation run."""

    difficulty: Difficulty
    recall: float
    results: Sequence[GameResult]

    @property
    def games(self) -> int:
        return len(self.results)

    @property
    def completion_rate(self) -> float:
        if not self.results:
            return 0.0
        return sum(1 for result in self.results if result.finished) / len(self.results)

    @property
    def average_turns(self) -> float:
        if not self.results:
            return 0.0
        return sum(result.turns for result in self.results) / len(self.results)

    @property
    def best_turns(self) -> int:
        return min((result.turns for result in self.results), default=0)

    @property
    def worst_turns(self) -> int:
        return max((result.turns for result in self.results), default=0)


def play_game(
    card_set: Sequence[Card],
    agent: MemoryAgent,
    rng: random.Random,
    turn_limit: int = DEFAULT_TURN_LIMIT,
) -> GameResult:
    """Drive one game with ``agent`` until it finishes or ``turn_limit`` turns pass."""

    game_state = rules.create_initial_game_state(card_set, rng)
    agent.reset()
    for _ in range(turn_limit):
        if game_state.is_game_finished:
            break
        for _ in range(2):
            game_state = rules.pick_card(game_state, agent.choose(game_state))
            agent.observe(game_state)
        game_state = rules.check_pairs(game_state)

    return GameResult(
        turns=game_state.turns,
        matches=game_state.matches,
        finished=game_state.is_game_finished,
    )


def run_simulation(
    *,
    games: int,
    difficulty: Difficulty | str = Difficulty.EASY,
    seed: int | None = None,
    recall: float = 1.0,
    turn_limit: int = DEFAULT_TURN_LIMIT,
) -> SimulationReport:
    """Play ``games`` games and summarise how many turns the agent needed."""

    if games <= 0:
        raise ValueError("games must be positive")
    difficulty = Difficulty(difficulty)
    card_set = card_set_for(difficulty)
    rng = random.Random(seed)
    agent = MemoryAgent(rng=rng, recall=recall)

    results: list[GameResult] = []
    for game_number in range(1, games + 1):
        result = play_game(card_set, agent, rng, turn_limit)
        logger.debug(
            "game %d: turns=%d matches=%d finished=%s",
            game_number,
            result.turns,
            result.matches,
            result.finished,
        )
        results.append(result)

    report = SimulationReport(difficulty=difficulty, recall=recall, results=tuple(results))
    logger.info(
        "simulated %d %s game(s) at recall %.2f: average %.2f turns",
        report.games,
        difficulty.value,
        recall,
        report.average_turns,
    )
    return report
