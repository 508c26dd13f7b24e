from __future__ import annotations

import logging
import random

import pytest

from memory_match.agent import MemoryAgent
from memory_match.benchmark import play_game, run_simulation
from memory_match.cards import MEDIUM_CARD_SET, Difficulty


def test_play_game_finishes_with_perfect_recall() -> None:
    rng = random.Random(4)
    result = play_game(MEDIUM_CARD_SET, MemoryAgent(rng=rng), rng)

    assert result.finished
    assert result.matches == len(MEDIUM_CARD_SET)
    assert len(MEDIUM_CARD_SET) <= result.turns <= 2 * len(MEDIUM_CARD_SET)


def test_play_game_respects_turn_limit() -> None:
    rng = random.Random(4)
    result = play_game(MEDIUM_CARD_SET, MemoryAgent(rng=rng, recall=0.0), rng, turn_limit=2)

    assert result.turns == 2
    assert not result.finished


def test_run_simulation_returns_report(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="memory_match.benchmark"):
        report = run_simulation(games=5, difficulty="hard", seed=7)

    assert report.games == 5
    assert report.difficulty is Difficulty.HARD
    assert report.completion_rate == 1.0
    assert report.best_turns <= report.average_turns <= report.worst_turns
    assert report.worst_turns <= 24
    assert "simulated 5 hard game(s)" in caplog.text


def test_run_simulation_is_seeded() -> None:
    first = run_simulation(games=3, seed=99, recall=0.5)
    second = run_simulation(games=3, seed=99, recall=0.5)

    assert first.results == second.results


def test_better_recall_needs_fewer_turns() -> None:
    sharp = run_simulation(games=30, difficulty=Difficulty.MEDIUM, seed=1, recall=1.0)
    forgetful = run_simulation(games=30, difficulty=Difficulty.MEDIUM, seed=1, recall=0.0, turn_limit=2000)

    assert sharp.average_turns < forgetful.average_turns


@pytest.mark.parametrize(
    "kwargs",
    [
        {"games": 0},
        {"games": 1, "recall": -0.1},
        {"games": 1, "difficulty": "extreme"},
    ],
)
def test_run_simulation_validates_arguments(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        run_simulation(**kwargs)
