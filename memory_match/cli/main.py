"""Typer entry-point wiring for the memory-match CLI."""

from __future__ import annotations

import logging
import random

import typer
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .. import benchmark, rules
from ..cards import Difficulty, card_set_for
from ..state import MemoryConfig
from .render import render_state
from .textual import run_textual_app

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


@app.callback()
def cli(
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        envvar="MEMORY_MATCH_LOG_LEVEL",
        help="Logging verbosity (DEBUG, INFO, WARNING, ERROR).",
    ),
) -> None:
    """Memory matching card game."""

    level = log_level.upper()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(f"Choose one of {', '.join(LOG_LEVELS)}.", param_hint="--log-level")
    _configure_logging(level)


@app.command()
def play(
    difficulty: Difficulty = typer.Option(
        Difficulty.EASY, envvar="MEMORY_MATCH_DIFFICULTY", help="Card set to deal."
    ),
    seed: int | None = typer.Option(
        None, envvar="MEMORY_MATCH_SEED", help="Random seed for reproducible boards (omit for randomness)."
    ),
    reveal_delay: float = typer.Option(
        1.0, min=0.0, envvar="MEMORY_MATCH_REVEAL_DELAY", help="Seconds a picked pair stays face up."
    ),
    columns: int = typer.Option(4, min=1, help="Cards per board row."),
) -> None:
    """Play an interactive game in the terminal."""

    run_textual_app(
        MemoryConfig(difficulty=difficulty, seed=seed, reveal_delay=reveal_delay, columns=columns)
    )


@app.command()
def deal(
    difficulty: Difficulty = typer.Option(Difficulty.EASY, envvar="MEMORY_MATCH_DIFFICULTY", help="Card set to deal."),
    seed: int | None = typer.Option(None, envvar="MEMORY_MATCH_SEED", help="Random seed for the shuffle."),
    reveal: bool = typer.Option(True, "--reveal/--no-reveal", help="Show card faces."),
    columns: int = typer.Option(4, min=1, help="Cards per board row."),
) -> None:
    """Print a freshly dealt board."""

    game_state = rules.create_initial_game_state(card_set_for(difficulty), random.Random(seed))
    console.print(render_state(game_state, columns=columns, reveal_all=reveal, title=f"Deal ({difficulty.value})"))


@app.command()
def simulate(
    games: int = typer.Option(100, min=1, help="Number of games to simulate."),
    difficulty: Difficulty = typer.Option(Difficulty.EASY, envvar="MEMORY_MATCH_DIFFICULTY", help="Card set to deal."),
    seed: int = typer.Option(123, envvar="MEMORY_MATCH_SEED", help="Random seed for the simulation."),
    recall: float = typer.Option(1.0, min=0.0, max=1.0, help="Probability the simulated player uses what it saw."),
) -> None:
    """Measure how many turns a simulated player needs to clear the board."""

    report = benchmark.run_simulation(games=games, difficulty=difficulty, seed=seed, recall=recall)
    pairs = len(card_set_for(difficulty))

    table = Table(title="Simulation Summary", box=box.SIMPLE_HEAVY)
    table.add_column("Difficulty", justify="center")
    table.add_column("Pairs", justify="right")
    table.add_column("Recall", justify="right")
    table.add_column("Games", justify="right")
    table.add_column("Completed", justify="right")
    table.add_column("Avg turns", justify="right")
    table.add_column("Best", justify="right")
    table.add_column("Worst", justify="right")
    table.add_row(
        difficulty.value,
        str(pairs),
        f"{recall:.2f}",
        str(report.games),
        f"{report.completion_rate:.0%}",
        f"{report.average_turns:.2f}",
        str(report.best_turns),
        str(report.worst_turns),
    )
    console.print(table)


def main() -> None:
    """Entry-point for ``python -m memory_match.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
