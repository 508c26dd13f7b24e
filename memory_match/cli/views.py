"""Composable view primitives for the memory-match CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from rich import box
from rich.console import Group, RenderableType
from rich.table import Table

from ..state import CardInstance, GameState, TurnPhase

_PHASE_LABELS = {
    TurnPhase.IDLE: "Pick a card",
    TurnPhase.ONE_PICKED: "Pick a second card",
    TurnPhase.TWO_PICKED: "Resolving pair",
    TurnPhase.FINISHED: "[bold green]Finished[/bold green]",
}


@dataclass(slots=True)
class BoardView:
    """Renderable laying out a board snapshot as a grid plus counters."""

    state: GameState
    columns: int
    reveal_all: bool
    card_formatter: Callable[[CardInstance, bool], str]

    def _is_face_up(self, instance: CardInstance) -> bool:
        return (
            self.reveal_all
            or instance.is_matched
            or instance.position in self.state.pending_positions()
        )

    def _grid(self) -> Table:
        grid = Table(box=box.ROUNDED, show_header=False, show_lines=True)
        for _ in range(self.columns):
            grid.add_column(justify="center", min_width=6)
        cells = [
            f"[dim]{instance.position}[/dim]\n{self.card_formatter(instance, self._is_face_up(instance))}"
            for instance in self.state.cards
        ]
        for start in range(0, len(cells), self.columns):
            row = cells[start : start + self.columns]
            row += [""] * (self.columns - len(row))
            grid.add_row(*row)
        return grid

    def _status(self) -> Table:
        status = Table.grid(expand=True)
        status.add_column(justify="left")
        status.add_row(f"[cyan]Turns[/cyan]: {self.state.turns}")
        status.add_row(f"[cyan]Matches[/cyan]: {self.state.matches}/{self.state.pair_count}")
        status.add_row(f"[cyan]Status[/cyan]: {_PHASE_LABELS[self.state.phase]}")
        return status

    def render(self) -> RenderableType:
        return Group(self._grid(), self._status())
