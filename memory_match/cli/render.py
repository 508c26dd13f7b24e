"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from rich.console import RenderableType
from rich.panel import Panel

from ..state import CardInstance, GameState
from .views import BoardView

HIDDEN_CARD = "[blue]??[/blue]"


def format_card(instance: CardInstance, reveal: bool) -> str:
    """Return a Rich-rendered label for ``instance``."""

    if instance.is_matched:
        return f"[green]{instance.card.label()}[/green]"
    if reveal:
        return f"[bold yellow]{instance.card.label()}[/bold yellow]"
    return HIDDEN_CARD


def render_state(
    state: GameState,
    *,
    columns: int = 4,
    reveal_all: bool = False,
    title: str = "Memory Match",
) -> RenderableType:
    """Return a Rich panel describing the current board."""

    view = BoardView(
        state=state,
        columns=columns,
        reveal_all=reveal_all,
        card_formatter=format_card,
    )
    return Panel(view.render(), title=title, padding=(0, 1), border_style="cyan", expand=False)
