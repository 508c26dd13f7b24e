"""Textual-powered interactive memory-match interface."""

from __future__ import annotations

import logging
import random

from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Grid, Horizontal, Vertical
from textual.reactive import reactive
from textual.widgets import Button, Footer, Header, Static

from ... import rules
from ...cards import card_set_for
from ...state import GameState, MemoryConfig, TurnPhase

logger = logging.getLogger(__name__)

MAX_EVENT_LINES = 14


class CardButton(Button):
    """Face-down card bound to a board position."""

    def __init__(self, position: int) -> None:
        super().__init__("??", id=f"card-{position}", classes="card")
        self.position = position


class EventLog(Static):
    """Simple rolling log rendered inside a panel."""

    lines: reactive[tuple[str, ...]] = reactive((), init=False)

    def on_mount(self) -> None:  # pragma: no cover - widget lifecycle glue
        self._refresh()

    def add(self, message: str) -> None:
        log = list(self.lines)
        log.append(message)
        self.lines = tuple(log[-MAX_EVENT_LINES:])

    def clear(self) -> None:
        self.lines = ()

    def watch_lines(self, value: tuple[str, ...]) -> None:
        self._refresh(value)

    def _refresh(self, lines: tuple[str, ...] | None = None) -> None:
        content = Table.grid(padding=(0, 1))
        content.expand = True
        content.add_column(justify="left")
        rows = lines if lines is not None else self.lines
        if rows:
            for line in rows:
                content.add_row(Text.from_markup(line))
        else:
            content.add_row(Text.from_markup("[dim]Event log will appear here[/dim]"))
        self.update(Panel(content, title="Events", border_style="magenta"))


class ScorePanel(Static):
    """Displays the counters of the current snapshot."""

    def update_scores(self, game_state: GameState) -> None:
        grid = Table.grid(expand=True)
        grid.add_column(justify="left")
        grid.add_row(f"[cyan]Turns[/cyan]: {game_state.turns}")
        grid.add_row(f"[cyan]Matches[/cyan]: {game_state.matches}/{game_state.pair_count}")
        self.update(Panel(grid, title="Score", border_style="bright_blue"))


class StatusStrip(Static):
    """Single line status helper."""

    message: reactive[str] = reactive("", init=False)

    def watch_message(self, value: str) -> None:
        self.update(Panel(Text.from_markup(value or "[dim]Ready[/dim]"), border_style="green"))


class MemoryTextualApp(App):
    """Textual memory-match game UI."""

    CSS = """
    Screen {
        layout: vertical;
    }

    #main {
        height: 1fr;
    }

    #board {
        width: 3fr;
        grid-gutter: 1 2;
        padding: 1 2;
    }

    #side {
        width: 1fr;
        padding: 0 1;
    }

    CardButton {
        width: 100%;
        height: 3;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("ctrl+c", "quit", "Quit"),
        Binding("n", "new_game", "New game"),
    ]

    def __init__(self, config: MemoryConfig) -> None:
        super().__init__()
        self.config = config
        seed = config.seed
        if seed is None:
            seed = random.SystemRandom().randrange(0, 2**63)
        self.seed = seed
        self.rng = random.Random(seed)
        self.card_set = card_set_for(config.difficulty)
        self.game_number = 1
        self.game_state = rules.create_initial_game_state(self.card_set, self.rng)

        # Widgets initialised in compose
        self.status_strip: StatusStrip | None = None
        self.score_panel: ScorePanel | None = None
        self.event_log: EventLog | None = None
        self.buttons: list[CardButton] = []

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        self.status_strip = StatusStrip(id="status")
        yield self.status_strip

        self.buttons = [CardButton(instance.position) for instance in self.game_state.cards]
        board = Grid(*self.buttons, id="board")
        board.styles.grid_size_columns = self.config.columns

        self.score_panel = ScorePanel(id="scores")
        self.event_log = EventLog(id="events")
        yield Horizontal(board, Vertical(self.score_panel, self.event_log, id="side"), id="main")
        yield Footer()

    def on_mount(self) -> None:
        self.title = "Memory Match"
        self.sub_title = f"{self.config.difficulty.value} • seed {self.seed}"
        self._start_game()

    def action_new_game(self) -> None:
        self.game_number += 1
        self.game_state = rules.create_initial_game_state(self.card_set, self.rng)
        self._start_game()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if isinstance(event.button, CardButton):
            event.stop()
            self.pick(event.button.position)

    def pick(self, position: int) -> None:
        """Turn over ``position``, scheduling the resolution after a second pick."""

        try:
            self.game_state = rules.pick_card(self.game_state, position)
        except rules.InvalidMove as exc:
            self._set_status(f"[red]{exc}[/red]")
            return

        self._refresh_ui()
        if self.game_state.phase == TurnPhase.TWO_PICKED:
            self._set_status("[yellow]Checking pair…[/yellow]")
            game_number = self.game_number
            self.set_timer(self.config.reveal_delay, lambda: self.resolve(game_number))
        else:
            self._set_status("Pick a second card")

    def resolve(self, game_number: int) -> None:
        """Resolve the pending pair unless a new game was started since the pick."""

        if game_number != self.game_number or self.game_state.phase != TurnPhase.TWO_PICKED:
            return
        first, second = self.game_state.pending_positions()
        label = self.game_state.card_at(first).card.label().strip()
        matches_before = self.game_state.matches
        self.game_state = rules.check_pairs(self.game_state)

        if self.game_state.matches > matches_before:
            self._log(f"[green]Matched {label}[/green] at {first} and {second}")
        else:
            self._log(f"[dim]No match at {first} and {second}[/dim]")

        if self.game_state.is_game_finished:
            self._log(f"[bold cyan]Game {self.game_number} finished in {self.game_state.turns} turns[/bold cyan]")
            self._set_status("[bold green]All pairs found![/bold green] Press [bold]n[/bold] for a new game")
            logger.info("game %d finished in %d turns", self.game_number, self.game_state.turns)
        else:
            self._set_status("Pick a card")
        self._refresh_ui()

    def _start_game(self) -> None:
        if self.event_log:
            self.event_log.clear()
            self._log(f"[bold cyan]Game {self.game_number}[/bold cyan] dealt {len(self.game_state.cards)} cards")
        self._set_status("Pick a card")
        self._refresh_ui()

    def _refresh_ui(self) -> None:
        pending = self.game_state.pending_positions()
        for button, instance in zip(self.buttons, self.game_state.cards):
            if instance.is_matched:
                button.label = instance.card.label()
                button.variant = "success"
                button.disabled = True
            elif instance.position in pending:
                button.label = instance.card.label()
                button.variant = "warning"
                button.disabled = False
            else:
                button.label = "??"
                button.variant = "default"
                button.disabled = False
        if self.score_panel:
            self.score_panel.update_scores(self.game_state)

    def _set_status(self, message: str) -> None:
        if self.status_strip:
            self.status_strip.message = message

    def _log(self, message: str) -> None:
        if self.event_log:
            self.event_log.add(message)


def run_textual_app(config: MemoryConfig) -> None:
    """Launch the Textual UI."""

    app = MemoryTextualApp(config)
    app.run()
