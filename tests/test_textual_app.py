from __future__ import annotations

import asyncio

from memory_match.cli.textual import MemoryTextualApp
from memory_match.state import MemoryConfig, TurnPhase


def _twin_of(app: MemoryTextualApp, position: int) -> int:
    cards = app.game_state.cards
    wanted = cards[position].card.id
    return next(i.position for i in cards if i.card.id == wanted and i.position != position)


def test_app_resolves_pair_after_delay() -> None:
    async def scenario() -> None:
        app = MemoryTextualApp(MemoryConfig(seed=3, reveal_delay=0.05))
        async with app.run_test() as pilot:
            app.pick(0)
            app.pick(_twin_of(app, 0))
            assert app.game_state.phase == TurnPhase.TWO_PICKED
            await pilot.pause(0.5)

            assert app.game_state.matches == 1
            assert app.game_state.turns == 1
            assert app.buttons[0].disabled

    asyncio.run(scenario())


def test_app_reports_illegal_pick() -> None:
    async def scenario() -> None:
        app = MemoryTextualApp(MemoryConfig(seed=3, reveal_delay=5.0))
        async with app.run_test():
            app.pick(0)
            app.pick(0)

            assert app.game_state.first_choice_position == 0
            assert app.status_strip is not None
            assert "same card" in app.status_strip.message

    asyncio.run(scenario())


def test_new_game_ignores_stale_resolution() -> None:
    async def scenario() -> None:
        app = MemoryTextualApp(MemoryConfig(seed=4, reveal_delay=5.0))
        async with app.run_test() as pilot:
            app.pick(0)
            app.pick(1)
            await pilot.press("n")

            app.resolve(1)

            assert app.game_number == 2
            assert app.game_state.turns == 0
            assert app.game_state.phase == TurnPhase.IDLE

    asyncio.run(scenario())
