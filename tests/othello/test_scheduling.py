"""Unit tests for /src/othello/scheduling.py"""

import asyncio
import random

from src.othello.bot import Bot
from src.othello.game import Game
from src.othello.pieces import Piece
from src.othello.scheduling import asyncio_scheduler, run_immediately
from src.othello.square import Square


def test_run_immediately_calls_back_before_returning() -> None:
    calls = []
    handle = run_immediately(5.0, lambda: calls.append("ran"))
    assert calls == ["ran"]
    # nothing left to cancel
    handle.cancel()
    assert calls == ["ran"]


def test_asyncio_scheduler_runs_after_delay() -> None:
    calls = []

    async def main() -> None:
        asyncio_scheduler(0.01, lambda: calls.append("ran"))
        assert calls == []
        await asyncio.sleep(0.05)

    asyncio.run(main())
    assert calls == ["ran"]


def test_asyncio_scheduler_cancel() -> None:
    calls = []

    async def main() -> None:
        handle = asyncio_scheduler(0.01, lambda: calls.append("ran"))
        handle.cancel()
        await asyncio.sleep(0.05)

    asyncio.run(main())
    assert calls == []


def test_game_on_event_loop() -> None:
    """The bot's reply arrives after the delay, not during the human's move"""

    async def main() -> tuple[int, bool, int, bool]:
        game = Game.new_game(
            bot=Bot(color=Piece.WHITE, rng=random.Random(1)),
            scheduler=asyncio_scheduler,
            bot_delay=0.01,
        )
        game.submit_move(Square(2, 3))
        during = (game.current_turn, game.interactive)
        await asyncio.sleep(0.05)
        return (*during, game.current_turn, game.interactive)

    turn_during, interactive_during, turn_after, interactive_after = asyncio.run(main())
    assert (turn_during, interactive_during) == (1, False)
    assert (turn_after, interactive_after) == (2, True)


def test_restart_on_event_loop_drops_bot_move() -> None:
    async def main() -> Game:
        game = Game.new_game(
            bot=Bot(color=Piece.WHITE, rng=random.Random(1)),
            scheduler=asyncio_scheduler,
            bot_delay=0.01,
        )
        game.submit_move(Square(2, 3))
        game.init_game()
        await asyncio.sleep(0.05)
        return game

    game = asyncio.run(main())
    assert game.current_turn == 0
    assert game.interactive
