"""Test doubles for the collaborators of the Game: a presentation layer that records what it is told, and a scheduler that only runs callbacks on request."""

from typing import Any, Callable

import pytest

from src.othello.board import Board
from src.othello.pieces import Piece


class RecordingObserver:
    """Keeps every notification as a tuple (event name, *arguments)"""

    def __init__(self) -> None:
        self.events: list[tuple[Any, ...]] = []

    def board_changed(self, board: Board) -> None:
        self.events.append(("board_changed", board))

    def turn_changed(self, turn: int, player: Piece) -> None:
        self.events.append(("turn_changed", turn, player))

    def move_skipped(self, player: Piece) -> None:
        self.events.append(("move_skipped", player))

    def game_over(self, score: dict[Piece, int]) -> None:
        self.events.append(("game_over", score))

    def interactivity_changed(self, interactive: bool) -> None:
        self.events.append(("interactivity_changed", interactive))

    def named(self, name: str) -> list[tuple[Any, ...]]:
        return [event for event in self.events if event[0] == name]


class FakeHandle:
    def __init__(self) -> None:
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class RecordingScheduler:
    """Remembers scheduled callbacks. Nothing runs until the test says so."""

    def __init__(self) -> None:
        self.scheduled: list[tuple[float, Callable[[], object], FakeHandle]] = []

    def __call__(self, delay: float, callback: Callable[[], object]) -> FakeHandle:
        handle = FakeHandle()
        self.scheduled.append((delay, callback, handle))
        return handle

    def run_next(self) -> object:
        """Run the oldest callback that was not cancelled (like an event loop would)."""
        while self.scheduled:
            _, callback, handle = self.scheduled.pop(0)
            if not handle.cancelled:
                return callback()
        raise AssertionError("Nothing scheduled.")


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def scheduler() -> RecordingScheduler:
    return RecordingScheduler()
