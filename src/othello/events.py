"""Notifications the Game sends to whatever presents it (a UI, a websocket, a test)."""

from typing import Protocol

from src.othello.board import Board
from src.othello.pieces import Piece


class GameObserver(Protocol):
    """Everything a presentation layer needs to re-render. Observers are called synchronously, in registration order."""

    def board_changed(self, board: Board) -> None:
        """`board` is a snapshot, changing it does not affect the game."""
        ...

    def turn_changed(self, turn: int, player: Piece) -> None: ...

    def move_skipped(self, player: Piece) -> None:
        """`player` had no legal move and passes."""
        ...

    def game_over(self, score: dict[Piece, int]) -> None: ...

    def interactivity_changed(self, interactive: bool) -> None:
        """False while the bot is thinking: human input will be ignored."""
        ...
