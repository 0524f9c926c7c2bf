"""Keeps count of the plies and derives whose turn it is"""

from dataclasses import dataclass

from src.othello.pieces import PLAYER_ORDER, Piece


@dataclass
class TurnTracker:
    """
    Active player = (turn_count + skip_offset) mod 2, where 0 is black and 1 is white.

    The player is always computed from the two counters, never stored, so it reflects the latest change.
    """

    turn_count: int = 0
    skip_offset: int = 0

    @property
    def current_player(self) -> Piece:
        return self._player_at(self.turn_count)

    @property
    def next_player(self) -> Piece:
        """Who moves after one more ply. Does not change anything."""
        return self._player_at(self.turn_count + 1)

    def advance(self) -> None:
        self.turn_count += 1

    def skip(self) -> None:
        """The player to move has to pass: hand the turn to the other player without counting a ply."""
        self.skip_offset = (self.skip_offset + 1) % 2

    def set_player(self, target: Piece) -> None:
        """Choose skip_offset such that `target` is the current player for the current turn_count."""
        index = PLAYER_ORDER.index(target)
        self.skip_offset = (index - (self.turn_count % 2) + 2) % 2

    def goto(self, turn_count: int) -> None:
        """Used by undo/redo. Call set_player afterwards to get the player right."""
        if turn_count < 0:
            raise ValueError(f"Turn count cannot be negative, got {turn_count}.")
        self.turn_count = turn_count

    def reset(self) -> None:
        self.turn_count = 0
        self.skip_offset = 0

    def _player_at(self, turn_count: int) -> Piece:
        return PLAYER_ORDER[(turn_count + self.skip_offset) % 2]
