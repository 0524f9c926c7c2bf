"""Snapshot log backing undo/redo. One entry per ply, indexed by turn."""

from dataclasses import dataclass
from typing import Iterator, Optional

from src.core.exceptions import HistoryError
from src.othello.board import Board
from src.othello.pieces import Piece


@dataclass(frozen=True)
class HistoryEntry:
    turn: int
    player: Piece
    board: Board


class History:
    """
    Contiguous list of snapshots for turns 0..N.

    Pushing a turn that is already in the log discards that entry and everything after it (the old redo branch), then appends.
    """

    def __init__(self) -> None:
        self._entries: list[HistoryEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self._entries)

    def push(self, turn: int, player: Piece, board: Board) -> HistoryEntry:
        """Store a copy of `board`. Afterwards get(turn) returns it and len(history) == turn + 1."""
        if turn < 0 or turn > len(self._entries):
            raise HistoryError(
                f"Cannot record turn {turn}: the history only holds turns 0..{len(self._entries) - 1}."
            )

        # truncate the stale redo branch (no-op when appending at the end)
        del self._entries[turn:]

        entry = HistoryEntry(turn=turn, player=player, board=board.snapshot())
        self._entries.append(entry)
        return entry

    def get(self, turn: int) -> Optional[HistoryEntry]:
        """The entry for `turn`, or None if there is none. Never raises."""
        if not self.has(turn):
            return None
        return self._entries[turn]

    def has(self, turn: int) -> bool:
        return 0 <= turn < len(self._entries)

    def last_turn(self) -> int:
        return len(self._entries) - 1

    def clear(self) -> None:
        self._entries.clear()
