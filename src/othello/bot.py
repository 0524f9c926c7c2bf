"""
Computer opponent

Key idea: strategy pattern. Each policy is a pure function picking one of the legal moves, looked up by BotStrategy.
The chosen move is fed back through the same path a human move takes, the bot never touches the board itself.
"""

import random
from dataclasses import dataclass, field
from typing import Callable, Optional

from src.core.shared_types import BotStrategy
from src.othello.pieces import Piece
from src.othello.rules import Move
from src.othello.square import CORNERS

SelectMoveFn = Callable[[list[Move], random.Random], Optional[Move]]


def choose_random(moves: list[Move], rng: random.Random) -> Optional[Move]:
    """Any legal move, uniformly."""
    if not moves:
        return None
    return rng.choice(moves)


def choose_greedy(moves: list[Move], rng: random.Random) -> Optional[Move]:
    """Turn over as many stones as possible. Ties broken uniformly at random."""
    if not moves:
        return None
    most_flips = max(move.flip_count for move in moves)
    best_moves = [move for move in moves if move.flip_count == most_flips]
    return rng.choice(best_moves)


def choose_corner(moves: list[Move], rng: random.Random) -> Optional[Move]:
    """Corners can never be flipped back: take one if possible, otherwise play greedy."""
    corner_moves = [move for move in moves if move.square in CORNERS]
    if corner_moves:
        return rng.choice(corner_moves)
    return choose_greedy(moves, rng)


STRATEGIES: dict[BotStrategy, SelectMoveFn] = {
    BotStrategy.RANDOM: choose_random,
    BotStrategy.GREEDY: choose_greedy,
    BotStrategy.CORNER: choose_corner,
}


@dataclass
class Bot:
    color: Piece
    strategy: BotStrategy = BotStrategy.GREEDY
    rng: random.Random = field(default_factory=random.Random)

    def select_move(self, moves: list[Move]) -> Optional[Move]:
        return STRATEGIES[self.strategy](moves, self.rng)
