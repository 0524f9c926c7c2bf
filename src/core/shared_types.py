"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    AWAITING_MOVE = "awaiting move"
    RESOLVING = "resolving"
    SKIPPED = "skipped"
    GAME_OVER = "game over"


# --- Color here does NOT contain an option for empty cells. The domain layer uses src/othello/pieces.py for that.
# --- NOTE Same names on purpose: the imports show which version is used in what part of the code


class Color(StrEnum):
    BLACK = "black"
    WHITE = "white"


class BotStrategy(StrEnum):
    RANDOM = "random"
    GREEDY = "greedy"
    CORNER = "corner"
