"""
Custom exceptions.

Every layer raises something deriving from GameError, so the API layer only needs a single place to translate them.
"""


class GameError(Exception):
    """Top-level exception for anything that goes wrong while handling a game."""


# --- Domain rules ---
class IllegalMoveError(GameError):
    """Cell occupied, out of bounds, or placing there flips nothing."""


class NotYourTurnError(GameError):
    """Human input while the bot is to move (or is still thinking)."""


class GameStateError(GameError):
    """Action not allowed in the current state of the game (e.g. it is over)."""


class StaleBotResolutionError(GameError):
    """A scheduled bot move woke up after the game moved on without it."""


# --- History ---
class HistoryError(GameError):
    """The snapshot log would lose its contiguity."""


class HistoryBoundaryError(HistoryError):
    """Undo past the first ply / redo past the last one."""


# --- Encoding / requests ---
class InvalidPositionError(GameError):
    """Position string could not be parsed."""


class InvalidRequestError(GameError):
    """Request data does not make sense."""


# --- Persistence ---
class RepositoryError(GameError):
    """Record not found or could not be stored."""
