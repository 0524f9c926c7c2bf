"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
import random
from typing import Optional
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LegalMove,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
    RedoRequest,
    RestartRequest,
    UndoRequest,
)
from src.core.exceptions import HistoryBoundaryError, RepositoryError
from src.core.models import GameModel
from src.core.shared_types import BotStrategy, Status
from src.db.repository import GameRepository
from src.othello.board import INITIAL_PIECES, Board, InitialPieces
from src.othello.bot import Bot
from src.othello.game import Game
from src.othello.pieces import from_color, to_color
from src.othello.position import PositionState
from src.othello.square import Square

logger = logging.getLogger(__name__)


class OthelloService:
    """
    Orchestration of layers for an othello game.

    NOTE: The service runs every bot move right away (no thinking delay), so a stored game is always waiting for a human or over.
    """

    def __init__(
        self,
        repository: GameRepository,
        default_bot_strategy: BotStrategy = BotStrategy.GREEDY,
    ) -> None:
        self.repo = repository
        self.default_bot_strategy = default_bot_strategy

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Start a new game, optionally against the bot."""

        # Use info in CreateGameRequest to create a new Game
        bot = None
        if request.bot_color is not None:
            bot = Bot(
                color=from_color(request.bot_color),
                strategy=request.bot_strategy or self.default_bot_strategy,
                rng=self._bot_rng(request.seed, turn_count=0),
            )
        initial_pieces = (
            self._initial_pieces(request.starting_layout)
            if request.starting_layout
            else INITIAL_PIECES
        )
        new_game = Game.new_game(bot=bot, initial_pieces=initial_pieces)

        # convert into GameModel and store it in the repository
        created_game_data = new_game.to_model()
        created_game_data.seed = request.seed
        stored_game, game_id = self.repo.create_game(created_game_data)
        logger.info("Created game %s (bot: %s)", game_id, stored_game.bot_color)

        # Return a GameResponse
        return self._create_game_response(game_id, new_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend.
        """
        game, _ = self._load_game(request.game_id)
        return self._create_game_response(request.game_id, game)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """Retrieve the moves of the player to move, with the stones each of them would flip (to preview in the UI)."""
        game, _ = self._load_game(request.game_id)
        moves = [] if game.is_game_over() else game.moves_and_flips()
        return LegalMovesResponse(
            game_id=request.game_id,
            color=to_color(game.current_player),
            legal_moves=[
                LegalMove(
                    square=move.square.to_algebraic(),
                    flips=[square.to_algebraic() for square in move.flips],
                )
                for move in moves
            ],
        )

    def make_move(self, request: MoveRequest) -> GameResponse:
        """Make a move attempt. The bot answers within the same call."""
        game, stored_model = self._load_game(request.game_id)

        # Attempt the move (raises when the move is not accepted)
        game.make_move(Square.from_algebraic(request.square))

        self._store(request.game_id, game, stored_model)
        return self._create_game_response(request.game_id, game)

    def undo(self, request: UndoRequest) -> GameResponse:
        """Go back to the previous position the human got to play."""
        game, stored_model = self._load_game(request.game_id)
        if not game.undo():
            raise HistoryBoundaryError("Nothing to undo.")

        self._store(request.game_id, game, stored_model)
        return self._create_game_response(request.game_id, game)

    def redo(self, request: RedoRequest) -> GameResponse:
        """Replay a position that was undone."""
        game, stored_model = self._load_game(request.game_id)
        if not game.redo():
            raise HistoryBoundaryError("Nothing to redo.")

        self._store(request.game_id, game, stored_model)
        return self._create_game_response(request.game_id, game)

    def restart(self, request: RestartRequest) -> GameResponse:
        """Back to the starting layout of this game, keeping its id and its bot."""
        model = self._fetch_game(request.game_id)
        # same bot choices as right after creation
        game = Game.from_model(model, rng=self._bot_rng(model.seed, turn_count=0))
        game.init_game()
        logger.info("Restarted game %s", request.game_id)

        self._store(request.game_id, game, model)
        return self._create_game_response(request.game_id, game)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        if self.repo.delete_game(request.game_id) is None:
            raise RepositoryError(f"Game with game_id={request.game_id} not found.")
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, game: Game) -> GameResponse:
        """Convert the Game into a GameResponse (for game with given ID.)"""
        starting = game.history.get(0)
        # for the type checker: a game always has (at least) its starting position in history
        assert starting is not None
        starting_position = PositionState(starting.board, starting.player).to_string()
        winner = game.winner
        return GameResponse(
            game_id=game_id,
            position=PositionState(game.board, game.current_player).to_string(),
            starting_position=starting_position,
            color_to_move=to_color(game.current_player),
            turn=game.current_turn,
            status=Status[game.status.name],
            score={to_color(piece).value: count for piece, count in game.score().items()},
            winner=to_color(winner) if winner is not None else None,
            can_undo=game.can_undo(),
            can_redo=game.can_redo(),
            bot_color=to_color(game.bot.color) if game.bot else None,
            bot_strategy=game.bot.strategy if game.bot else None,
            passes=[to_color(player) for player in game.passes],
        )

    def _load_game(self, game_id: UUID) -> tuple[Game, GameModel]:
        """Fetch the stored game and rebuild the domain object from it."""
        model = self._fetch_game(game_id)
        rng = self._bot_rng(model.seed, model.turn_count)
        return Game.from_model(model, rng=rng), model

    def _store(self, game_id: UUID, game: Game, stored_model: GameModel) -> None:
        """Capture updated state in GameModel and store in repository"""
        updated = game.to_model()
        updated.seed = stored_model.seed
        self.repo.update_game(game_id, updated)

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model

    @staticmethod
    def _bot_rng(seed: Optional[int], turn_count: int) -> random.Random:
        """Seeded games replay the same bot choices. Mix in the turn so every request does not restart the same sequence."""
        if seed is None:
            return random.Random()
        return random.Random(f"{seed}:{turn_count}")

    @staticmethod
    def _initial_pieces(layout: str) -> InitialPieces:
        return Board.from_position(layout).pieces()

