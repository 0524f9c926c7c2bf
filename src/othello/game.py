"""
The Game class will be the entrypoint into the domain layer for the service layer (and for any front-end driving it directly).
It is responsible for orchestrating all the business logic required to play a ply of othello -->
it validates the move, updates the board, hands the turn over, records history, and tells its observers what happened.
"""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from functools import partial
from typing import Optional, Self

from src.core.exceptions import (
    GameStateError,
    HistoryBoundaryError,
    IllegalMoveError,
    NotYourTurnError,
    StaleBotResolutionError,
)
from src.core.models import GameModel
from src.core.shared_types import BotStrategy
from src.core.shared_types import Status as SharedStatus
from src.othello import rules
from src.othello.board import INITIAL_PIECES, Board, InitialPieces
from src.othello.bot import Bot
from src.othello.events import GameObserver
from src.othello.history import History, HistoryEntry
from src.othello.pieces import Piece, from_color, to_color
from src.othello.position import PositionState
from src.othello.rules import Move
from src.othello.scheduling import Handle, Scheduler, run_immediately
from src.othello.square import Square
from src.othello.turn import TurnTracker

logger = logging.getLogger(__name__)


class Status(Enum):
    AWAITING_MOVE = auto()
    RESOLVING = auto()
    SKIPPED = auto()
    GAME_OVER = auto()


@dataclass(frozen=True)
class BotTicket:
    """What the game looked like when the bot's move got scheduled. If it no longer does on resumption, the move is stale."""

    generation: int
    turn_count: int
    color: Piece


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE / FRONT-END ---

    board: Board = field(default_factory=Board)
    tracker: TurnTracker = field(default_factory=TurnTracker)
    history: History = field(default_factory=History)
    status: Status = Status.AWAITING_MOVE
    bot: Optional[Bot] = None
    observers: list[GameObserver] = field(default_factory=list)
    scheduler: Scheduler = run_immediately
    bot_delay: float = 0.0
    initial_pieces: InitialPieces = INITIAL_PIECES
    interactive: bool = field(default=True, init=False)
    # players that had to pass during the last action (a human move may be followed by several passes / bot moves)
    passes: list[Piece] = field(default_factory=list, init=False)
    _generation: int = field(default=0, init=False, repr=False)
    _pending_bot: Optional[Handle] = field(default=None, init=False, repr=False)

    @classmethod
    def new_game(
        cls,
        bot: Optional[Bot] = None,
        observers: Optional[list[GameObserver]] = None,
        scheduler: Scheduler = run_immediately,
        bot_delay: float = 0.0,
        initial_pieces: InitialPieces = INITIAL_PIECES,
    ) -> Self:
        """Create a game in its starting position. If the bot plays black, it makes its first move straight away (or schedules it)."""
        game = cls(
            bot=bot,
            observers=list(observers or []),
            scheduler=scheduler,
            bot_delay=bot_delay,
            initial_pieces=initial_pieces,
        )
        game.init_game()
        return game

    @classmethod
    def from_model(
        cls,
        model: GameModel,
        rng: Optional[random.Random] = None,
        scheduler: Scheduler = run_immediately,
    ) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        status_name = model.status.replace(" ", "_").upper()
        if status_name not in Status.__members__:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join([status.name.lower() for status in Status])}"
            )
        if not 0 <= model.turn_count < len(model.history):
            raise GameStateError(
                f"Turn {model.turn_count} is not covered by a history of {len(model.history)} positions."
            )

        # create the Game
        history = History()
        for turn, position in enumerate(model.history):
            state = PositionState.from_string(position)
            history.push(turn, state.color_to_move, state.board)
        # turn 0 always holds the layout the game started from (a pass at the start only changes the player)
        starting = history.get(0)
        assert starting is not None

        current = PositionState.from_string(model.current_position)
        tracker = TurnTracker(turn_count=model.turn_count, skip_offset=model.skip_offset)
        if tracker.current_player != current.color_to_move:
            raise GameStateError(
                f"Turn count {model.turn_count} and skip offset {model.skip_offset} do not give the color to move in {model.current_position!r}."
            )

        bot = None
        if model.bot_color is not None:
            bot = Bot(
                color=from_color(model.bot_color),
                strategy=BotStrategy(model.bot_strategy or BotStrategy.GREEDY),
                rng=rng or random.Random(),
            )

        game = cls(
            board=current.board,
            tracker=tracker,
            history=history,
            status=Status[status_name],
            bot=bot,
            scheduler=scheduler,
            initial_pieces=starting.board.pieces(),
        )
        game.passes = [from_color(color) for color in model.passes]
        return game

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""

        return GameModel(
            current_position=PositionState(
                self.board, self.tracker.current_player
            ).to_string(),
            history=[
                PositionState(entry.board, entry.player).to_string()
                for entry in self.history
            ],
            turn_count=self.tracker.turn_count,
            skip_offset=self.tracker.skip_offset,
            status=SharedStatus[self.status.name].value,
            bot_color=to_color(self.bot.color).value if self.bot else None,
            bot_strategy=self.bot.strategy.value if self.bot else None,
            passes=[to_color(player).value for player in self.passes],
        )

    def init_game(self) -> None:
        """
        (Re)start from the initial layout.
        ----

        Also cancels a bot move that might still be scheduled. Calling it twice in a row gives the same state both times,
        up to the point where the bot takes over: if the bot plays black, its opening gets scheduled here,
        and with run_immediately it is played before init_game returns (so a random bot may open differently each time).
        """
        self._cancel_pending_bot()
        self._generation += 1

        self.board.reset(self.initial_pieces)
        self.tracker.reset()
        self.history.clear()
        self.passes = []
        self._record_snapshot()
        logger.info("New game started (generation %d)", self._generation)

        self._set_interactive(True)
        self._notify_board_changed()
        # a custom starting layout could already require a pass or be finished
        self._evaluate_progression()

    def submit_move(self, square: Square) -> bool:
        """
        A human clicked a cell.
        ----

        Returns False (and changes nothing) when the input is not accepted:
        the bot is thinking, it is the bot's turn, the game is over, or the move is illegal.
        """
        try:
            self.make_move(square)
        except (GameStateError, NotYourTurnError, IllegalMoveError) as error:
            logger.debug("Ignored move on %s: %s", square, error)
            return False
        return True

    def make_move(self, square: Square) -> Move:
        """
        Attempt a human move
        -----

        1. make sure input is accepted right now
        2. make sure it is the human's turn
        3. place the stone and flip (the rules module raises if the move is illegal)
        4. hand the turn over / pass / end the game
        5. (bot to move? schedule it)
        """
        self._assert_interactive()
        self._assert_in_progress()
        self._assert_human_turn()
        return self._play(square, new_action=True)

    def undo(self) -> bool:
        """Step back one ply (past the bot's plies, if there is a bot). False if there is nothing to go back to."""
        return self._travel(-1)

    def redo(self) -> bool:
        """Step forward again. False if there is nothing to redo."""
        return self._travel(+1)

    def resolve_bot_move(self, ticket: BotTicket) -> bool:
        """
        The scheduled bot move wakes up.
        ----

        If anything happened since it got scheduled (restart, undo, ...), the ticket is stale and the move is silently dropped.
        """
        try:
            self._assert_ticket_current(ticket)
        except StaleBotResolutionError as error:
            logger.debug("Discarding bot move: %s", error)
            return False

        # for the type checker: a ticket only matches while a bot is configured
        assert self.bot is not None
        self._pending_bot = None
        choice = self.bot.select_move(self.moves_and_flips())
        # a bot turn only gets scheduled when the bot has a legal move
        assert choice is not None

        logger.debug(
            "Bot (%s, %s) plays %s",
            self.bot.color.name.lower(),
            self.bot.strategy,
            choice.square.to_algebraic(),
        )
        self._set_interactive(True)
        self._play(choice.square)
        return True

    # --- QUERIES ---
    @property
    def current_player(self) -> Piece:
        return self.tracker.current_player

    @property
    def current_turn(self) -> int:
        return self.tracker.turn_count

    @property
    def winner(self) -> Optional[Piece]:
        """Only known once the game is over. None for a draw."""
        if self.status != Status.GAME_OVER:
            return None
        score = self.score()
        if score[Piece.BLACK] == score[Piece.WHITE]:
            return None
        return Piece.BLACK if score[Piece.BLACK] > score[Piece.WHITE] else Piece.WHITE

    def current_board(self) -> Board:
        return self.board.snapshot()

    def score(self) -> dict[Piece, int]:
        return self.board.score()

    def is_game_over(self) -> bool:
        return self.status == Status.GAME_OVER

    def can_undo(self) -> bool:
        return self.interactive and self._history_target(-1) is not None

    def can_redo(self) -> bool:
        return self.interactive and self._history_target(+1) is not None

    def valid_moves(self) -> list[Square]:
        """Squares the player to move may use (for highlighting in a UI)"""
        return rules.valid_moves(self.board, self.current_player)

    def moves_and_flips(self) -> list[Move]:
        return rules.moves_and_flips(self.board, self.current_player)

    # -- PRIVATE HELPERS ---
    def _play(self, square: Square, new_action: bool = False) -> Move:
        """The single path a move takes, whether it comes from a human or from the bot."""
        player = self.tracker.current_player

        # raises IllegalMoveError before touching the board
        move = rules.apply_move(self.board, square, player)
        if new_action:
            self.passes = []
        self.status = Status.RESOLVING

        self.tracker.advance()
        self._record_snapshot()
        logger.debug(
            "Turn %d: %s played %s, flipping %d",
            self.tracker.turn_count,
            player.name.lower(),
            square.to_algebraic(),
            move.flip_count,
        )

        self._notify_board_changed()
        self._evaluate_progression()
        return move

    def _evaluate_progression(self) -> None:
        """
        Decide how the game continues now the turn has been handed over.
        ----

        1. player to move can place a stone: carry on
        2. they cannot, but their opponent can: they pass
        3. nobody can: game over
        """
        player = self.tracker.current_player
        if rules.has_valid_move(self.board, player):
            self._await_move()
        elif rules.has_valid_move(self.board, player.opponent()):
            self._skip_turn(player)
        else:
            self._end_game()

    def _await_move(self) -> None:
        self.status = Status.AWAITING_MOVE
        self._notify_turn_changed()
        self._schedule_bot_if_needed()

    def _skip_turn(self, player: Piece) -> None:
        """
        The player to move has no legal move: they pass.
        NOTE the pass does not get a history entry of its own. The snapshot for this turn is replaced by one where the opponent is to move.
        """
        self.status = Status.SKIPPED
        logger.info("Turn %d: %s cannot move and passes", self.tracker.turn_count, player.name.lower())
        self.passes.append(player)
        for observer in self.observers:
            observer.move_skipped(player)

        # a pass flips skip_offset instead of consuming a turn index: turn_count keeps counting stones placed
        self.tracker.skip()
        self._record_snapshot()
        self._await_move()

    def _end_game(self) -> None:
        self.status = Status.GAME_OVER
        score = self.score()
        logger.info(
            "Game over after %d turns: black %d, white %d",
            self.tracker.turn_count,
            score[Piece.BLACK],
            score[Piece.WHITE],
        )
        for observer in self.observers:
            observer.game_over(score)

    def _record_snapshot(self) -> HistoryEntry:
        return self.history.push(
            self.tracker.turn_count, self.tracker.current_player, self.board
        )

    # -- ASSERTIONS ---
    def _assert_interactive(self) -> None:
        if not self.interactive:
            raise GameStateError("Waiting for the bot to move.")

    def _assert_in_progress(self) -> None:
        if self.status == Status.GAME_OVER:
            raise GameStateError(f"Game is not in progress. status: {self.status}")

    def _assert_human_turn(self) -> None:
        if self._is_bot_turn():
            raise NotYourTurnError(
                f"It is not your turn. Waiting for the bot ({self.current_player.name.lower()}) to make a move first."
            )

    def _assert_ticket_current(self, ticket: BotTicket) -> None:
        if ticket.generation != self._generation:
            raise StaleBotResolutionError("The game was restarted in the meantime.")
        if ticket.turn_count != self.tracker.turn_count:
            raise StaleBotResolutionError(
                f"Scheduled for turn {ticket.turn_count}, but it is turn {self.tracker.turn_count}."
            )
        if self.bot is None or self.bot.color != ticket.color:
            raise StaleBotResolutionError("The bot no longer plays this color.")
        if not self._is_bot_turn():
            raise StaleBotResolutionError("It is not the bot's turn.")

    # -- BOT HELPERS ---
    def _is_bot_turn(self) -> bool:
        return (
            self.bot is not None
            and self.status != Status.GAME_OVER
            and self.tracker.current_player == self.bot.color
        )

    def _schedule_bot_if_needed(self) -> None:
        """Block human input, then let the scheduler call back with the bot's move."""
        if not self._is_bot_turn():
            return

        # for the type checker
        assert self.bot is not None
        ticket = BotTicket(self._generation, self.tracker.turn_count, self.bot.color)
        self._set_interactive(False)
        self._pending_bot = self.scheduler(
            self.bot_delay, partial(self.resolve_bot_move, ticket)
        )

    def _cancel_pending_bot(self) -> None:
        if self._pending_bot is not None:
            self._pending_bot.cancel()
            self._pending_bot = None

    # -- UNDO / REDO HELPERS ---
    def _travel(self, step: int) -> bool:
        """Shared implementation of undo (step -1) and redo (step +1)."""
        try:
            self._assert_interactive()
            target = self._history_target(step)
            if target is None:
                raise HistoryBoundaryError(
                    f"No ply to go to from turn {self.tracker.turn_count} in direction {step:+d}."
                )
        except (GameStateError, HistoryBoundaryError) as error:
            logger.debug("Ignored history step: %s", error)
            return False

        self._load_turn(target)
        return True

    def _history_target(self, step: int) -> Optional[int]:
        """
        Walk through the history in direction `step` until a ply a human gets to play (or a finished position).
        None if the end of the history is reached first.
        """
        target = self.tracker.turn_count
        while True:
            target += step
            entry = self.history.get(target)
            if entry is None:
                return None
            if not self._is_bot_ply(entry):
                return target

    def _is_bot_ply(self, entry: HistoryEntry) -> bool:
        return (
            self.bot is not None
            and entry.player == self.bot.color
            and not rules.is_game_over(entry.board)
        )

    def _load_turn(self, turn: int) -> None:
        """Restore the board and whose turn it is from the history."""
        entry = self.history.get(turn)
        # for the type checker: only called with a turn found by _history_target
        assert entry is not None

        self.tracker.goto(turn)
        self.tracker.set_player(entry.player)
        self.board.load(entry.board)
        self.passes = []
        self.status = (
            Status.GAME_OVER if rules.is_game_over(self.board) else Status.AWAITING_MOVE
        )
        logger.debug("Moved through history to turn %d", turn)

        self._notify_board_changed()
        self._notify_turn_changed()

    # -- NOTIFICATIONS ---
    def _set_interactive(self, interactive: bool) -> None:
        if self.interactive == interactive:
            return
        self.interactive = interactive
        for observer in self.observers:
            observer.interactivity_changed(interactive)

    def _notify_board_changed(self) -> None:
        for observer in self.observers:
            observer.board_changed(self.board.snapshot())

    def _notify_turn_changed(self) -> None:
        for observer in self.observers:
            observer.turn_changed(self.tracker.turn_count, self.tracker.current_player)
