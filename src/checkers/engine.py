"""Game engine - turn state machine and the API used by front-ends.

The module-level functions (``new_game``, ``select_piece``, ``apply_move``,
``current_winner``) operate on a GameState and mutate it in place. Every
check runs before the first mutation, so a call that raises leaves the
state untouched. ``Engine`` wraps one state for front-ends that prefer an
object with callbacks.

The engine is not thread-safe; hosts must serialize calls into it.
"""

import logging
from enum import Enum
from typing import Callable, List, Optional, Tuple

from .types import Move, Piece, Player, Position
from .game_state import GameState, Phase
from .errors import GameOverError, InvalidMoveError, WrongPlayerError
from .movegen import capture_moves_for, moves_for
from .win import detect_winner

logger = logging.getLogger(__name__)


class MoveEvent(Enum):
    """
    What happened as a result of an applied move.

    CONTINUED is an alias of TURN_SWITCHED, so iterating yields three members.
    """
    TURN_SWITCHED = "turn_switched"
    CONTINUED = "turn_switched"  # alias: play continues with the other side
    CHAIN_CONTINUES = "chain_continues"
    GAME_OVER = "game_over"


def new_game() -> GameState:
    """Create a fresh game: 12 vs 12, Player One to move."""
    logger.info("New game started")
    return GameState.initial()


def current_winner(state: GameState) -> Optional[Player]:
    """The winner of a decided game, or None while play goes on."""
    return state.winner


def _check_not_over(state: GameState) -> None:
    if state.is_over:
        raise GameOverError(f"Game is over, Player {int(state.winner)} won")


def _is_square(pos) -> bool:
    """A (row, col) pair of ints."""
    return (isinstance(pos, tuple) and len(pos) == 2
            and all(isinstance(v, int) for v in pos))


def select_piece(state: GameState, piece_id: int) -> Tuple[List[Move], GameState]:
    """
    Select a piece of the player to move and list its legal moves.

    A piece without legal moves leaves (or puts) the state in
    AWAITING_SELECTION and an empty list is returned. During a chain
    capture only the capturing piece may be selected.

    Raises:
        GameOverError: the game has been decided.
        InvalidMoveError: unknown or captured piece, or a different piece
            than the one that must continue capturing.
        WrongPlayerError: the piece belongs to the other player.
    """
    _check_not_over(state)

    piece = state.board.piece(piece_id)
    if piece is None or not piece.alive:
        raise InvalidMoveError(f"No piece #{piece_id} on the board")
    if piece.owner != state.current_player:
        raise WrongPlayerError(
            f"Piece #{piece_id} belongs to Player {int(piece.owner)}, "
            f"Player {int(state.current_player)} is to move"
        )

    if state.phase == Phase.CHAIN_CAPTURE:
        if piece is not state.selected:
            raise InvalidMoveError(
                f"Piece #{state.selected.piece_id} must continue capturing"
            )
        moves = capture_moves_for(state.board, piece)
        state.legal_moves = tuple(moves)
        return moves, state

    moves = moves_for(state.board, piece)
    if not moves:
        logger.debug("Piece #%d has no legal moves", piece_id)
        state.phase = Phase.AWAITING_SELECTION
        state.selected = None
        state.legal_moves = ()
        return moves, state

    state.phase = Phase.PIECE_SELECTED
    state.selected = piece
    state.legal_moves = tuple(moves)
    logger.debug("Selected %r with %d moves", piece, len(moves))
    return moves, state


def _current_moves(state: GameState) -> List[Move]:
    """Legal moves of the selected piece, recomputed from the board."""
    if state.phase == Phase.CHAIN_CAPTURE:
        return capture_moves_for(state.board, state.selected)
    return moves_for(state.board, state.selected)


def apply_move(state: GameState, move: Move) -> Tuple[GameState, MoveEvent]:
    """
    Apply a move of the selected piece.

    Raises:
        GameOverError: the game has been decided.
        WrongPlayerError: the move starts from the other player's piece.
        InvalidMoveError: malformed move, no piece is selected, or the move
            is not one of the selected piece's legal moves.
    """
    _check_not_over(state)

    if not isinstance(move, Move):
        raise InvalidMoveError(f"Not a move: {type(move).__name__}")
    if not (_is_square(move.from_pos) and _is_square(move.to_pos)):
        raise InvalidMoveError(f"Malformed move {move.from_pos} -> {move.to_pos}")

    board = state.board
    mover = state.current_player

    moving = board.get(*move.from_pos)
    if moving is not None and moving.owner != mover:
        raise WrongPlayerError(
            f"Piece at {move.from_pos} belongs to Player {int(moving.owner)}"
        )
    if state.phase == Phase.AWAITING_SELECTION or state.selected is None:
        raise InvalidMoveError("No piece selected")

    piece = state.selected
    if move not in _current_moves(state):
        raise InvalidMoveError(f"{move!r} is not legal for piece #{piece.piece_id}")

    board.set(*move.from_pos, None)
    if move.is_capture:
        captured = board.capture(*move.captured_pos)
        logger.debug("Player %d captured %r", mover, captured)
    board.set(*move.to_pos, piece)

    if not piece.is_king and move.to_pos[0] == mover.promotion_row:
        piece.promote()
        logger.debug("Piece #%d crowned at %s", piece.piece_id, move.to_pos)

    logger.debug("Player %d played %r", mover, move)

    if move.is_capture:
        further = capture_moves_for(board, piece)
        if further:
            state.phase = Phase.CHAIN_CAPTURE
            state.legal_moves = tuple(further)
            return state, MoveEvent.CHAIN_CONTINUES

    state.current_player = mover.opponent()
    state.phase = Phase.AWAITING_SELECTION
    state.selected = None
    state.legal_moves = ()

    winner = detect_winner(board, mover)
    if winner is not None:
        state.phase = Phase.GAME_OVER
        state.winner = winner
        logger.info("Game over, Player %d wins", winner)
        return state, MoveEvent.GAME_OVER

    return state, MoveEvent.TURN_SWITCHED


class Engine:
    """
    Game engine that holds one game and notifies a front-end of changes.

    Front-ends feed it discrete intents (select a piece, choose a
    destination) and re-render from ``state`` after each call.
    """

    def __init__(self, state: Optional[GameState] = None):
        self.state: GameState = state if state is not None else GameState.initial()

        # Callbacks
        self.on_state_changed: Optional[Callable[[GameState], None]] = None
        self.on_game_over: Optional[Callable[[Player], None]] = None

    def new_game(self) -> None:
        """Start a new game, discarding the current one entirely."""
        self.state = new_game()
        self._notify_state_changed()

    @property
    def winner(self) -> Optional[Player]:
        """Winner of the current game, if decided."""
        return current_winner(self.state)

    def legal_moves(self) -> List[Move]:
        """Moves of the currently selected piece."""
        return list(self.state.legal_moves)

    def piece_at(self, pos: Position) -> Optional[Piece]:
        """The piece on a square, if any."""
        return self.state.board.get(*pos)

    def select_piece(self, piece_id: int) -> List[Move]:
        """Select a piece by id and return its legal moves."""
        moves, self.state = select_piece(self.state, piece_id)
        self._notify_state_changed()
        return moves

    def select_at(self, pos: Position) -> List[Move]:
        """Select the piece standing on a square."""
        _check_not_over(self.state)
        piece = self.piece_at(pos)
        if piece is None:
            raise InvalidMoveError(f"No piece at {pos}")
        return self.select_piece(piece.piece_id)

    def choose_destination(self, pos: Position) -> MoveEvent:
        """Play the selected piece's move that lands on a square."""
        _check_not_over(self.state)
        for move in self.state.legal_moves:
            if move.to_pos == tuple(pos):
                return self.apply_move(move)
        raise InvalidMoveError(f"No legal move to {pos}")

    def apply_move(self, move: Move) -> MoveEvent:
        """Apply a move of the selected piece."""
        self.state, event = apply_move(self.state, move)
        self._notify_state_changed()
        if event == MoveEvent.GAME_OVER and self.on_game_over:
            self.on_game_over(self.state.winner)
        return event

    def _notify_state_changed(self) -> None:
        """Notify listeners of state change."""
        if self.on_state_changed:
            self.on_state_changed(self.state)
