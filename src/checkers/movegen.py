"""Move generation for checkers.

Men step forward only but capture in all four diagonal directions; kings
step and capture one square in all four. Captures are mandatory across the
whole side: while any piece of a player can jump, none of that player's
pieces may make a plain step, even pieces that have no jump of their own.
"""

from typing import List, Optional, Tuple

from .types import Move, Piece, Player
from .board import Board
from .rules import ALL_DIRECTIONS


def _capture_in(board: Board, piece: Piece, direction: Tuple[int, int]) -> Optional[Move]:
    """The jump a living piece can make in one direction, if any."""
    row, col = piece.position
    dr, dc = direction
    land_row, land_col = row + 2 * dr, col + 2 * dc

    if not board.is_on_board(land_row, land_col):
        return None

    jumped = board.get(row + dr, col + dc)
    if jumped is None or jumped.owner == piece.owner:
        return None
    if board.get(land_row, land_col) is not None:
        return None

    return Move(
        from_pos=(row, col),
        to_pos=(land_row, land_col),
        is_capture=True,
        captured_pos=(row + dr, col + dc),
    )


def capture_moves_for(board: Board, piece: Piece) -> List[Move]:
    """Generate the capture moves of one piece."""
    if not piece.alive:
        return []
    moves = (_capture_in(board, piece, d) for d in ALL_DIRECTIONS)
    return [m for m in moves if m is not None]


def any_capture_exists(board: Board, player: Player) -> bool:
    """Check if any living piece of a player has a capture available."""
    return any(
        _capture_in(board, piece, d) is not None
        for piece in board.alive_pieces(player)
        for d in ALL_DIRECTIONS
    )


def moves_for(board: Board, piece: Piece) -> List[Move]:
    """
    Generate the legal moves of one piece.

    For each direction the capture (if any) is listed before the plain
    step. Plain steps are only generated when no piece of the owner can
    capture anywhere on the board.

    Returns:
        List of legal Move objects (possibly empty).
    """
    if not piece.alive:
        return []

    row, col = piece.position
    steps_allowed = not any_capture_exists(board, piece.owner)

    moves = []
    for dr, dc in ALL_DIRECTIONS:
        capture = _capture_in(board, piece, (dr, dc))
        if capture is not None:
            moves.append(capture)

        if not steps_allowed:
            continue
        # Men never step backward
        if not piece.is_king and dr != piece.owner.forward:
            continue

        if board.is_empty(row + dr, col + dc):
            moves.append(Move(from_pos=(row, col), to_pos=(row + dr, col + dc)))

    return moves


def has_legal_moves(board: Board, player: Player) -> bool:
    """Check if a player has any legal moves."""
    return any(moves_for(board, piece) for piece in board.alive_pieces(player))
