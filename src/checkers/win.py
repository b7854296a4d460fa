"""Win detection, run after every completed turn."""

import logging
from typing import Optional

from .types import Player
from .board import Board
from .movegen import has_legal_moves

logger = logging.getLogger(__name__)


def detect_winner(board: Board, mover: Player) -> Optional[Player]:
    """
    Decide whether the turn just completed by ``mover`` ended the game.

    The opponent loses if it has no pieces left, or if none of its living
    pieces has a legal move now that it is to play.

    Returns:
        The winning player, or None if the game continues.
    """
    opponent = mover.opponent()

    if board.alive_count(opponent) == 0:
        logger.debug("Player %d has no pieces left", opponent)
        return mover

    if not has_legal_moves(board, opponent):
        logger.debug("Player %d has no legal moves", opponent)
        return mover

    return None
