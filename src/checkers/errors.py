"""Errors raised by the checkers engine.

Every error is raised before the game state is touched, so a rejected
call always leaves the state exactly as it was.
"""


class CheckersError(Exception):
    """Base class for rejected engine operations."""


class WrongPlayerError(CheckersError):
    """A piece not owned by the player to move was selected or moved."""


class InvalidMoveError(CheckersError):
    """The requested move or selection is not in the current legal set."""


class GameOverError(CheckersError):
    """An action was attempted after the game was decided."""
