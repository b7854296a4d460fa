"""Checkers rule engine for an 8x8 board.

Modules:
    types       - Player, Rank, Piece, Move
    board       - board grid and piece roster
    movegen     - legal moves and the mandatory-capture check
    win         - end-of-game detection
    game_state  - turn phase and selection
    engine      - state machine and front-end API
    config      - YAML-backed settings
"""

from .types import Player, Rank, Piece, Move, Position
from .board import Board
from .errors import CheckersError, WrongPlayerError, InvalidMoveError, GameOverError
from .movegen import moves_for, capture_moves_for, any_capture_exists, has_legal_moves
from .win import detect_winner
from .game_state import GameState, Phase
from .engine import (
    Engine,
    MoveEvent,
    new_game,
    select_piece,
    apply_move,
    current_winner,
)

__version__ = "1.0.0"

__all__ = [
    # Types
    'Player',
    'Rank',
    'Piece',
    'Move',
    'Position',
    'Board',
    # Errors
    'CheckersError',
    'WrongPlayerError',
    'InvalidMoveError',
    'GameOverError',
    # Rules
    'moves_for',
    'capture_moves_for',
    'any_capture_exists',
    'has_legal_moves',
    'detect_winner',
    # Engine
    'GameState',
    'Phase',
    'Engine',
    'MoveEvent',
    'new_game',
    'select_piece',
    'apply_move',
    'current_winner',
]
