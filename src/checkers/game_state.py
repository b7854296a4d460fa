"""Game state management for checkers."""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass

from .types import Move, Piece, Player
from .board import Board


class Phase(Enum):
    """Where the turn currently stands."""
    AWAITING_SELECTION = "awaiting_selection"
    PIECE_SELECTED = "piece_selected"
    CHAIN_CAPTURE = "chain_capture"
    GAME_OVER = "game_over"


@dataclass
class GameState:
    """
    Complete game state: board, turn and selection.

    The state is mutated in place by the engine. ``selected`` is the piece
    of the PIECE_SELECTED and CHAIN_CAPTURE phases, ``legal_moves`` its
    destinations as last computed, and ``winner`` is set in GAME_OVER.
    Presentation layers render from these fields and never write to them.
    """
    board: Board
    current_player: Player = Player.ONE
    phase: Phase = Phase.AWAITING_SELECTION
    selected: Optional[Piece] = None
    legal_moves: Tuple[Move, ...] = ()
    winner: Optional[Player] = None

    @classmethod
    def initial(cls) -> "GameState":
        """Create the initial game state."""
        return cls(board=Board.initial())

    @property
    def is_over(self) -> bool:
        """Check if the game has been decided."""
        return self.phase == Phase.GAME_OVER

    def to_compact(self) -> dict:
        """Convert game state to compact JSON-serializable format."""
        data = self.board.to_compact()
        data["turn"] = int(self.current_player)
        data["phase"] = self.phase.value
        data["selected"] = list(self.selected.position) if self.selected else None
        data["moves"] = [m.to_dict() for m in self.legal_moves]
        data["winner"] = int(self.winner) if self.winner else None
        return data

    @classmethod
    def from_compact(cls, data: dict) -> "GameState":
        """
        Create a game state from compact format.

        Only the board and the player to move are restored; the new state
        always starts with no piece selected.
        """
        board = Board.from_compact(data)
        current_player = Player(data.get("turn", Player.ONE))
        return cls(board=board, current_player=current_player)

    def __str__(self) -> str:
        lines = [
            f"Turn: Player {int(self.current_player)} | {self.phase.value}",
            str(self.board),
        ]
        if self.winner is not None:
            lines.append(f"Game Over! Winner: Player {int(self.winner)}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"GameState(player={int(self.current_player)}, phase={self.phase.value})"
