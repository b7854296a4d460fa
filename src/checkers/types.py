"""Type definitions for the checkers engine."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple

from .rules import PROMOTION_ROW_P1, PROMOTION_ROW_P2


# Type alias for board positions
Position = Tuple[int, int]


class Player(IntEnum):
    """Player identifiers."""
    ONE = 1  # Starts on rows 5-7, moves upward (decreasing row)
    TWO = 2  # Starts on rows 0-2, moves downward (increasing row)

    def opponent(self) -> "Player":
        """Return the opposing player."""
        return Player.TWO if self == Player.ONE else Player.ONE

    @property
    def forward(self) -> int:
        """Row delta of a forward step for this player's men."""
        return -1 if self == Player.ONE else 1

    @property
    def promotion_row(self) -> int:
        """Row on which this player's men are crowned."""
        return PROMOTION_ROW_P1 if self == Player.ONE else PROMOTION_ROW_P2


class Rank(Enum):
    """Ranks of pieces."""
    MAN = "man"
    KING = "king"


@dataclass(eq=False)
class Piece:
    """
    A game piece.

    Pieces are mutated in place by the engine (position, rank, alive) and
    compared by identity. A captured piece keeps its roster slot with
    ``alive=False`` and ``position=None``.
    """
    piece_id: int
    owner: Player
    rank: Rank = Rank.MAN
    position: Optional[Position] = None
    alive: bool = True

    @property
    def is_king(self) -> bool:
        """Check if this piece is a king."""
        return self.rank == Rank.KING

    def promote(self) -> None:
        """Crown this piece. Kings stay kings."""
        self.rank = Rank.KING

    def __repr__(self) -> str:
        status = "" if self.alive else ", captured"
        return (f"Piece(#{self.piece_id}, P{int(self.owner)} {self.rank.value}, "
                f"{self.position}{status})")


@dataclass(frozen=True)
class Move:
    """
    A single step or a single jump by one piece.

    Attributes:
        from_pos: Square the piece leaves.
        to_pos: Square the piece lands on.
        is_capture: True if the move jumps an opponent piece.
        captured_pos: Square of the jumped piece (captures only).
    """
    from_pos: Position
    to_pos: Position
    is_capture: bool = False
    captured_pos: Optional[Position] = None

    def to_dict(self) -> dict:
        """Convert move to a JSON-serializable dict."""
        return {
            "from": list(self.from_pos),
            "to": list(self.to_pos),
            "is_capture": self.is_capture,
            "captured": list(self.captured_pos) if self.captured_pos else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Move":
        """Create a Move from a dict representation."""
        captured = data.get("captured")
        return cls(
            from_pos=tuple(data["from"]),
            to_pos=tuple(data["to"]),
            is_capture=data.get("is_capture", False),
            captured_pos=tuple(captured) if captured else None,
        )

    def __repr__(self) -> str:
        (fr, fc), (tr, tc) = self.from_pos, self.to_pos
        if self.is_capture:
            return f"Move(({fr},{fc})x({tr},{tc}), captures={self.captured_pos})"
        return f"Move(({fr},{fc})->({tr},{tc}))"
