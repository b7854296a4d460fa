"""Board state representation for checkers."""

from typing import Iterable, Iterator, List, Optional

from .types import Piece, Player, Position, Rank
from .rules import BOARD_SIZE, PLAYER_ONE_ROWS, PLAYER_TWO_ROWS
from .config import DisplaySettings


class Board:
    """
    8x8 checkers board plus the roster of every piece created for the game.

    Only dark squares are used: those where (row + col) % 2 == 1.
    Row 0 is the top; Player 2 starts on rows 0-2, Player 1 on rows 5-7.

    The roster is indexed by piece id. Captured pieces stay in it with
    ``alive=False`` so alive/captured counts can be taken at any time.
    """

    SIZE = BOARD_SIZE

    def __init__(self):
        """Create an empty board with an empty roster."""
        self._grid: List[List[Optional[Piece]]] = [
            [None] * self.SIZE for _ in range(self.SIZE)
        ]
        self._roster: List[Piece] = []

    @classmethod
    def initial(cls) -> "Board":
        """Create a board with the standard 12 vs 12 setup."""
        board = cls()

        # Player 2 pieces on rows 0-2 (top), dark squares
        for row in PLAYER_TWO_ROWS:
            for col in range(cls.SIZE):
                if cls.is_dark(row, col):
                    board.add_piece(Player.TWO, (row, col))

        # Player 1 pieces on rows 5-7 (bottom), dark squares
        for row in PLAYER_ONE_ROWS:
            for col in range(cls.SIZE):
                if cls.is_dark(row, col):
                    board.add_piece(Player.ONE, (row, col))

        return board

    @staticmethod
    def is_dark(row: int, col: int) -> bool:
        """Check if a square is a playable (dark) square."""
        return (row + col) % 2 == 1

    @staticmethod
    def is_on_board(row: int, col: int) -> bool:
        """Check if a position is within the board."""
        return 0 <= row < Board.SIZE and 0 <= col < Board.SIZE

    def get(self, row: int, col: int) -> Optional[Piece]:
        """Get the piece at a square, or None if empty or off the board."""
        if not self.is_on_board(row, col):
            return None
        return self._grid[row][col]

    def set(self, row: int, col: int, piece: Optional[Piece]) -> None:
        """
        Put a piece on a square, or clear it with None.

        A placed piece has its recorded position updated. No legality checks
        are made here.
        """
        if not self.is_on_board(row, col):
            raise IndexError(f"Square ({row}, {col}) is off the board")
        self._grid[row][col] = piece
        if piece is not None:
            piece.position = (row, col)

    def is_empty(self, row: int, col: int) -> bool:
        """Check if an on-board square holds no piece."""
        return self.is_on_board(row, col) and self._grid[row][col] is None

    def add_piece(self, owner: Player, pos: Position, rank: Rank = Rank.MAN) -> Piece:
        """Create a new piece, register it in the roster and place it."""
        piece = Piece(piece_id=len(self._roster), owner=owner, rank=rank)
        self._roster.append(piece)
        self.set(pos[0], pos[1], piece)
        return piece

    def add_captured(self, owner: Player) -> Piece:
        """Register an already captured piece (used when restoring layouts)."""
        piece = Piece(piece_id=len(self._roster), owner=owner, alive=False)
        self._roster.append(piece)
        return piece

    def capture(self, row: int, col: int) -> Piece:
        """Remove the piece on a square from play, keeping it in the roster."""
        piece = self.get(row, col)
        if piece is None:
            raise ValueError(f"No piece to capture at ({row}, {col})")
        self.set(row, col, None)
        piece.alive = False
        piece.position = None
        return piece

    def piece(self, piece_id: int) -> Optional[Piece]:
        """Look up a piece by id, or None for unknown ids."""
        if isinstance(piece_id, int) and 0 <= piece_id < len(self._roster):
            return self._roster[piece_id]
        return None

    def pieces(self, player: Optional[Player] = None) -> Iterator[Piece]:
        """Iterate over the roster, optionally filtered by player."""
        for piece in self._roster:
            if player is None or piece.owner == player:
                yield piece

    def alive_pieces(self, player: Player) -> Iterator[Piece]:
        """Iterate over a player's pieces still on the board."""
        return (p for p in self.pieces(player) if p.alive)

    def alive_count(self, player: Player) -> int:
        """Number of a player's pieces still on the board."""
        return sum(1 for _ in self.alive_pieces(player))

    def captured_count(self, player: Player) -> int:
        """Number of a player's pieces that have been jumped."""
        return sum(1 for p in self.pieces(player) if not p.alive)

    def to_compact(self) -> dict:
        """Convert board to compact JSON-serializable format."""
        data = {
            "p1_men": [],
            "p1_kings": [],
            "p2_men": [],
            "p2_kings": [],
            "p1_captured": self.captured_count(Player.ONE),
            "p2_captured": self.captured_count(Player.TWO),
        }

        for row in range(self.SIZE):
            for col in range(self.SIZE):
                piece = self._grid[row][col]
                if piece is None:
                    continue
                prefix = "p1" if piece.owner == Player.ONE else "p2"
                kind = "kings" if piece.is_king else "men"
                data[f"{prefix}_{kind}"].append([row, col])

        return data

    @classmethod
    def from_compact(cls, data: dict) -> "Board":
        """
        Create a board from compact format.

        Raises:
            ValueError: if a square is off the board, light, or listed twice.
        """
        board = cls()

        groups = [
            ("p1_men", Player.ONE, Rank.MAN),
            ("p1_kings", Player.ONE, Rank.KING),
            ("p2_men", Player.TWO, Rank.MAN),
            ("p2_kings", Player.TWO, Rank.KING),
        ]
        for key, owner, rank in groups:
            for pos in data.get(key, []):
                row, col = pos
                if not cls.is_on_board(row, col):
                    raise ValueError(f"{key}: ({row}, {col}) is off the board")
                if not cls.is_dark(row, col):
                    raise ValueError(f"{key}: ({row}, {col}) is a light square")
                if board.get(row, col) is not None:
                    raise ValueError(f"{key}: ({row}, {col}) is already occupied")
                board.add_piece(owner, (row, col), rank)

        for _ in range(data.get("p1_captured", 0)):
            board.add_captured(Player.ONE)
        for _ in range(data.get("p2_captured", 0)):
            board.add_captured(Player.TWO)

        return board

    def render(
        self,
        display: Optional[DisplaySettings] = None,
        highlights: Iterable[Position] = (),
    ) -> str:
        """Render the board as text, marking highlighted empty squares."""
        if display is None:
            display = DisplaySettings()

        symbols = {
            (Player.ONE, Rank.MAN): display.p1_man,
            (Player.ONE, Rank.KING): display.p1_king,
            (Player.TWO, Rank.MAN): display.p2_man,
            (Player.TWO, Rank.KING): display.p2_king,
        }

        highlights = set(highlights)
        lines = []
        if display.show_coordinates:
            lines.append("  " + " ".join(str(c) for c in range(self.SIZE)))
        for row in range(self.SIZE):
            cells = []
            for col in range(self.SIZE):
                piece = self._grid[row][col]
                if piece is not None:
                    cells.append(symbols[(piece.owner, piece.rank)])
                elif (row, col) in highlights:
                    cells.append(display.highlight)
                elif self.is_dark(row, col):
                    cells.append(display.empty_dark)
                else:
                    cells.append(display.empty_light)
            row_str = " ".join(cells)
            lines.append(f"{row} {row_str}" if display.show_coordinates else row_str)
        return "\n".join(lines)

    def __str__(self) -> str:
        """String representation of the board."""
        return self.render()

    def __repr__(self) -> str:
        return (f"Board(p1={self.alive_count(Player.ONE)}, "
                f"p2={self.alive_count(Player.TWO)})")
