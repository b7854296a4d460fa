"""Game rules constants for checkers."""

# Board dimensions
BOARD_SIZE = 8

# Starting rows for each player
PLAYER_ONE_ROWS = range(5, 8)  # Rows 5, 6, 7 (bottom)
PLAYER_TWO_ROWS = range(0, 3)  # Rows 0, 1, 2 (top)

PIECES_PER_PLAYER = 12

# Diagonal directions (row_delta, col_delta), scanned in this order
ALL_DIRECTIONS = [(1, 1), (1, -1), (-1, 1), (-1, -1)]

# Promotion
# Player 1 promotes on row 0
# Player 2 promotes on row 7
PROMOTION_ROW_P1 = 0
PROMOTION_ROW_P2 = 7
