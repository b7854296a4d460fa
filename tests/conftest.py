"""
Pytest configuration and fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def initial_game_state():
    """Create an initial game state."""
    from checkers.engine import new_game
    return new_game()


@pytest.fixture
def sample_board():
    """Create an initial board."""
    from checkers.board import Board
    return Board.initial()


@pytest.fixture
def make_state():
    """Build a game state from a compact layout."""
    from checkers.game_state import GameState
    from checkers.types import Player

    def _make(turn=Player.ONE, **layout):
        data = dict(layout)
        data["turn"] = int(turn)
        return GameState.from_compact(data)

    return _make
