"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, BoardConfig, Square


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 bombs."""
    return Board(BoardConfig(seed=1234))


@pytest.fixture
def corner_bomb_board() -> Board:
    """Create a 3x3 board with a single bomb at (2, 0)."""
    return Board.from_bombs(3, 3, [(2, 0)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no bombs for flood testing."""
    return Board(BoardConfig(5, 5, 0))


@pytest.fixture
def walled_board() -> Board:
    """
    Create a 5x3 board split by a column of bombs at x=2.

    . . * . .
    . . * . .
    . . * . .
    """
    return Board.from_bombs(5, 3, [(2, 0), (2, 1), (2, 2)])


# ============================================================================
# Square Fixtures
# ============================================================================

@pytest.fixture
def hidden_square() -> Square:
    """Create a hidden safe square."""
    return Square.hidden()


@pytest.fixture
def bomb_square() -> Square:
    """Create a hidden square carrying a bomb."""
    return Square.hidden(has_bomb=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
