"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src and the repository root to path for imports
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(0, str(ROOT))

from minefield.game import Board, BoardConfig, Cell, MinesweeperEnv


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 10x10 board with random mines."""
    return Board(BoardConfig(10, 10))


@pytest.fixture
def empty_board() -> Board:
    """Create a 4x4 board with no mines for cascade testing."""
    return Board.from_mines(4, 4, [])


@pytest.fixture
def single_mine_board() -> Board:
    """Create a 4x4 board with one mine at (1, 1)."""
    return Board.from_mines(4, 4, [(1, 1)])


@pytest.fixture
def ring_board() -> Board:
    """Create a 5x6 board with a ring of mines around (2, 2)."""
    mines = [
        (1, 1), (2, 1), (3, 1),
        (1, 2), (3, 2),
        (1, 3), (2, 3), (3, 3),
    ]
    return Board.from_mines(5, 6, mines)


@pytest.fixture
def degenerate_board() -> Board:
    """Create a board with no cells."""
    return Board(BoardConfig(0, 0))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def covered_cell() -> Cell:
    """Create a covered cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(mine=True)


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture
def small_config() -> BoardConfig:
    """Small configuration for environment tests."""
    return BoardConfig(4, 3)


@pytest.fixture
def env(small_config: BoardConfig) -> MinesweeperEnv:
    """Environment on a small board, reset with a fixed seed."""
    environment = MinesweeperEnv(config=small_config, render_mode="ansi")
    environment.reset(seed=7)
    return environment
