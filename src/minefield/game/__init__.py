"""
Minesweeper game module.

Provides the board engine: cells, neighbor lookup, mine placement,
cascading reveal and game state, plus a Gymnasium environment.
"""
from .cell import Cell, CellState
from .adjacency import neighbors
from .mines import MinePlacer, RandomMinePlacer, FixedMinePlacer
from .reveal import flood_fill
from .board import (
    Board,
    BoardConfig,
    GameState,
    MAX_DIMENSION,
    EASY,
    MEDIUM,
    HARD,
    DIFFICULTIES,
)
from .environment import MinesweeperEnv, make_vec_env

__all__ = [
    "Cell",
    "CellState",
    "neighbors",
    "MinePlacer",
    "RandomMinePlacer",
    "FixedMinePlacer",
    "flood_fill",
    "Board",
    "BoardConfig",
    "GameState",
    "MAX_DIMENSION",
    "EASY",
    "MEDIUM",
    "HARD",
    "DIFFICULTIES",
    "MinesweeperEnv",
    "make_vec_env",
]
