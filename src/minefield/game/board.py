"""
Board module for Minesweeper game.

Implements the game board with mine placement, cell revealing,
flagging and game state management.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from .adjacency import in_bounds, neighbors
from .cell import Cell, CellState
from .mines import DEFAULT_MINE_PROBABILITY, FixedMinePlacer, MinePlacer, RandomMinePlacer
from .reveal import flood_fill

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

MAX_DIMENSION = 255


class GameState(Enum):
    """Possible states of the game."""

    CONTINUE = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns (0-255).
        height: Number of rows (0-255).
        mine_probability: Chance that each cell is a mine.
    """

    width: int = 10
    height: int = 10
    mine_probability: float = DEFAULT_MINE_PROBABILITY

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Board {name} must be an integer")
            if not 0 <= value <= MAX_DIMENSION:
                raise ValueError(
                    f"Board {name} must be between 0 and {MAX_DIMENSION}"
                )
        if not 0.0 <= self.mine_probability <= 1.0:
            raise ValueError("Mine probability must be between 0 and 1")


# Preset difficulty levels
EASY = BoardConfig(5, 5)
MEDIUM = BoardConfig(10, 10)
HARD = BoardConfig(15, 15)

DIFFICULTIES: Dict[str, BoardConfig] = {
    "easy": EASY,
    "medium": MEDIUM,
    "hard": HARD,
}


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells and the overall game state. Cells are stored
    row-major; every per-cell query returns None for coordinates off the
    board instead of raising.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    placer: Optional[MinePlacer] = field(default=None, repr=False)
    _cells: List[Cell] = field(init=False, default_factory=list, repr=False)
    _state: GameState = field(init=False, default=GameState.CONTINUE)
    _width: int = field(init=False, default=0, repr=False)
    _height: int = field(init=False, default=0, repr=False)

    def __post_init__(self) -> None:
        """Lay out the cells after dataclass creation."""
        self._width = self.config.width
        self._height = self.config.height
        if self.placer is None:
            self.placer = RandomMinePlacer(self.config.mine_probability)
        self._init_grid()
        logger.debug("New %dx%d board:\n%s", self.width, self.height, self)

    @classmethod
    def from_mines(
        cls, width: int, height: int, mines: Iterable[Tuple[int, int]]
    ) -> "Board":
        """Create a board with mines at exactly the given (x, y) positions."""
        return cls(BoardConfig(width, height), placer=FixedMinePlacer(mines))

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create the cells and place mines once."""
        layout = self.placer.place(self.width, self.height)
        self._cells = [Cell(mine=mine) for mine in layout]

    def _cell(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not in_bounds(x, y, self.width, self.height):
            return None
        return self._cells[y * self.width + x]

    def _count_adjacent_mines(self, x: int, y: int) -> int:
        """Count mines around a valid position."""
        count = 0
        for neighbor_x, neighbor_y in self.neighbors(x, y):
            if self._cells[neighbor_y * self.width + neighbor_x].mine:
                count += 1
        return count

    def neighbors(self, x: int, y: int) -> List[Tuple[int, int]]:
        """Get valid neighboring (x, y) positions on this board."""
        return neighbors(x, y, self.width, self.height)

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def open(self, x: int, y: int) -> None:
        """
        Open the cell at the given position.

        Opening a mine loses the game without touching any cell. Opening
        a safe cell uncovers it, cascades through zero-count regions and
        then checks for a win. Invalid positions and finished games are
        ignored.

        Args:
            x: Column to open.
            y: Row to open.
        """
        cell = self._cell(x, y)
        if cell is None or self._state != GameState.CONTINUE:
            return

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Opening %s", self.dump(x, y))
        if cell.mine:
            self._state = GameState.LOST
            logger.debug("Mine hit at (%d, %d), game lost", x, y)
            return

        visited = flood_fill(self._cells, self.width, self.height, x, y)
        logger.debug("Uncovered %d cells from (%d, %d)", len(visited), x, y)

        self._check_win_condition()

    def _check_win_condition(self) -> None:
        """Win once no safe cell is left covered."""
        for cell in self._cells:
            if cell.state == CellState.COVERED and not cell.mine:
                return
        self._state = GameState.WON
        logger.debug("All safe cells uncovered, game won")

    def flag(self, x: int, y: int) -> Optional[bool]:
        """
        Toggle flag on a cell.

        Args:
            x: Column.
            y: Row.

        Returns:
            True if the cell is now flagged, False if it is covered again,
            None if the cell is uncovered or the position is invalid.
        """
        cell = self._cell(x, y)
        if cell is None:
            return None
        return cell.toggle_flag()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    @property
    def state(self) -> GameState:
        """Get current game state."""
        return self._state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._state == GameState.CONTINUE

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._state == GameState.LOST

    def cell_state(self, x: int, y: int) -> Optional[CellState]:
        """Get the state of a cell, or None if the position is invalid."""
        cell = self._cell(x, y)
        return None if cell is None else cell.state

    def has_mine(self, x: int, y: int) -> Optional[bool]:
        """Check for a mine, or None if the position is invalid."""
        cell = self._cell(x, y)
        return None if cell is None else cell.mine

    def adjacent_mines(self, x: int, y: int) -> Optional[int]:
        """
        Count mines around a cell.

        Defined for mined cells too, so a finished board can be shown in
        full.
        """
        if self._cell(x, y) is None:
            return None
        return self._count_adjacent_mines(x, y)

    def mines(self) -> int:
        """Total number of mines on the board."""
        return sum(1 for cell in self._cells if cell.mine)

    def flagged(self) -> int:
        """Number of cells currently flagged."""
        return sum(1 for cell in self._cells if cell.is_flagged)

    def mines_left(self) -> int:
        """Mines minus flags; negative when the player over-flags."""
        return self.mines() - self.flagged()

    def uncovered(self) -> int:
        """Number of cells currently uncovered."""
        return sum(1 for cell in self._cells if cell.is_uncovered)

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for an agent.

        Returns:
            Array of shape (height, width) indexed [y, x] where:
                -1 = covered
                -2 = flagged
                0-8 = uncovered with adjacent count
        """
        obs = np.zeros((self.height, self.width), dtype=np.int8)
        for y in range(self.height):
            for x in range(self.width):
                cell = self._cells[y * self.width + x]
                obs[y, x] = cell.to_observation(self._count_adjacent_mines(x, y))
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of covered cells that can still be opened.

        Returns:
            List of (x, y) positions in row-major order.
        """
        actions = []
        for y in range(self.height):
            for x in range(self.width):
                if self._cells[y * self.width + x].is_covered:
                    actions.append((x, y))
        return actions

    # ========================================================================
    # Text Output
    # ========================================================================

    def dump(self, x: int, y: int) -> Optional[str]:
        """One-line debug description of a cell, or None if invalid."""
        cell = self._cell(x, y)
        if cell is None:
            return None
        return (
            f"({x}, {y}) {cell.state.name} mine={cell.mine}, "
            f"adjacent mines: {self._count_adjacent_mines(x, y)}"
        )

    def render(self, reveal_mines: bool = False) -> str:
        """
        Render the board as the player sees it.

        Args:
            reveal_mines: Show every mine as '*', e.g. after a loss.

        Returns:
            Grid with column and row numbers.
        """
        lines = ["   " + "".join(f"{x:<3}" for x in range(self.width))]
        for y in range(self.height):
            row = f"{y:<3}"
            for x in range(self.width):
                row += self._render_cell(x, y, reveal_mines) + "  "
            lines.append(row.rstrip())
        return "\n".join(lines)

    def _render_cell(self, x: int, y: int, reveal_mines: bool) -> str:
        cell = self._cells[y * self.width + x]
        if reveal_mines and cell.mine:
            return "*"
        if cell.is_flagged:
            return "F"
        if cell.is_covered:
            return "."
        count = self._count_adjacent_mines(x, y)
        return str(count) if count else " "

    def __str__(self) -> str:
        """Debug grid: state letter, mine letter and adjacent count per cell."""
        header = "   " + "".join(f"{x:<4}" for x in range(self.width))
        lines = [header]
        for y in range(self.height):
            row = f"{y:<3}"
            for x in range(self.width):
                cell = self._cells[y * self.width + x]
                row += f"{cell.code()}{self._count_adjacent_mines(x, y)} "
            lines.append(row)
        return "\n".join(lines) + "\n"
