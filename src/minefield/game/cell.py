"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their state
(covered/flagged/uncovered) and whether they hold a mine.
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    COVERED = auto()
    FLAGGED = auto()
    UNCOVERED = auto()


_STATE_CODES = {
    CellState.COVERED: "C",
    CellState.FLAGGED: "F",
    CellState.UNCOVERED: "U",
}


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        mine: Whether this cell contains a mine. Set once by the board.
        state: Current visual state (covered, flagged or uncovered).
    """

    mine: bool = False
    state: CellState = CellState.COVERED

    def uncover(self) -> None:
        """Uncover this cell, dropping any flag on it."""
        self.state = CellState.UNCOVERED

    def toggle_flag(self) -> Optional[bool]:
        """
        Toggle flag on this cell.

        Returns:
            True if the cell is now flagged, False if it is covered again,
            None if the cell is uncovered and cannot be flagged.
        """
        if self.state == CellState.COVERED:
            self.state = CellState.FLAGGED
            return True
        if self.state == CellState.FLAGGED:
            self.state = CellState.COVERED
            return False
        return None

    @property
    def is_covered(self) -> bool:
        """Check if cell is covered."""
        return self.state == CellState.COVERED

    @property
    def is_uncovered(self) -> bool:
        """Check if cell is uncovered."""
        return self.state == CellState.UNCOVERED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def code(self) -> str:
        """Two-letter debug code: state letter followed by mine letter."""
        return _STATE_CODES[self.state] + ("X" if self.mine else "O")

    def to_observation(self, adjacent_mines: int) -> int:
        """
        Convert cell to observation value for an agent.

        Args:
            adjacent_mines: Mine count around this cell.

        Returns:
            -1: Covered cell
            -2: Flagged cell
            0-8: Uncovered cell with adjacent mine count
        """
        if self.state == CellState.COVERED:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        return adjacent_mines
