"""
Mine placement strategies.

A board asks its placer for one mine flag per cell, in row-major order,
exactly once at construction.
"""
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Tuple

import numpy as np


DEFAULT_MINE_PROBABILITY = 0.25


# ============================================================================
# Placer Interface
# ============================================================================

class MinePlacer(ABC):
    """Abstract source of mine layouts."""

    @abstractmethod
    def place(self, width: int, height: int) -> List[bool]:
        """
        Decide which cells hold a mine.

        Args:
            width: Number of columns.
            height: Number of rows.

        Returns:
            List of width * height flags, index y * width + x.
        """
        pass


# ============================================================================
# Implementations
# ============================================================================

class RandomMinePlacer(MinePlacer):
    """
    Independent Bernoulli trial per cell.

    Mine count is not fixed: a board may end up with no mines at all,
    or with every cell mined.
    """

    def __init__(
        self,
        probability: float = DEFAULT_MINE_PROBABILITY,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        """
        Initialize the placer.

        Args:
            probability: Chance that any given cell is a mine.
            seed: Random seed for reproducibility (ignored if rng is given).
            rng: Generator to draw from, e.g. a Gymnasium env's np_random.
        """
        self.probability = probability
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def place(self, width: int, height: int) -> List[bool]:
        draws = self.rng.random(width * height)
        return [bool(value) for value in draws < self.probability]


class FixedMinePlacer(MinePlacer):
    """Mines at known coordinates, for tests and scripted games."""

    def __init__(self, mines: Iterable[Tuple[int, int]] = ()) -> None:
        self.mines = frozenset(mines)

    def place(self, width: int, height: int) -> List[bool]:
        layout = [False] * (width * height)
        for x, y in self.mines:
            # Coordinates outside the grid are dropped
            if 0 <= x < width and 0 <= y < height:
                layout[y * width + x] = True
        return layout
