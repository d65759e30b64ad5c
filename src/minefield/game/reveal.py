"""
Cascading reveal of safe regions.

Iterative flood fill: large open areas never grow the call stack.
"""
from typing import List

import numpy as np

from .adjacency import neighbors
from .cell import Cell, CellState


def flood_fill(
    cells: List[Cell], width: int, height: int, x: int, y: int
) -> List[int]:
    """
    Uncover the cell at (x, y) and cascade through zero-count cells.

    The origin must not be a mine. A cell whose neighbors include a mine
    is uncovered but stops the cascade. Flagged cells reached by the
    cascade are uncovered as well.

    Args:
        cells: Row-major cell list of the board, mutated in place.
        width: Number of columns.
        height: Number of rows.
        x: Column of the origin.
        y: Row of the origin.

    Returns:
        Indices of the cells visited, in visit order.
    """
    visited = np.zeros(len(cells), dtype=bool)
    stack = [(x, y)]
    order = []

    while stack:
        cell_x, cell_y = stack.pop()
        index = cell_y * width + cell_x
        if visited[index]:
            continue
        visited[index] = True
        order.append(index)

        cell = cells[index]
        cell.uncover()

        around = neighbors(cell_x, cell_y, width, height)
        if any(cells[ny * width + nx].mine for nx, ny in around):
            continue

        for nx, ny in around:
            if cells[ny * width + nx].state != CellState.UNCOVERED:
                stack.append((nx, ny))

    return order
