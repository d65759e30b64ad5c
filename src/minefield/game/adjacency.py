"""
Neighbor lookup for grid cells.

Coordinates are (x, y) with x the column and y the row.
"""
from typing import List, Tuple


def in_bounds(x: int, y: int, width: int, height: int) -> bool:
    """Check if position is within board bounds."""
    return 0 <= x < width and 0 <= y < height


def neighbors(x: int, y: int, width: int, height: int) -> List[Tuple[int, int]]:
    """
    Get valid neighboring cell positions.

    Scans the 3x3 block around the center row by row, so the order is
    stable: corners give 3 neighbors, edges 5 and interior cells 8.

    Args:
        x: Column of center cell.
        y: Row of center cell.
        width: Number of columns on the board.
        height: Number of rows on the board.

    Returns:
        List of (x, y) tuples, empty when the center is off the board.
    """
    if not in_bounds(x, y, width, height):
        return []

    result = []
    for delta_y in (-1, 0, 1):
        for delta_x in (-1, 0, 1):
            if delta_x == 0 and delta_y == 0:
                continue
            new_x = x + delta_x
            new_y = y + delta_y
            if in_bounds(new_x, new_y, width, height):
                result.append((new_x, new_y))
    return result
