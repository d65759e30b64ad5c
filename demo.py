#!/usr/bin/env python3
"""Replay a scripted game on a fixed board, move by move."""
import argparse
import time
from typing import List, Tuple

from minefield.game import Board, GameState

# Eight mines ringing (2, 2) on a 5x6 board
RING_MINES = [
    (1, 1), (2, 1), (3, 1),
    (1, 2), (3, 2),
    (1, 3), (2, 3), (3, 3),
]

# The bottom row is mine-free, so opening it cascades up to row 4
WINNING_MOVES: List[Tuple[str, int, int]] = [
    ("open", 0, 5),
    ("flag", 1, 3),
    ("flag", 2, 3),
    ("flag", 3, 3),
    ("flag", 2, 2),
    ("flag", 2, 2),
    ("flag", 0, 4),
    ("open", 0, 3),
    ("open", 4, 3),
    ("open", 0, 2),
    ("open", 4, 2),
    ("open", 0, 1),
    ("open", 4, 1),
    ("open", 0, 0),
    ("open", 1, 0),
    ("open", 2, 0),
    ("open", 3, 0),
    ("open", 4, 0),
    ("open", 2, 2),
]

LOSING_MOVES: List[Tuple[str, int, int]] = [
    ("open", 0, 5),
    ("flag", 1, 3),
    ("open", 2, 3),
]


def describe(board: Board, action: str, x: int, y: int) -> str:
    """Apply one move and say what happened."""
    if action == "open":
        board.open(x, y)
        return f"open ({x}, {y})"

    result = board.flag(x, y)
    if result is None:
        return f"flag ({x}, {y}) rejected, cell is uncovered"
    return f"{'flag' if result else 'unflag'} ({x}, {y})"


def demo(delay: float = 0.5, lose: bool = False) -> Board:
    """Play the script and print the board after every move."""
    board = Board.from_mines(5, 6, RING_MINES)
    moves = LOSING_MOVES if lose else WINNING_MOVES

    print(f"Board: {board.width}x{board.height} with {board.mines()} mines\n")
    print(board.render())

    for step, (action, x, y) in enumerate(moves, start=1):
        text = describe(board, action, x, y)
        print(f"\n=== Step {step}: {text} | Left: {board.mines_left()} ===")
        print(board.render(reveal_mines=board.is_lost))
        time.sleep(delay)
        if board.state != GameState.CONTINUE:
            break

    if board.is_won:
        print("\n*** WIN! ***")
    elif board.is_lost:
        print("\n*** LOST (hit mine) ***")
        print("\nFull board (state, mine, adjacent count):")
        print(board)
    return board


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.5, help="Delay between moves")
    parser.add_argument("--lose", action="store_true", help="Play the losing script")
    args = parser.parse_args()

    demo(delay=args.delay, lose=args.lose)
