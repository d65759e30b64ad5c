#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py play [--difficulty {easy,medium,hard}] [--seed S]
    python main.py play --width W --height H
    python main.py simulate [--games N] [--difficulty ...]
"""
import argparse
import logging
from typing import Callable, List, Optional, Tuple

from minefield.game import Board, BoardConfig, DIFFICULTIES, RandomMinePlacer
from minefield.agents import RandomAgent
from minefield.training import Evaluator


HELP_TEXT = "Commands: o X Y (open), f X Y (flag), r (restart), q (quit)"

COMMANDS = {
    "o": "open",
    "open": "open",
    "f": "flag",
    "flag": "flag",
    "r": "restart",
    "restart": "restart",
    "q": "quit",
    "quit": "quit",
}


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Board configuration from --width/--height or a difficulty preset."""
    if args.width is not None or args.height is not None:
        preset = DIFFICULTIES[args.difficulty]
        return BoardConfig(
            width=args.width if args.width is not None else preset.width,
            height=args.height if args.height is not None else preset.height,
        )
    return DIFFICULTIES[args.difficulty]


def parse_command(line: str) -> Tuple[str, Optional[Tuple[int, int]]]:
    """
    Parse one line of player input.

    Args:
        line: Raw input such as "o 3 4" or "q".

    Returns:
        Tuple of (command name, (x, y) or None).

    Raises:
        ValueError: If the command is unknown or coordinates are malformed.
    """
    parts = line.split()
    if not parts:
        raise ValueError("Empty command")

    command = COMMANDS.get(parts[0].lower())
    if command is None:
        raise ValueError(f"Unknown command: {parts[0]}")

    if command in ("restart", "quit"):
        if len(parts) != 1:
            raise ValueError(f"'{parts[0]}' takes no arguments")
        return command, None

    if len(parts) != 3:
        raise ValueError(f"'{parts[0]}' needs X and Y")
    try:
        x, y = int(parts[1]), int(parts[2])
    except ValueError:
        raise ValueError(f"Coordinates must be integers: {parts[1]} {parts[2]}") from None
    return command, (x, y)


def show(board: Board) -> None:
    """Print the board and the remaining mine counter."""
    print(board.render(reveal_mines=board.is_lost))
    print(f"Left: {board.mines_left()}")
    if board.is_won:
        print("Game over. You won!")
    elif board.is_lost:
        print("Game over. You lost!")


def play(
    args: argparse.Namespace, input_fn: Callable[[str], str] = input
) -> Board:
    """Interactive game in the terminal. Returns the last board played."""
    config = build_config(args)
    placer = RandomMinePlacer(config.mine_probability, seed=args.seed)
    board = Board(config, placer=placer)

    print(f"Board: {config.width}x{config.height}")
    print(HELP_TEXT)
    show(board)

    while True:
        try:
            line = input_fn("> ")
        except EOFError:
            break

        try:
            command, position = parse_command(line)
        except ValueError as exc:
            print(f"Error: {exc}")
            print(HELP_TEXT)
            continue

        if command == "quit":
            break
        if command == "restart":
            board = Board(config, placer=placer)
            show(board)
            continue
        if not board.is_playing:
            print("Game over. Type 'r' to restart or 'q' to quit.")
            continue

        x, y = position
        if board.cell_state(x, y) is None:
            print(f"No cell at ({x}, {y})")
            continue

        if command == "open":
            board.open(x, y)
        elif board.flag(x, y) is None:
            print(f"Cannot flag uncovered cell ({x}, {y})")
            continue

        show(board)

    return board


def simulate(args: argparse.Namespace) -> None:
    """Evaluate a random player and print results."""
    config = build_config(args)
    agent = RandomAgent(seed=args.seed)
    evaluator = Evaluator(config, num_episodes=args.games, seed=args.seed)

    print(f"\nSimulating {args.games} random games on {config.width}x{config.height}...")
    results = evaluator.evaluate(agent)

    print("Results for Random:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg uncovered: {results['avg_uncovered']:.1f} cells")


def build_parser() -> argparse.ArgumentParser:
    """Command line parser with play and simulate commands."""
    parser = argparse.ArgumentParser(
        description="Minefield - Minesweeper in the terminal"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log engine activity"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    board_options = argparse.ArgumentParser(add_help=False)
    board_options.add_argument(
        "--difficulty",
        choices=sorted(DIFFICULTIES),
        default="easy",
        help="Board size preset",
    )
    board_options.add_argument("--width", type=int, default=None, help="Columns")
    board_options.add_argument("--height", type=int, default=None, help="Rows")
    board_options.add_argument(
        "--seed", type=int, default=None, help="Random seed for mine placement"
    )

    subparsers.add_parser(
        "play", parents=[board_options], help="Play interactively"
    )

    simulate_parser = subparsers.add_parser(
        "simulate", parents=[board_options], help="Evaluate a random player"
    )
    simulate_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        if args.command == "play":
            play(args)
        elif args.command == "simulate":
            simulate(args)
        else:
            parser.print_help()
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
