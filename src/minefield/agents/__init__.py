"""
Players for the Minesweeper environment.
"""
from .random_agent import Agent, RandomAgent

__all__ = [
    "Agent",
    "RandomAgent",
]
