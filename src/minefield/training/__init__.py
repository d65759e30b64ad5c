"""
Evaluation module for Minesweeper agents.
"""
from .evaluator import Evaluator, EpisodeStats

__all__ = [
    "Evaluator",
    "EpisodeStats",
]
