"""
Random player for the Minesweeper environment.
"""
from typing import Optional, Protocol

import numpy as np


class Agent(Protocol):
    """Anything the evaluator can play games with."""

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        ...

    def reset(self) -> None:
        ...


class RandomAgent:
    """
    Opens a covered cell picked uniformly at random.

    Only open actions are produced, so the agent never flags. Board size
    is read from the observation, one agent fits any board.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Pick an open action.

        Args:
            observation: Board observation of shape (height, width).
            valid_actions: Optional environment mask; only its open half
                (the first width * height entries) is consulted.

        Returns:
            Index y * width + x of a covered cell, or 0 when none is left.
        """
        num_cells = observation.size
        if valid_actions is None:
            candidates = np.flatnonzero(observation.ravel() == -1)
        else:
            candidates = np.flatnonzero(valid_actions[:num_cells])

        if candidates.size == 0:
            return 0
        return int(self.rng.choice(candidates))

    def reset(self) -> None:
        """Nothing carries over between games."""
