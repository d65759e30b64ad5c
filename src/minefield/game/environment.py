"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface on top of the board engine.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig, GameState
from .cell import CellState
from .mines import RandomMinePlacer


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array of shape (height, width) where:
        - -1 = covered cell
        - -2 = flagged cell
        - 0-8 = uncovered cell with adjacent mine count

    Actions:
        Discrete action space of size 2 * width * height.
        Action i < width * height opens cell (i % width, i // width);
        the second half toggles a flag on cell i - width * height.

    Rewards:
        - +1 for opening a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for toggling a flag
        - -0.1 for an action with no effect
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 10x10).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        if self.config.width == 0 or self.config.height == 0:
            raise ValueError("Environment needs a board with at least one cell")
        self.render_mode = render_mode
        self._num_cells = self.config.width * self.config.height

        self.observation_space = spaces.Box(
            low=-2,
            high=8,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )

        # Open actions followed by flag actions
        self.action_space = spaces.Discrete(2 * self._num_cells)

        self._steps = 0
        self.board = self._new_board()

    def _new_board(self) -> Board:
        placer = RandomMinePlacer(
            self.config.mine_probability, rng=self.np_random
        )
        return Board(self.config, placer=placer)

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game on a freshly mined board.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.board = self._new_board()
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Open or flag action index.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        if not self.action_space.contains(int(action)):
            raise ValueError(f"Invalid action: {action}")

        is_flag, x, y = self._decode_action(int(action))
        self._steps += 1

        if is_flag:
            reward = self._flag_reward(x, y)
        else:
            reward = self._open_reward(x, y)

        observation = self.board.get_observation()
        terminated = not self.board.is_playing
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Convert flat action index to (is_flag, x, y)."""
        is_flag = action >= self._num_cells
        index = action - self._num_cells if is_flag else action
        return is_flag, index % self.config.width, index // self.config.width

    def _open_reward(self, x: int, y: int) -> float:
        """Open a cell and score the outcome."""
        # Finished games and uncovered cells leave the board unchanged
        if not self.board.is_playing:
            return -0.1
        if self.board.cell_state(x, y) == CellState.UNCOVERED:
            return -0.1

        self.board.open(x, y)

        if self.board.state == GameState.WON:
            return 10.0
        if self.board.state == GameState.LOST:
            return -10.0
        return 1.0

    def _flag_reward(self, x: int, y: int) -> float:
        """Toggle a flag; uncovered cells cannot be flagged."""
        if self.board.flag(x, y) is None:
            return -0.1
        return 0.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "uncovered": self.board.uncovered(),
            "game_state": self.board.state.name,
            "mines_left": self.board.mines_left(),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        """Render board as ASCII string, showing mines once lost."""
        return self.board.render(reveal_mines=self.board.is_lost)

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of useful open actions.

        Returns:
            Boolean array over the whole action space where True marks
            opening a covered cell. Flag actions are left False.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for x, y in self.board.get_valid_actions():
            mask[y * self.config.width + x] = True
        return mask


# ============================================================================
# Vectorized Environment Factory
# ============================================================================

def make_vec_env(
    n_envs: int = 4,
    config: Optional[BoardConfig] = None,
    asynchronous: bool = True,
) -> gym.vector.VectorEnv:
    """
    Create vectorized environment for running several games at once.

    Args:
        n_envs: Number of parallel environments.
        config: Board configuration.
        asynchronous: Run each environment in its own process.

    Returns:
        Vectorized environment.
    """
    def make_env() -> MinesweeperEnv:
        return MinesweeperEnv(config=config)

    env_fns = [make_env for _ in range(n_envs)]
    if asynchronous:
        return gym.vector.AsyncVectorEnv(env_fns)
    return gym.vector.SyncVectorEnv(env_fns)
