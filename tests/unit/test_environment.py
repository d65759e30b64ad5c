"""
Unit tests for the Gymnasium environment.
"""
import numpy as np
import pytest
from minefield.game import Board, BoardConfig, MinesweeperEnv, make_vec_env


def scripted_env() -> MinesweeperEnv:
    """4x3 environment with a single mine at (3, 0)."""
    env = MinesweeperEnv(config=BoardConfig(4, 3), render_mode="ansi")
    env.reset(seed=0)
    env.board = Board.from_mines(4, 3, [(3, 0)])
    return env


class TestSpaces:
    """Test observation and action spaces."""

    def test_action_space_has_open_and_flag(self, env: MinesweeperEnv) -> None:
        """Two actions per cell."""
        assert env.action_space.n == 24

    def test_observation_in_space(self, env: MinesweeperEnv) -> None:
        """Reset observation belongs to the observation space."""
        obs, info = env.reset(seed=3)
        assert env.observation_space.contains(obs)
        assert obs.shape == (3, 4)
        assert info["game_state"] == "CONTINUE"
        assert info["steps"] == 0

    def test_zero_sized_board_rejected(self) -> None:
        """Empty boards cannot back an environment."""
        with pytest.raises(ValueError, match="at least one cell"):
            MinesweeperEnv(config=BoardConfig(0, 5))


class TestReset:
    """Test reset behavior."""

    def test_same_seed_same_board(self) -> None:
        """Seeded resets are reproducible."""
        first = MinesweeperEnv(config=BoardConfig(8, 8))
        second = MinesweeperEnv(config=BoardConfig(8, 8))
        first.reset(seed=123)
        second.reset(seed=123)
        assert str(first.board) == str(second.board)

    def test_reset_builds_new_board(self, env: MinesweeperEnv) -> None:
        """Each reset starts a fresh game."""
        old_board = env.board
        env.reset()
        assert env.board is not old_board
        assert env.board.uncovered() == 0


class TestStep:
    """Test step rewards and termination."""

    def test_safe_open_reward(self) -> None:
        """Opening a numbered safe cell gives +1."""
        env = scripted_env()
        obs, reward, terminated, truncated, info = env.step(2)  # (2, 0)
        assert reward == 1.0
        assert terminated is False
        assert truncated is False
        assert obs[0, 2] == 1

    def test_winning_open_reward(self) -> None:
        """Opening the zero region wins the scripted board."""
        env = scripted_env()
        obs, reward, terminated, _, info = env.step(0)  # (0, 0)
        assert reward == 10.0
        assert terminated is True
        assert info["game_state"] == "WON"
        assert info["uncovered"] == 11

    def test_mine_reward(self) -> None:
        """Opening the mine gives -10 and ends the episode."""
        env = scripted_env()
        _, reward, terminated, _, info = env.step(3)  # (3, 0)
        assert reward == -10.0
        assert terminated is True
        assert info["game_state"] == "LOST"

    def test_reopen_penalty(self) -> None:
        """Opening an uncovered cell has no effect and costs -0.1."""
        env = scripted_env()
        env.step(2)
        _, reward, _, _, _ = env.step(2)
        assert reward == pytest.approx(-0.1)

    def test_flag_action(self) -> None:
        """Flag actions toggle flags with no reward."""
        env = scripted_env()
        obs, reward, _, _, info = env.step(12 + 3)  # flag (3, 0)
        assert reward == 0.0
        assert obs[0, 3] == -2
        assert info["mines_left"] == 0

    def test_flag_uncovered_penalty(self) -> None:
        """Flagging an uncovered cell costs -0.1."""
        env = scripted_env()
        env.step(2)
        _, reward, _, _, _ = env.step(12 + 2)
        assert reward == pytest.approx(-0.1)

    def test_invalid_action_raises(self, env: MinesweeperEnv) -> None:
        """Actions outside the space are rejected."""
        with pytest.raises(ValueError, match="Invalid action"):
            env.step(24)


class TestRenderAndMask:
    """Test rendering and action mask."""

    def test_ansi_render(self) -> None:
        """ANSI render returns the player view."""
        env = scripted_env()
        env.step(2)
        rendered = env.render()
        assert rendered.splitlines()[1].split() == ["0", ".", ".", "1", "."]

    def test_render_shows_mines_after_loss(self) -> None:
        """Mines appear once the game is lost."""
        env = scripted_env()
        env.step(3)
        assert "*" in env.render()

    def test_action_mask(self) -> None:
        """Only open actions on covered cells are valid."""
        env = scripted_env()
        env.step(2)
        mask = env.get_action_mask()
        assert mask.shape == (24,)
        assert not mask[2]
        assert mask[0]
        assert not np.any(mask[12:])


class TestVectorEnv:
    """Test vectorized factory."""

    def test_sync_vector_env(self) -> None:
        """Synchronous vector env batches observations."""
        vec_env = make_vec_env(n_envs=2, config=BoardConfig(3, 3), asynchronous=False)
        obs, _ = vec_env.reset(seed=1)
        assert obs.shape == (2, 3, 3)
        vec_env.close()
