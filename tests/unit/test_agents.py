"""
Unit tests for agents and the evaluator.
"""
import numpy as np
import pytest
from minefield.agents import RandomAgent
from minefield.game import BoardConfig
from minefield.training import Evaluator


class TestRandomAgent:
    """Test random action selection."""

    def test_selects_only_valid_actions(self) -> None:
        """Chosen action is always allowed by the mask."""
        agent = RandomAgent(seed=0)
        mask = np.zeros(12, dtype=bool)
        mask[[1, 4]] = True
        observation = np.full((2, 3), -1, dtype=np.int8)
        for _ in range(20):
            assert agent.select_action(observation, mask) in (1, 4)

    def test_mask_from_observation(self) -> None:
        """Without a mask, covered cells are chosen."""
        agent = RandomAgent(seed=0)
        observation = np.array([[0, -1], [-2, 1]], dtype=np.int8)
        assert agent.select_action(observation) == 1

    def test_no_valid_action(self) -> None:
        """An empty mask falls back to action 0."""
        agent = RandomAgent(seed=0)
        observation = np.zeros((2, 2), dtype=np.int8)
        assert agent.select_action(observation, np.zeros(8, dtype=bool)) == 0

    def test_mask_only_open_half_used(self) -> None:
        """Flag actions in the mask are ignored."""
        agent = RandomAgent(seed=0)
        observation = np.full((2, 2), -1, dtype=np.int8)
        mask = np.zeros(8, dtype=bool)
        mask[[2, 6, 7]] = True
        for _ in range(10):
            assert agent.select_action(observation, mask) == 2


class TestEvaluator:
    """Test evaluation loop."""

    def test_mine_free_board_always_won(self) -> None:
        """With no mines the first open wins every game."""
        evaluator = Evaluator(BoardConfig(4, 4, 0.0), num_episodes=5, seed=1)
        results = evaluator.evaluate(RandomAgent(seed=1))
        assert results["win_rate"] == 1.0
        assert results["avg_steps"] == 1.0
        assert results["avg_uncovered"] == 16.0
        assert results["avg_reward"] == 10.0

    def test_all_mine_board_always_lost(self) -> None:
        """With every cell mined the first open loses."""
        evaluator = Evaluator(BoardConfig(3, 3, 1.0), num_episodes=4)
        results = evaluator.evaluate(RandomAgent(seed=2))
        assert results["win_rate"] == 0.0
        assert results["avg_reward"] == -10.0

    def test_results_in_range(self) -> None:
        """Metrics stay within sensible bounds on random boards."""
        evaluator = Evaluator(BoardConfig(5, 5), num_episodes=10, seed=3)
        results = evaluator.evaluate(RandomAgent(seed=3))
        assert 0.0 <= results["win_rate"] <= 1.0
        assert 0.0 <= results["avg_uncovered"] <= 25.0

    def test_seeded_evaluations_match(self) -> None:
        """Seeded evaluator and agent repeat the same results."""
        config = BoardConfig(6, 6)
        first = Evaluator(config, num_episodes=5, seed=8).evaluate(RandomAgent(seed=8))
        second = Evaluator(config, num_episodes=5, seed=8).evaluate(RandomAgent(seed=8))
        assert first == second

    def test_compare(self) -> None:
        """Compare returns one result per agent."""
        evaluator = Evaluator(BoardConfig(3, 3), num_episodes=2, seed=0)
        results = evaluator.compare({"a": RandomAgent(), "b": RandomAgent()})
        assert set(results) == {"a", "b"}
