"""
Agent evaluation for Minesweeper.

Plays full games through the Gymnasium environment and aggregates
results.
"""
from dataclasses import dataclass
from typing import Dict, Optional

from ..game.board import BoardConfig
from ..game.environment import MinesweeperEnv
from ..agents.random_agent import Agent


# ============================================================================
# Episode Statistics
# ============================================================================

@dataclass
class EpisodeStats:
    """Statistics for a single episode."""

    total_reward: float = 0.0
    steps: int = 0
    won: bool = False
    uncovered_cells: int = 0


# ============================================================================
# Evaluator
# ============================================================================

class Evaluator:
    """
    Evaluate and compare agents.

    Every episode starts from a fresh board; seeding the evaluator makes
    the sequence of boards reproducible.
    """

    def __init__(
        self,
        board_config: Optional[BoardConfig] = None,
        num_episodes: int = 100,
        max_steps: int = 1000,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            board_config: Board configuration for evaluation.
            num_episodes: Number of evaluation episodes.
            max_steps: Maximum steps per episode.
            seed: Seed for the first board.
        """
        self.board_config = board_config or BoardConfig()
        self.num_episodes = num_episodes
        self.max_steps = max_steps
        self.seed = seed

    def run_episode(
        self, env: MinesweeperEnv, agent: Agent, seed: Optional[int] = None
    ) -> EpisodeStats:
        """Play one game and collect its statistics."""
        stats = EpisodeStats()
        observation, info = env.reset(seed=seed)
        agent.reset()

        for _ in range(self.max_steps):
            if info["game_state"] != "CONTINUE":
                break
            valid_actions = env.get_action_mask()
            action = agent.select_action(observation, valid_actions)
            observation, reward, terminated, truncated, info = env.step(action)

            stats.total_reward += reward
            stats.steps += 1

            if terminated or truncated:
                break

        stats.won = info["game_state"] == "WON"
        stats.uncovered_cells = info["uncovered"]
        return stats

    def evaluate(self, agent: Agent) -> Dict[str, float]:
        """
        Evaluate a single agent.

        Args:
            agent: Agent to evaluate.

        Returns:
            Dictionary with evaluation metrics.
        """
        env = MinesweeperEnv(config=self.board_config)

        wins = 0
        total_reward = 0.0
        total_steps = 0
        total_uncovered = 0

        for episode in range(self.num_episodes):
            # Only the first reset is seeded; later boards follow from it
            seed = self.seed if episode == 0 else None
            stats = self.run_episode(env, agent, seed=seed)

            wins += int(stats.won)
            total_reward += stats.total_reward
            total_steps += stats.steps
            total_uncovered += stats.uncovered_cells

        episodes = max(self.num_episodes, 1)
        return {
            "win_rate": wins / episodes,
            "avg_reward": total_reward / episodes,
            "avg_steps": total_steps / episodes,
            "avg_uncovered": total_uncovered / episodes,
        }

    def compare(self, agents: Dict[str, Agent]) -> Dict[str, Dict[str, float]]:
        """
        Compare multiple agents.

        Args:
            agents: Dictionary mapping names to agents.

        Returns:
            Dictionary mapping names to evaluation results.
        """
        results = {}
        for name, agent in agents.items():
            results[name] = self.evaluate(agent)
        return results
