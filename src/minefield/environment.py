"""
Gymnasium environment wrapper for the Minesweeper board.

Lets an agent click on a board: one action per square to reveal it and one
per square to toggle its flag.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig
from .render import TextRenderer


BOMB_PENALTY = -10.0
NO_OP_PENALTY = -0.1
SAFE_SQUARE_REWARD = 1.0


# ============================================================================
# Minefield Environment
# ============================================================================

class MinefieldEnv(gym.Env):
    """
    Gymnasium environment for a Minesweeper board.

    Observation:
        2D array where:
        - -1 = hidden square
        - -2 = flagged square
        - 0-8 = uncovered square with adjacent bomb count
        - 9 = uncovered bomb

    Actions:
        Discrete action space of size 2 * width * height.
        Action i < width * height reveals square (i % width, i // width);
        the rest toggle the flag on square i - width * height.

    Rewards:
        - +1 per square uncovered by a reveal
        - -10 for uncovering a bomb
        - -0.1 for an action that changed nothing
        - 0 for toggling a flag

    The episode terminates once a bomb is uncovered and is truncated after
    ``max_steps`` actions.
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
        max_steps: int = 200,
    ) -> None:
        """
        Initialize the environment.

        Args:
            config: Board configuration (default: 9x9 with 10 bombs).
            render_mode: How to render the environment.
            max_steps: Actions allowed before the episode is truncated.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self.max_steps = max_steps
        self.board = Board(self.config)
        self._renderer = TextRenderer()

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(2 * self.config.total_squares)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment with a freshly placed board.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.board = Board(self.config, rng=self.np_random)
        self._steps = 0
        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Reveal or flag action index.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        if not self.action_space.contains(action):
            raise ValueError(f"Invalid action {action!r}")

        self._steps += 1
        reward = self._apply(int(action))

        terminated = self.board.has_uncovered_bomb
        truncated = not terminated and self._steps >= self.max_steps

        return (
            self.board.get_observation(),
            reward,
            terminated,
            truncated,
            self._get_info(),
        )

    def action_to_position(self, action: int) -> Tuple[bool, int, int]:
        """
        Decode an action index.

        Returns:
            Tuple of (is_flag, x, y).
        """
        total = self.config.total_squares
        is_flag = action >= total
        index = action - total if is_flag else action
        return is_flag, index % self.config.width, index // self.config.width

    def _apply(self, action: int) -> float:
        """Perform the action on the board and score it."""
        is_flag, x, y = self.action_to_position(action)
        before = self.board.square(x, y)

        if is_flag:
            self.board.toggle_flag(x, y)
            return 0.0 if self.board.square(x, y) != before else NO_OP_PENALTY

        uncovered_before = self.board.uncovered_count
        self.board.reveal(x, y)
        after = self.board.square(x, y)
        if before.is_hidden and after.has_bomb and after.is_uncovered:
            return BOMB_PENALTY

        newly_uncovered = self.board.uncovered_count - uncovered_before
        if newly_uncovered == 0:
            return NO_OP_PENALTY
        return SAFE_SQUARE_REWARD * newly_uncovered

    def _get_info(self) -> Dict[str, Any]:
        return {
            "steps": self._steps,
            "uncovered": self.board.uncovered_count,
            "flags": self.board.flag_count,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self._renderer.render(self.board)
        if self.render_mode == "human":
            print(self._renderer.render(self.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that would change the board.

        Returns:
            Boolean array where True = valid action.
        """
        total = self.config.total_squares
        mask = np.zeros(self.action_space.n, dtype=bool)
        for x, y, square in self.board.squares():
            index = y * self.config.width + x
            mask[index] = square.is_hidden
            mask[total + index] = square.is_hidden or square.is_flagged
        return mask
