from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from tetris_rl.game import Action, GameConfig, TetrisGame


# Player actions exposed to agents; pause and restart stay with the host.
AGENT_ACTIONS = (Action.LEFT, Action.RIGHT, Action.ROTATE, Action.SOFT_DROP, Action.NONE)


class TetrisEnv(gym.Env):
    """Gymnasium wrapper around `TetrisGame`.

    Each env step issues one player command; gravity only advances on
    SOFT_DROP, so the agent owns the tick cadence. Reward is the number of
    rows cleared by the step.
    """

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 max_episode_steps: int = 5000) -> None:
        super().__init__()
        self.game = TetrisGame(config)
        self.render_mode = render_mode
        self.max_episode_steps = int(max_episode_steps)

        height = self.game.config.height
        width = self.game.config.width
        self.observation_space = spaces.Box(low=0, high=7, shape=(height, width), dtype=np.int8)
        self.action_space = spaces.Discrete(len(AGENT_ACTIONS))

        self._last_obs: Optional[np.ndarray] = None
        self._steps = 0

    def _get_obs(self) -> np.ndarray:
        return self.game.snapshot().board

    def _get_info(self) -> Dict[str, Any]:
        state = self.game.state
        return {
            "lines_cleared_total": state.lines_cleared_total,
            "pieces_locked": state.pieces_locked,
            "max_height": state.grid.get_max_height(),
            "holes": state.grid.count_holes(),
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        self.game.restart(seed)
        self._steps = 0
        obs = self._get_obs()
        self._last_obs = obs
        return obs, self._get_info()

    def step(self, action: int | np.integer):
        lines_before = self.game.state.lines_cleared_total
        self.game.step(AGENT_ACTIONS[int(action)])
        self._steps += 1

        reward = float(self.game.state.lines_cleared_total - lines_before)
        terminated = bool(self.game.game_over)
        truncated = self._steps >= self.max_episode_steps

        obs = self._get_obs()
        self._last_obs = obs
        return obs, reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            # Create a simple RGB image from the board
            board = self._last_obs if self._last_obs is not None else self._get_obs()
            cell = 12
            h, w = board.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    color = (70, 200, 120) if board[y, x] else (30, 30, 36)
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
            return img
        # human rendering delegated to external UI; noop
        return None

    def close(self) -> None:
        pass
