"""
BreakoutEnv - Gymnasium wrapper around the breakout rules engine
----------------------------------------------------------------
- Gymnasium API over a BreakoutState
- 1 RL agent steering the paddle left / right / not at all
- Blocks give reward when destroyed, lost balls cost reward
- Vector observation: paddle state + block count + the K lowest balls
- Discrete action space: 0 left, 1 stay, 2 right

No rendering: drawing and windowing live outside this package.

Install:
    pip install gymnasium numpy

Quick test:
    python -m game.breakout.breakout_env
"""

from __future__ import annotations

import random
from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import RulesConfig, DEFAULT_RULES
from .entities import ReplicatorPaddle, SuperBall
from .levels import make_level
from .state import BreakoutState, TickEvents
from .utils import clamp, seed_everything

# action index -> paddle direction
ACTION_TO_DIR = (-1, 0, 1)


class BreakoutEnv(gym.Env):
    """Single-paddle breakout environment"""

    metadata = {"render_modes": []}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        width: int = 1000,
        height: int = 1000,
        dt: int = 1,
        max_steps: int = 5000,
        rows: int = 5,
        cols: int = 10,
        k_balls: int = 4,
        ball_diameter: int = 10,
        ball_speed: int = 10,
        sturdy_ratio: float = 0.2,
        powerup_ratio: float = 0.05,
        replicator_ratio: float = 0.05,
        rules: Optional[RulesConfig] = None,
        reward_config: Optional[Dict[str, float]] = None,
    ):
        super().__init__()

        assert render_mode is None, "BreakoutEnv does not render; draw from env.game instead."
        assert dt > 0, "dt must be a positive number of time units."
        self.render_mode = render_mode

        # Field
        self.width = width
        self.height = height
        self.dt = dt
        self.max_steps = max_steps

        # Level layout
        self.rows = rows
        self.cols = cols
        self.ball_diameter = ball_diameter
        self.ball_speed = ball_speed
        self.sturdy_ratio = sturdy_ratio
        self.powerup_ratio = powerup_ratio
        self.replicator_ratio = replicator_ratio
        self.rules = rules if rules is not None else DEFAULT_RULES

        # Observation config
        self.k_balls = k_balls

        self.reward_config = {
            "R_BLOCK": 1.0,
            "R_BALL_LOST": 1.0,
            "R_WIN": 10.0,
            "R_DEATH": 5.0,
            "R_TIME": 0.0,
        }
        if reward_config:
            self.reward_config.update({k: v for k, v in reward_config.items() if k.startswith("R_")})

        self.action_space = spaces.Discrete(len(ACTION_TO_DIR))

        # Paddle: x(1) replicator lifetime(1); blocks left(1)
        # Each ball: pos(2) vel(2) super(1)
        obs_dim = 3 + self.k_balls * 5
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        # World state
        self.game: BreakoutState = None  # type: ignore
        self._initial_blocks = 0
        self._step_count = 0
        self._events = TickEvents()

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)

        self._step_count = 0
        self._events = TickEvents()

        self.game = make_level(
            width=self.width,
            height=self.height,
            rows=self.rows,
            cols=self.cols,
            ball_diameter=self.ball_diameter,
            ball_speed=self.ball_speed,
            sturdy_ratio=self.sturdy_ratio,
            powerup_ratio=self.powerup_ratio,
            replicator_ratio=self.replicator_ratio,
            rng=random,
            config=self.rules,
        )
        self._initial_blocks = len(self.game.blocks)

        return self._get_obs(), self._get_info()

    def step(self, action):
        assert self.game is not None, "Call reset() before step()."
        assert self.action_space.contains(int(action)), f"Invalid action: {action}"

        paddle_dir = ACTION_TO_DIR[int(action)]
        if paddle_dir < 0:
            self.game.move_left(self.dt)
        elif paddle_dir > 0:
            self.game.move_right(self.dt)

        self._events = self.game.tick(self.dt, paddle_dir)

        reward = self._compute_reward()

        terminated = self.game.is_won() or self.game.is_dead()
        self._step_count += 1
        truncated = not terminated and self._step_count >= self.max_steps

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self):
        return None

    def close(self):
        pass

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        paddle = self.game.paddle
        px = paddle.center.x / self.width
        lifetime = 0.0
        if isinstance(paddle, ReplicatorPaddle):
            lifetime = paddle.lifetime / self.rules.max_replicator_lifetime
        blocks_left = len(self.game.blocks) / max(1, self._initial_blocks)

        obs_parts = [px * 2 - 1, lifetime * 2 - 1, blocks_left * 2 - 1]

        # Lowest balls first: those are the ones the paddle has to reach
        balls_sorted = sorted(self.game.balls, key=lambda b: -b.center.y)
        max_speed = max(1, self.ball_speed * 2)
        for i in range(self.k_balls):
            if i < len(balls_sorted):
                b = balls_sorted[i]
                obs_parts += [
                    clamp(b.center.x / self.width * 2 - 1, -1, 1),
                    clamp(b.center.y / self.height * 2 - 1, -1, 1),
                    clamp(b.velocity.x / max_speed, -1, 1),
                    clamp(b.velocity.y / max_speed, -1, 1),
                    1.0 if isinstance(b, SuperBall) else -1.0,
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self) -> float:
        rc = self.reward_config
        reward = 0.0

        reward += rc["R_BLOCK"] * self._events.blocks_destroyed
        reward -= rc["R_BALL_LOST"] * self._events.balls_lost
        reward -= rc["R_TIME"]

        if self.game.is_won():
            reward += rc["R_WIN"]
        elif self.game.is_dead():
            reward -= rc["R_DEATH"]

        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "num_balls": len(self.game.balls),
            "num_blocks": len(self.game.blocks),
            "blocks_destroyed": self._events.blocks_destroyed,
            "balls_lost": self._events.balls_lost,
            "balls_spawned": self._events.balls_spawned,
            "won": self.game.is_won(),
            "dead": self.game.is_dead(),
            "step": self._step_count,
        }


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(seed: Optional[int] = 42, **env_kwargs) -> float:
    """Run a random episode and print its return"""
    env = BreakoutEnv(**env_kwargs)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    print(f"Random episode return: {total:.2f} "
          f"(steps={info['step']}, blocks left={info['num_blocks']}, "
          f"won={info['won']})")

    env.close()
    return total


if __name__ == "__main__":
    run_random_episode()
