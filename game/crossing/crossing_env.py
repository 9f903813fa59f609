"""
CrossingEnv - the road-crossing game as a Gymnasium environment
---------------------------------------------------------------
- Drives a GameSession one frame per step with a fixed dt
- Arcade for rendering (window is only created in "human" mode)
- Discrete action space: 0 stay, 1 up, 2 down, 3 left, 4 right
- Vector observation: player state + top-K nearest enemies + current token
- Reward: points scored minus a penalty per life lost

Install:
    pip install gymnasium arcade numpy

Quick test:
    python -m game.crossing --no-render
"""

from __future__ import annotations

import random
from typing import Any, Dict, List, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import (
    BOARD_WIDTH,
    BOARD_HEIGHT,
    ENV_CONFIG,
    MAX_ENEMY_SPEED,
    TOKEN_KINDS,
)
from .events import PlaySound
from .session import GameSession
from .utils import clamp

ACTIONS = (None, "up", "down", "left", "right")

# Counters above this saturate in the observation
MAX_COUNTER = 10


class CrossingEnv(gym.Env):
    """Road-crossing game environment"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        dt: float = 1 / 60,
        max_steps: int = 3600,
        k_enemies: int = 5,
        r_score: float = 1.0,
        r_life: float = 5.0,
        game_config: Optional[Dict[str, Any]] = None,
        asset_root: str = ".",
        verbose: int = 0,
    ):
        super().__init__()

        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unknown render_mode: {render_mode}")
        assert dt > 0, "dt must be positive"
        self.render_mode = render_mode

        self.dt = dt
        self.max_steps = max_steps
        self.k_enemies = k_enemies
        self.r_score = r_score
        self.r_life = r_life
        self.game_config = game_config
        self.asset_root = asset_root
        self.verbose = verbose

        self.action_space = spaces.Discrete(len(ACTIONS))

        # Player: pos(2) lives(1) level(1)
        # Each enemy: rel pos(2) speed(1)
        # Token: rel pos(2) kind one-hot(7)
        obs_dim = 2 + 1 + 1 + (self.k_enemies * 3) + 2 + len(TOKEN_KINDS)
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None
        self.session: GameSession = None  # type: ignore
        self._step_count = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)

        # Unseeded resets continue the stream seeded by the last reset(seed)
        game_seed = int(self.np_random.integers(2**63))
        self._step_count = 0
        self.session = GameSession(
            rng=random.Random(game_seed), config=self.game_config, verbose=self.verbose
        )
        if self._window is not None:
            self._window.attach(self.session)

        return self._get_obs(), self._get_info()

    def step(self, action):
        state = self.session.state
        score_before, lives_before = state.score, state.lives

        self.session.handle_input(ACTIONS[int(action)])
        self.session.tick(self.dt)

        lives_lost = max(0, lives_before - state.lives)
        reward = (self.r_score * (state.score - score_before)
                  - self.r_life * lives_lost)

        terminated = state.game_over
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()
        info["sounds"] = [e.sound for e in self.session.events.drain()
                          if isinstance(e, PlaySound)]

        if self.render_mode == "human":
            self.render()

        return obs, float(reward), terminated, truncated, info

    # ----------------------------
    # Observation / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        player = self.session.player
        state = self.session.state

        obs_parts: List[float] = [
            clamp(player.x / BOARD_WIDTH * 2 - 1, -1, 1),
            clamp(player.y / BOARD_HEIGHT * 2 - 1, -1, 1),
            clamp(state.lives / MAX_COUNTER * 2 - 1, -1, 1),
            clamp(state.level / MAX_COUNTER * 2 - 1, -1, 1),
        ]

        enemies_sorted = sorted(
            self.session.enemies,
            key=lambda e: (e.x - player.x) ** 2 + (e.y - player.y) ** 2
        )
        for i in range(self.k_enemies):
            if i < len(enemies_sorted):
                e = enemies_sorted[i]
                obs_parts += [
                    clamp((e.x - player.x) / BOARD_WIDTH, -1, 1),
                    clamp((e.y - player.y) / BOARD_HEIGHT, -1, 1),
                    clamp(e.speed / MAX_ENEMY_SPEED, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0]

        kind_one_hot = [0.0] * len(TOKEN_KINDS)
        if self.session.tokens:
            t = self.session.tokens[-1]
            obs_parts += [
                clamp((t.x - player.x) / BOARD_WIDTH, -1, 1),
                clamp((t.y - player.y) / BOARD_HEIGHT, -1, 1),
            ]
            kind_one_hot[TOKEN_KINDS.index(t.kind)] = 1.0
        else:
            obs_parts += [0.0, 0.0]
        obs_parts += kind_one_hot

        return np.array(obs_parts, dtype=np.float32)

    def _get_info(self) -> Dict[str, Any]:
        info: Dict[str, Any] = dict(self.session.hud())
        info.update({
            "game_over": self.session.game_over,
            "num_enemies": len(self.session.enemies),
            "num_tokens": len(self.session.tokens),
            "step": self._step_count,
        })
        return info

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            from .window import CrossingWindow
            self._window = CrossingWindow(self.session, asset_root=self.asset_root)

        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, seed: Optional[int] = 42,
                       max_steps: int = 3600, verbose: int = 1,
                       asset_root: str = ".") -> Dict[str, Any]:
    """Run one episode with random actions and return the final info"""
    env_config = dict(ENV_CONFIG, max_steps=max_steps)
    env = CrossingEnv(render_mode="human" if render else None,
                      asset_root=asset_root, verbose=verbose, **env_config)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    if verbose > 0:
        print("Running episode... Close the window to exit early.")

    import time
    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward
        if render:
            time.sleep(env.dt)

    if verbose > 0:
        print(f"Random episode return: {total:.1f} "
              f"(score {info['score']}, lives {info['lives']}, level {info['level']}, "
              f"steps {info['step']})")

    env.close()
    return info
