from __future__ import annotations

import sys
import types

import numpy as np
import pytest

from game.crossing.crossing_env import CrossingEnv, run_random_episode
from game.crossing.entities import Enemy


@pytest.fixture()
def env():
    e = CrossingEnv(max_steps=50)
    yield e
    e.close()


def test_reset_returns_valid_observation(env: CrossingEnv) -> None:
    obs, info = env.reset(seed=0)
    assert obs.dtype == np.float32
    assert obs.shape == env.observation_space.shape
    assert env.observation_space.contains(obs)
    assert info["score"] == 0
    assert info["lives"] == 3
    assert info["level"] == 1
    assert info["num_enemies"] == 3
    assert info["num_tokens"] == 1


def test_step_api(env: CrossingEnv) -> None:
    env.reset(seed=0)
    obs, reward, terminated, truncated, info = env.step(0)
    assert env.observation_space.contains(obs)
    assert reward == 0.0
    assert not terminated
    assert not truncated
    assert info["step"] == 1


def test_up_action_moves_player(env: CrossingEnv) -> None:
    env.reset(seed=0)
    env.step(1)
    assert env.session.player.y == 320


def test_goal_crossing_is_rewarded(env: CrossingEnv) -> None:
    env.reset(seed=0)
    env.session.player.y = 15
    _, reward, _, _, info = env.step(0)
    assert reward == 1.0
    assert info["score"] == 1
    assert info["sounds"] == ["cheer"]


def test_bite_is_penalised_and_last_life_terminates(env: CrossingEnv) -> None:
    env.reset(seed=0)
    env.session.state.lives = 1
    env.session.enemies.append(Enemy(200, 400, 0))
    _, reward, terminated, _, info = env.step(0)
    assert reward == -5.0
    assert terminated
    assert info["game_over"]
    assert "bite" in info["sounds"]


def test_episode_truncates_at_step_budget(env: CrossingEnv) -> None:
    env.reset(seed=0)
    truncated = False
    steps = 0
    while not truncated:
        _, _, _, truncated, _ = env.step(0)
        steps += 1
    assert steps == 50


def test_same_seed_same_observations() -> None:
    a, b = CrossingEnv(), CrossingEnv()
    oa, _ = a.reset(seed=3)
    ob, _ = b.reset(seed=3)
    for _ in range(30):
        oa, *_ = a.step(0)
        ob, *_ = b.step(0)
    np.testing.assert_array_equal(oa, ob)


def test_unknown_render_mode_rejected() -> None:
    with pytest.raises(ValueError):
        CrossingEnv(render_mode="rgb_array")


def test_run_random_episode_headless(capsys) -> None:
    info = run_random_episode(render=False, seed=1, max_steps=200, verbose=1)
    assert info["step"] <= 200
    assert "Random episode return" in capsys.readouterr().out


def test_unseeded_reset_continues_seeded_stream() -> None:
    a, b = CrossingEnv(), CrossingEnv()
    a.reset(seed=3)
    b.reset(seed=3)
    oa, _ = a.reset()
    ob, _ = b.reset()
    np.testing.assert_array_equal(oa, ob)
    for _ in range(60):
        oa, *_ = a.step(0)
        ob, *_ = b.step(0)
    np.testing.assert_array_equal(oa, ob)


def test_different_seeds_give_different_games() -> None:
    a, b = CrossingEnv(), CrossingEnv()
    a.reset(seed=3)
    b.reset(seed=4)
    for _ in range(60):
        oa, *_ = a.step(0)
        ob, *_ = b.step(0)
    assert not np.array_equal(oa, ob)


class _RecordingWindow:
    created: list = []

    def __init__(self, session, asset_root: str = ".", interactive: bool = False):
        self.session = session
        self.asset_root = asset_root
        _RecordingWindow.created.append(self)

    def attach(self, session) -> None:
        self.session = session

    def dispatch_events(self) -> None:
        pass

    def on_draw(self) -> None:
        pass

    def flip(self) -> None:
        pass

    def close(self) -> None:
        pass


def test_human_render_opens_window_with_asset_root(monkeypatch) -> None:
    fake_window_module = types.ModuleType("game.crossing.window")
    fake_window_module.CrossingWindow = _RecordingWindow
    monkeypatch.setitem(sys.modules, "game.crossing.window", fake_window_module)
    _RecordingWindow.created.clear()

    env = CrossingEnv(render_mode="human", asset_root="/tmp/crossing-assets")
    env.reset(seed=0)
    env.step(0)
    env.step(0)
    env.close()

    assert len(_RecordingWindow.created) == 1
    assert _RecordingWindow.created[0].asset_root == "/tmp/crossing-assets"


def test_run_random_episode_forwards_asset_root(monkeypatch) -> None:
    seen = {}
    original_init = CrossingEnv.__init__

    def _init(self, *args, **kwargs):
        seen["asset_root"] = kwargs.get("asset_root")
        original_init(self, *args, **kwargs)

    monkeypatch.setattr(CrossingEnv, "__init__", _init)
    run_random_episode(render=False, seed=0, max_steps=5, verbose=0, asset_root="media")
    assert seen["asset_root"] == "media"
