import gymnasium as gym
import numpy as np

import tetris_rl.env  # noqa: F401
from tetris_rl.env.tetris_env import AGENT_ACTIONS, TetrisEnv
from tetris_rl.game import Action, GameStatus
from tetris_rl.rl.random_agent import run_random


def test_spaces_match_board():
    env = TetrisEnv()
    assert env.observation_space.shape == (20, 10)
    assert env.action_space.n == 5
    assert Action.PAUSE not in AGENT_ACTIONS


def test_reset_is_seeded():
    a, _ = TetrisEnv().reset(seed=7)
    b, _ = TetrisEnv().reset(seed=7)
    assert np.array_equal(a, b)


def test_step_contract():
    env = TetrisEnv()
    obs, info = env.reset(seed=0)
    assert obs.dtype == np.int8
    assert env.observation_space.contains(obs)
    assert info["lines_cleared_total"] == 0

    obs, reward, terminated, truncated, info = env.step(AGENT_ACTIONS.index(Action.SOFT_DROP))
    assert env.observation_space.contains(obs)
    assert reward == 0.0
    assert not terminated
    assert not truncated
    assert env.game.state.y == 1
    assert info["steps"] == 1


def test_episode_truncates():
    env = TetrisEnv(max_episode_steps=3)
    env.reset(seed=1)
    none = AGENT_ACTIONS.index(Action.NONE)
    results = [env.step(none) for _ in range(3)]
    assert [r[3] for r in results] == [False, False, True]


def test_episode_terminates_on_game_over():
    env = TetrisEnv()
    env.reset(seed=2)
    drop = AGENT_ACTIONS.index(Action.SOFT_DROP)
    terminated = False
    for _ in range(5000):
        _, _, terminated, _, _ = env.step(drop)
        if terminated:
            break
    assert terminated
    assert env.game.status == GameStatus.GAME_OVER


def test_rgb_render():
    env = TetrisEnv(render_mode="rgb_array")
    env.reset(seed=0)
    img = env.render()
    assert img.shape == (20 * 12, 10 * 12, 3)


def test_registered_env_runs():
    env = gym.make("Tetris-10x20-v0")
    obs, info = env.reset(seed=3)
    obs, reward, terminated, truncated, info = env.step(0)
    assert obs.shape == (20, 10)
    env.close()


def test_random_agent_runs(capsys):
    total = run_random(steps=200, seed=0)
    assert total >= 0.0
    assert "Random agent total reward" in capsys.readouterr().out
