import csv

import pytest

from game.breakout import BreakoutEnv
from rl.evaluate import evaluate_policy, main
from rl.policies import LEFT, RIGHT, STAY, POLICIES, tracking_policy


def test_tracking_policy_follows_ball():
    env = BreakoutEnv()
    env.reset(seed=0)
    ball = env.game.balls[0]
    # paddle starts right under the ball
    assert tracking_policy(env) == STAY

    env.game.move_right(10)
    assert env.game.paddle.center.x > ball.center.x
    assert tracking_policy(env) == LEFT

    env.game.move_left(20)
    assert tracking_policy(env) == RIGHT


def test_policies_return_valid_actions():
    env = BreakoutEnv()
    env.reset(seed=0)
    for policy in POLICIES.values():
        assert env.action_space.contains(policy(env))


def test_evaluate_policy_writes_csv(tmp_path):
    out = tmp_path / "metrics" / "eval.csv"
    results = evaluate_policy(
        policy="tracking",
        n_episodes=2,
        seed=0,
        csv_path=str(out),
        env_config={"max_steps": 40},
        verbose=False,
    )
    assert len(results["episode_rewards"]) == 2
    assert all(length <= 40 for length in results["episode_lengths"])

    with open(out, newline="") as f:
        rows = list(csv.DictReader(f))
    assert [row["episode"] for row in rows] == ["1", "2"]


def test_evaluate_rejects_unknown_names():
    with pytest.raises(ValueError):
        evaluate_policy(policy="nope", n_episodes=1)
    with pytest.raises(ValueError):
        evaluate_policy(reward_config="nope", n_episodes=1)


def test_main_cli(capsys):
    results = main(["--policy", "random", "--n-episodes", "1", "--max-steps", "20"])
    assert len(results["episode_rewards"]) == 1
    assert "Evaluation Results" in capsys.readouterr().out
