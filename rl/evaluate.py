"""
Evaluation script for scripted breakout policies
"""

import argparse
import csv
import os
from typing import Optional

import numpy as np

from game.breakout import BreakoutEnv
from rl.configs.breakout_config import ENV_CONFIG, EVAL_CONFIG, REWARD_CONFIGS
from rl.policies import POLICIES

CSV_FIELDS = ["episode", "reward", "length", "blocks_left", "won"]


def evaluate_policy(
    policy: str = "tracking",
    n_episodes: int = 10,
    seed: Optional[int] = None,
    reward_config: str = "baseline",
    csv_path: Optional[str] = None,
    env_config: Optional[dict] = None,
    verbose: bool = True,
):
    """
    Evaluate a scripted policy

    Args:
        policy: Name of a policy in rl.policies.POLICIES
        n_episodes: Number of episodes to evaluate
        seed: Base random seed; episode i uses seed + i
        reward_config: Name of the reward shaping config
        csv_path: Optional path to write per-episode metrics to
        env_config: Overrides for ENV_CONFIG
        verbose: Print per-episode results
    """
    if policy not in POLICIES:
        raise ValueError(f"Unknown policy: {policy}")
    if reward_config not in REWARD_CONFIGS:
        raise ValueError(f"Unknown reward config: {reward_config}")

    act = POLICIES[policy]
    config = dict(ENV_CONFIG)
    config.update(env_config or {})
    env = BreakoutEnv(reward_config=REWARD_CONFIGS[reward_config], **config)

    episode_rewards = []
    episode_lengths = []
    rows = []

    for episode in range(n_episodes):
        obs, info = env.reset(seed=seed + episode if seed is not None else None)

        terminated = False
        truncated = False
        total_reward = 0.0
        steps = 0

        while not (terminated or truncated):
            obs, reward, terminated, truncated, info = env.step(act(env))
            total_reward += reward
            steps += 1

        episode_rewards.append(total_reward)
        episode_lengths.append(steps)
        rows.append({
            "episode": episode + 1,
            "reward": total_reward,
            "length": steps,
            "blocks_left": info["num_blocks"],
            "won": info["won"],
        })

        if verbose:
            print(f"Episode {episode + 1}/{n_episodes}: "
                  f"Reward = {total_reward:.2f}, Length = {steps}, "
                  f"Blocks left = {info['num_blocks']}")

    env.close()

    if csv_path:
        _write_csv(csv_path, rows)

    mean_reward = np.mean(episode_rewards)
    std_reward = np.std(episode_rewards)
    mean_length = np.mean(episode_lengths)
    win_rate = np.mean([r["won"] for r in rows])

    if verbose:
        print("\n" + "=" * 50)
        print(f"Evaluation Results ({policy}, {n_episodes} episodes):")
        print(f"Mean Reward: {mean_reward:.2f} ± {std_reward:.2f}")
        print(f"Mean Episode Length: {mean_length:.1f}")
        print(f"Win Rate: {win_rate:.0%}")
        print("=" * 50)

    return {
        "mean_reward": mean_reward,
        "std_reward": std_reward,
        "mean_length": mean_length,
        "win_rate": win_rate,
        "episode_rewards": episode_rewards,
        "episode_lengths": episode_lengths,
    }


def _write_csv(path: str, rows):
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        writer.writeheader()
        writer.writerows(rows)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Evaluate a scripted breakout policy")
    parser.add_argument(
        "--policy",
        type=str,
        default=EVAL_CONFIG["policy"],
        choices=sorted(POLICIES),
        help=f"Policy to run (default: {EVAL_CONFIG['policy']})",
    )
    parser.add_argument(
        "--n-episodes",
        type=int,
        default=EVAL_CONFIG["n_episodes"],
        help=f"Number of evaluation episodes (default: {EVAL_CONFIG['n_episodes']})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=EVAL_CONFIG["seed"],
        help=f"Random seed (default: {EVAL_CONFIG['seed']})",
    )
    parser.add_argument(
        "--reward-config",
        type=str,
        default=EVAL_CONFIG["reward_config"],
        choices=sorted(REWARD_CONFIGS),
        help="Reward shaping config (default: baseline)",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="Override the episode step limit",
    )
    parser.add_argument(
        "--csv",
        type=str,
        default=None,
        help="Write per-episode metrics to this CSV file",
    )
    parser.add_argument(
        "--compare-random",
        action="store_true",
        help="Also evaluate the random policy for comparison",
    )

    args = parser.parse_args(argv)
    env_config = {"max_steps": args.max_steps} if args.max_steps else None

    results = evaluate_policy(
        policy=args.policy,
        n_episodes=args.n_episodes,
        seed=args.seed,
        reward_config=args.reward_config,
        csv_path=args.csv,
        env_config=env_config,
    )

    if args.compare_random and args.policy != "random":
        print("\n")
        random_results = evaluate_policy(
            policy="random",
            n_episodes=args.n_episodes,
            seed=args.seed,
            reward_config=args.reward_config,
            env_config=env_config,
        )

        improvement = results["mean_reward"] - random_results["mean_reward"]
        print(f"\nImprovement over random: {improvement:.2f}")

    return results


if __name__ == "__main__":
    main()
