"""
Configuration for the breakout environment
Environment layout, reward shaping variants and evaluation settings
"""

# Environment parameters
ENV_CONFIG = {
    "width": 1000,
    "height": 1000,
    "dt": 1,
    "max_steps": 5000,
    "rows": 5,
    "cols": 10,
    "k_balls": 4,
    "ball_diameter": 10,
    "ball_speed": 10,
    "sturdy_ratio": 0.2,
    "powerup_ratio": 0.05,
    "replicator_ratio": 0.05,
}

# ==============================================================================
# REWARD SHAPING CONFIGURATIONS
# ==============================================================================

# Reward Config 1: BASELINE (blocks and survival weighted evenly)
REWARD_CONFIG_BASELINE = {
    "name": "baseline",
    "description": "Reward blocks, penalise lost balls",
    "R_BLOCK": 1.0,        # Reward per destroyed block
    "R_BALL_LOST": 1.0,    # Penalty per ball falling out
    "R_WIN": 10.0,         # Bonus for clearing the level
    "R_DEATH": 5.0,        # Penalty when the last ball is gone
    "R_TIME": 0.0,         # Per-step penalty
}

# Reward Config 2: SURVIVAL (keep balls alive)
REWARD_CONFIG_SURVIVAL = {
    "name": "survival",
    "description": "Heavier penalties for losing balls",
    "R_BLOCK": 0.5,
    "R_BALL_LOST": 3.0,
    "R_WIN": 10.0,
    "R_DEATH": 10.0,
    "R_TIME": 0.0,
}

# Reward Config 3: SPEEDRUN (clear the level fast)
REWARD_CONFIG_SPEEDRUN = {
    "name": "speedrun",
    "description": "Small time penalty, bigger win bonus",
    "R_BLOCK": 1.0,
    "R_BALL_LOST": 0.5,
    "R_WIN": 25.0,
    "R_DEATH": 5.0,
    "R_TIME": 0.001,
}

REWARD_CONFIGS = {
    "baseline": REWARD_CONFIG_BASELINE,
    "survival": REWARD_CONFIG_SURVIVAL,
    "speedrun": REWARD_CONFIG_SPEEDRUN,
}

# ==============================================================================
# EVALUATION SETTINGS
# ==============================================================================

EVAL_CONFIG = {
    "n_episodes": 10,
    "seed": 42,
    "policy": "tracking",
    "reward_config": "baseline",
}
