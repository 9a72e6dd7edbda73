"""Breakout module - rules engine and Gymnasium environment"""

from .geometry import Point, Vector, Rect, overlap, UP, DOWN, LEFT, RIGHT, ZERO, ORIGIN
from .config import RulesConfig, DEFAULT_RULES
from .entities import (
    Ball,
    NormalBall,
    SuperBall,
    Block,
    NormalBlock,
    SturdyBlock,
    PowerupBallBlock,
    ReplicatorBlock,
    Paddle,
    NormalPaddle,
    ReplicatorPaddle,
    BlockHit,
    PaddleHit,
)
from .state import BreakoutState, TickEvents, new_game
from .levels import make_level
from .breakout_env import BreakoutEnv, run_random_episode

__all__ = [
    'Point', 'Vector', 'Rect', 'overlap', 'UP', 'DOWN', 'LEFT', 'RIGHT', 'ZERO', 'ORIGIN',
    'RulesConfig', 'DEFAULT_RULES',
    'Ball', 'NormalBall', 'SuperBall',
    'Block', 'NormalBlock', 'SturdyBlock', 'PowerupBallBlock', 'ReplicatorBlock',
    'Paddle', 'NormalPaddle', 'ReplicatorPaddle',
    'BlockHit', 'PaddleHit',
    'BreakoutState', 'TickEvents', 'new_game',
    'make_level',
    'BreakoutEnv', 'run_random_episode',
]
