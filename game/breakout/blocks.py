"""
Block state machine: per-variant hit policies
"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from . import balls, paddles
from .config import RulesConfig, DEFAULT_RULES
from .entities import (
    Ball,
    Block,
    BlockHit,
    NormalBlock,
    Paddle,
    PowerupBallBlock,
    ReplicatorBlock,
    SturdyBlock,
)
from .geometry import Vector

BLOCK_TYPES = (NormalBlock, SturdyBlock, PowerupBallBlock, ReplicatorBlock)


def hit_normal(block: Block, ball: Ball) -> Optional[Vector]:
    """Normal of the block face the ball is moving into, or None when there is no hit"""
    normal = ball.rect.overlap(block.rect)
    if normal is None or normal.dot(ball.velocity) <= 0:
        return None
    return normal


def is_hit(block: Block, ball: Ball) -> bool:
    return hit_normal(block, ball) is not None


def hit_block(block: Block, ball: Ball, paddle: Paddle,
              config: RulesConfig = DEFAULT_RULES) -> BlockHit:
    """
    Resolve one ball against one block.

    Returns the block that stays in play (the same block, or a decayed sturdy
    block), the ball after its response, the possibly powered-up paddle, and
    whether the block has to be removed.
    """
    if not isinstance(block, BLOCK_TYPES):
        raise TypeError(f"Unknown block type: {type(block).__name__}")
    normal = hit_normal(block, ball)
    if normal is None:
        return BlockHit(block, ball, paddle)

    if isinstance(block, SturdyBlock):
        if block.lifetime <= 1:
            return BlockHit(block, balls.hit_block(ball, block.rect, True, normal), paddle, True)
        decayed = replace(block, lifetime=block.lifetime - 1)
        return BlockHit(decayed, balls.hit_block(ball, block.rect, False, normal), paddle)

    ball = balls.hit_block(ball, block.rect, True, normal)
    if isinstance(block, PowerupBallBlock):
        ball = balls.powerup(ball, config)
    elif isinstance(block, ReplicatorBlock):
        paddle = paddles.powerup(paddle, config)
    return BlockHit(block, ball, paddle, True)
