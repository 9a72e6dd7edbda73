"""
Ball state machine: rolling, bouncing, aging, replication and power-ups
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

from .config import RulesConfig, DEFAULT_RULES
from .entities import Ball, NormalBall, SuperBall
from .geometry import Rect, Vector, ZERO


def roll(ball: Ball, elapsed_time: int) -> Ball:
    """Move the ball along its velocity for `elapsed_time` units"""
    if elapsed_time == 0:
        raise ValueError("Cannot roll a ball for zero elapsed time")
    return replace(ball, center=ball.center + ball.velocity.scaled(elapsed_time))


def bounce(ball: Ball, direction: Vector) -> Ball:
    """Mirror the ball's velocity over a surface with unit normal `direction`"""
    if not direction.is_unit():
        raise ValueError(f"Bounce direction {direction} is not a unit vector")
    return replace(ball, velocity=ball.velocity.mirror_over(direction))


def age(ball: Ball, elapsed_time: int) -> Ball:
    """
    Let a super ball's power-up run down.

    Normal balls are returned unchanged. A super ball whose lifetime drops to
    zero or below becomes a new normal ball with the same center, diameter and
    velocity.
    """
    if not isinstance(ball, SuperBall):
        return ball
    lifetime = ball.lifetime - elapsed_time
    if lifetime <= 0:
        return NormalBall(ball.center, ball.diameter, ball.velocity)
    return replace(ball, lifetime=lifetime)


def hit_block(ball: Ball, block_rect: Rect, destroyed: bool,
              direction: Optional[Vector] = None) -> Ball:
    """
    Response of the ball to hitting a block; super balls pass through blocks
    they destroy. `direction` is the overlap normal when the caller already
    has it.
    """
    if isinstance(ball, SuperBall) and destroyed:
        return ball
    if direction is None:
        direction = ball.rect.overlap(block_rect)
    if direction is None:
        return ball
    return bounce(ball, direction)


def powerup(ball: Ball, config: RulesConfig = DEFAULT_RULES) -> SuperBall:
    if isinstance(ball, SuperBall):
        return replace(ball, lifetime=config.max_ball_lifetime)
    return SuperBall(ball.center, ball.diameter, ball.velocity, config.max_ball_lifetime)


def replicate(ball: Ball, count: int, config: RulesConfig = DEFAULT_RULES) -> List[Ball]:
    """
    Spawn `count` copies of the ball, each with one of the replication offsets
    added to its velocity.

    An offset that would cancel the velocity out is skipped for that replica,
    which then keeps the source velocity.
    """
    if not 1 <= count <= len(config.replication_offsets):
        raise ValueError(
            f"Replication count must be in [1, {len(config.replication_offsets)}], got {count}"
        )
    replicas = []
    for offset in config.replication_offsets[:count]:
        velocity = ball.velocity + offset
        if velocity == ZERO:
            velocity = ball.velocity
        replicas.append(replace(ball, velocity=velocity))
    return replicas
