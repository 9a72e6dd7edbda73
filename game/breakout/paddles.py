"""
Paddle state machine: ball hits, power-ups and lateral movement
"""

from __future__ import annotations

from .balls import bounce
from .config import RulesConfig, DEFAULT_RULES
from .entities import Ball, NormalPaddle, Paddle, PaddleHit, ReplicatorPaddle
from .geometry import Point, Vector, ZERO
from .utils import clamp

PADDLE_DIRECTIONS = (-1, 0, 1)


def hit_paddle(paddle: Paddle, ball: Ball, paddle_dir: int,
               config: RulesConfig = DEFAULT_RULES) -> PaddleHit:
    """
    Resolve one ball against the paddle.

    The ball bounces only when it moves outward across the face it touches,
    and picks up `paddle_boost * paddle_dir` of extra horizontal speed.
    A replicator paddle reports how many replicas to spawn and wears down
    by one.
    """
    if paddle_dir not in PADDLE_DIRECTIONS:
        raise ValueError(f"Paddle direction must be one of {PADDLE_DIRECTIONS}, got {paddle_dir}")

    normal = ball.rect.overlap(paddle.rect)
    if normal is None or normal.dot(ball.velocity) <= 0:
        return PaddleHit(paddle, ball)

    ball = bounce(ball, normal)
    boosted = ball.velocity + Vector(config.paddle_boost * paddle_dir, 0)
    if boosted != ZERO:
        ball = ball.with_velocity(boosted)

    if isinstance(paddle, ReplicatorPaddle):
        replicas = paddle.lifetime
        return PaddleHit(_wear_down(paddle), ball, replicas)
    return PaddleHit(paddle, ball)


def _wear_down(paddle: ReplicatorPaddle) -> Paddle:
    if paddle.lifetime <= 1:
        return NormalPaddle(paddle.center, paddle.half_size)
    return ReplicatorPaddle(paddle.center, paddle.half_size, paddle.lifetime - 1)


def powerup(paddle: Paddle, config: RulesConfig = DEFAULT_RULES) -> ReplicatorPaddle:
    return ReplicatorPaddle(paddle.center, paddle.half_size, config.max_replicator_lifetime)


def move(paddle: Paddle, dx: int, field: Point) -> Paddle:
    """Shift the paddle horizontally, keeping its whole width inside the field"""
    lo = paddle.half_size.x
    hi = field.x - paddle.half_size.x
    x = clamp(paddle.center.x + dx, lo, hi)
    return paddle.with_center(Point(x, paddle.center.y))


def move_left(paddle: Paddle, elapsed_time: int, field: Point,
              config: RulesConfig = DEFAULT_RULES) -> Paddle:
    if elapsed_time < 0:
        raise ValueError(f"Elapsed time must be non-negative, got {elapsed_time}")
    return move(paddle, -config.paddle_speed * elapsed_time, field)


def move_right(paddle: Paddle, elapsed_time: int, field: Point,
               config: RulesConfig = DEFAULT_RULES) -> Paddle:
    if elapsed_time < 0:
        raise ValueError(f"Elapsed time must be non-negative, got {elapsed_time}")
    return move(paddle, config.paddle_speed * elapsed_time, field)
