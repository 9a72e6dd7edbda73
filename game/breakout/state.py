"""
BreakoutState - the per-tick simulation driver
----------------------------------------------
- Owns the ball roster, the block roster, the paddle and the field size
- tick() ages, rolls and bounces every ball, then resolves block and paddle hits
- Rosters are immutable tuples, replaced once per mutating call
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from . import balls as ball_rules
from . import blocks as block_rules
from . import paddles as paddle_rules
from .config import RulesConfig, DEFAULT_RULES
from .entities import Ball, Block, Paddle, ReplicatorPaddle, SturdyBlock, SuperBall
from .geometry import LEFT, ORIGIN, RIGHT, UP, Point, Rect


@dataclass(frozen=True)
class TickEvents:
    """What happened during one tick"""
    blocks_destroyed: int = 0
    balls_lost: int = 0
    balls_spawned: int = 0


class BreakoutState:
    """Game state of one breakout level"""

    def __init__(
        self,
        balls: Iterable[Ball],
        blocks: Iterable[Block],
        bottom_right: Point,
        paddle: Paddle,
        config: Optional[RulesConfig] = None,
    ):
        if balls is None:
            raise ValueError("No ball roster supplied")
        if blocks is None:
            raise ValueError("No block roster supplied")
        if bottom_right is None:
            raise ValueError("No field size supplied")
        if paddle is None:
            raise ValueError("No paddle supplied")

        balls = tuple(balls)
        blocks = tuple(blocks)
        if any(b is None for b in balls):
            raise ValueError("Ball roster contains None")
        if any(b is None for b in blocks):
            raise ValueError("Block roster contains None")

        self._config = config if config is not None else DEFAULT_RULES
        self._bottom_right = bottom_right
        self._check_placement(balls, blocks, paddle)

        self._balls: Tuple[Ball, ...] = balls
        self._blocks: Tuple[Block, ...] = blocks
        self._paddle: Paddle = paddle

    def _check_placement(self, balls, blocks, paddle):
        if not (ORIGIN.x < self._bottom_right.x and ORIGIN.y < self._bottom_right.y):
            raise ValueError(f"Field corner {self._bottom_right} must lie down and right from the origin")
        field = Rect(ORIGIN, self._bottom_right)

        for ball in balls:
            if not field.contains(ball.center):
                raise ValueError(f"Ball at {ball.center} lies outside the field")
        for block in blocks:
            if not field.contains_rect(block.rect):
                raise ValueError(f"Block {block.top_left}-{block.bottom_right} lies outside the field")
        if not field.contains_rect(paddle.rect):
            raise ValueError(f"Paddle at {paddle.center} does not fit inside the field")

        paddle_top = paddle.rect.top
        for block in blocks:
            if block.bottom_right.y >= paddle_top:
                raise ValueError(f"Block {block.top_left}-{block.bottom_right} is not above the paddle")

        self._check_lifetimes(balls, blocks, paddle)

    def _check_lifetimes(self, balls, blocks, paddle):
        cfg = self._config
        for ball in balls:
            if isinstance(ball, SuperBall) and ball.lifetime > cfg.max_ball_lifetime:
                raise ValueError(f"Super ball lifetime {ball.lifetime} exceeds {cfg.max_ball_lifetime}")
        for block in blocks:
            if isinstance(block, SturdyBlock) and block.lifetime > cfg.max_sturdy_lifetime:
                raise ValueError(f"Sturdy block lifetime {block.lifetime} exceeds {cfg.max_sturdy_lifetime}")
        if isinstance(paddle, ReplicatorPaddle) and paddle.lifetime > cfg.max_replicator_lifetime:
            raise ValueError(f"Replicator paddle lifetime {paddle.lifetime} exceeds {cfg.max_replicator_lifetime}")

    # ----------------------------
    # Snapshots
    # ----------------------------

    @property
    def balls(self) -> Tuple[Ball, ...]:
        return self._balls

    @property
    def blocks(self) -> Tuple[Block, ...]:
        return self._blocks

    @property
    def paddle(self) -> Paddle:
        return self._paddle

    @property
    def bottom_right(self) -> Point:
        return self._bottom_right

    @property
    def config(self) -> RulesConfig:
        return self._config

    # ----------------------------
    # Simulation
    # ----------------------------

    def tick(self, elapsed_time: int, paddle_dir: int) -> TickEvents:
        """
        Advance the game by one step.

        Balls are processed in roster order. Replicas spawned by the paddle
        are appended to the roster but not moved until the next tick.
        Walls reflect a ball only while it still moves into them, unlike a
        plain unconditional wall bounce, so a ball touching a wall for two
        ticks in a row is not flipped back into it.
        Rosters and paddle are committed together once every ball has been
        resolved; if resolution raises, the state is left as it was.
        Returns counts of what the tick removed and added.
        """
        if elapsed_time <= 0:
            raise ValueError(f"Elapsed time must be positive, got {elapsed_time}")
        if paddle_dir not in paddle_rules.PADDLE_DIRECTIONS:
            raise ValueError(f"Paddle direction not understood: {paddle_dir}")

        cfg = self._config
        kept: List[Ball] = []
        spawned: List[Ball] = []
        blocks: Tuple[Block, ...] = self._blocks
        paddle: Paddle = self._paddle
        lost = 0

        for ball in self._balls:
            ball = ball_rules.age(ball, elapsed_time)
            ball = ball_rules.roll(ball, elapsed_time)
            ball = self._bounce_walls(ball)

            if ball.rect.bottom >= self._bottom_right.y:
                lost += 1
                continue

            remaining: List[Block] = []
            for block in blocks:
                hit = block_rules.hit_block(block, ball, paddle, cfg)
                ball, paddle = hit.ball, hit.paddle
                if not hit.destroyed:
                    remaining.append(hit.block)
            blocks = tuple(remaining)

            hit = paddle_rules.hit_paddle(paddle, ball, paddle_dir, cfg)
            ball, paddle = hit.ball, hit.paddle
            if hit.replicas:
                spawned.extend(ball_rules.replicate(ball, hit.replicas, cfg))

            kept.append(ball)

        destroyed = len(self._blocks) - len(blocks)
        self._balls = tuple(kept + spawned)
        self._blocks = blocks
        self._paddle = paddle
        return TickEvents(destroyed, lost, len(spawned))

    def _bounce_walls(self, ball: Ball) -> Ball:
        # Walls only reflect a ball still heading into them
        rect = ball.rect
        if rect.left <= 0 and ball.velocity.dot(LEFT) > 0:
            ball = ball_rules.bounce(ball, LEFT)
        if rect.right >= self._bottom_right.x and ball.velocity.dot(RIGHT) > 0:
            ball = ball_rules.bounce(ball, RIGHT)
        if rect.top <= 0 and ball.velocity.dot(UP) > 0:
            ball = ball_rules.bounce(ball, UP)
        return ball

    def move_left(self, elapsed_time: int = 1):
        self._paddle = paddle_rules.move_left(self._paddle, elapsed_time, self._bottom_right, self._config)

    def move_right(self, elapsed_time: int = 1):
        self._paddle = paddle_rules.move_right(self._paddle, elapsed_time, self._bottom_right, self._config)

    # ----------------------------
    # Terminal predicates
    # ----------------------------

    def is_won(self) -> bool:
        return not self._blocks and bool(self._balls)

    def is_dead(self) -> bool:
        return not self._balls

    def __repr__(self):
        return (f"BreakoutState(balls={len(self._balls)}, blocks={len(self._blocks)}, "
                f"paddle={self._paddle!r}, bottom_right={self._bottom_right!r})")


def new_game(balls: Iterable[Ball], blocks: Iterable[Block], bottom_right: Point,
             paddle: Paddle, config: Optional[RulesConfig] = None) -> BreakoutState:
    """Build a validated game state; raises ValueError on bad input"""
    return BreakoutState(balls, blocks, bottom_right, paddle, config)
