"""
Game entity dataclasses

Every entity is immutable: state transitions build new values with
dataclasses.replace. Each family (ball, block, paddle) is a closed set of
variants joined in a Union alias.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union

from .geometry import Point, Rect, Vector, ZERO


# ----------------------------
# Balls
# ----------------------------

@dataclass(frozen=True)
class _BallFields:
    center: Point
    diameter: int
    velocity: Vector

    def __post_init__(self):
        if self.diameter <= 0:
            raise ValueError(f"Ball diameter must be positive, got {self.diameter}")
        if self.velocity == ZERO:
            raise ValueError("Ball velocity must not be the zero vector")

    @property
    def rect(self) -> Rect:
        extent = Vector(self.diameter, self.diameter)
        return Rect(self.center - extent, self.center + extent)

    def with_center(self, center: Point):
        return replace(self, center=center)

    def with_velocity(self, velocity: Vector):
        # __post_init__ rejects the zero vector
        return replace(self, velocity=velocity)


@dataclass(frozen=True)
class NormalBall(_BallFields):
    """Plain ball, bounces off everything it hits"""


@dataclass(frozen=True)
class SuperBall(_BallFields):
    """Powered-up ball that passes through blocks it destroys"""
    lifetime: int

    def __post_init__(self):
        super().__post_init__()
        if self.lifetime <= 0:
            raise ValueError(f"Super ball lifetime must be positive, got {self.lifetime}")


Ball = Union[NormalBall, SuperBall]


# ----------------------------
# Blocks
# ----------------------------

@dataclass(frozen=True)
class _BlockFields:
    top_left: Point
    bottom_right: Point

    def __post_init__(self):
        if not (self.top_left.x < self.bottom_right.x and self.top_left.y < self.bottom_right.y):
            raise ValueError(
                f"Block top-left {self.top_left} must be strictly up and left from {self.bottom_right}"
            )

    @property
    def rect(self) -> Rect:
        return Rect(self.top_left, self.bottom_right)


@dataclass(frozen=True)
class NormalBlock(_BlockFields):
    """Destroyed by any hit"""


@dataclass(frozen=True)
class SturdyBlock(_BlockFields):
    """Takes `lifetime` hits before it is destroyed"""
    lifetime: int

    def __post_init__(self):
        super().__post_init__()
        if self.lifetime < 1:
            raise ValueError(f"Sturdy block lifetime must be at least 1, got {self.lifetime}")


@dataclass(frozen=True)
class PowerupBallBlock(_BlockFields):
    """Turns the ball that destroys it into a super ball"""


@dataclass(frozen=True)
class ReplicatorBlock(_BlockFields):
    """Turns the paddle into a replicator paddle when destroyed"""


Block = Union[NormalBlock, SturdyBlock, PowerupBallBlock, ReplicatorBlock]


# ----------------------------
# Paddles
# ----------------------------

@dataclass(frozen=True)
class _PaddleFields:
    center: Point
    half_size: Vector

    def __post_init__(self):
        if self.half_size.x < 0 or self.half_size.y < 0:
            raise ValueError(f"Paddle half size must be non-negative, got {self.half_size}")

    @property
    def rect(self) -> Rect:
        return Rect(self.center - self.half_size, self.center + self.half_size)

    def with_center(self, center: Point):
        return replace(self, center=center)


@dataclass(frozen=True)
class NormalPaddle(_PaddleFields):
    """Plain paddle"""


@dataclass(frozen=True)
class ReplicatorPaddle(_PaddleFields):
    """Paddle that spawns `lifetime` extra balls on its next hit"""
    lifetime: int

    def __post_init__(self):
        super().__post_init__()
        if self.lifetime < 1:
            raise ValueError(f"Replicator paddle lifetime must be at least 1, got {self.lifetime}")


Paddle = Union[NormalPaddle, ReplicatorPaddle]


# ----------------------------
# Hit results
# ----------------------------

@dataclass(frozen=True)
class BlockHit:
    """Outcome of testing one ball against one block"""
    block: Block
    ball: Ball
    paddle: Paddle
    destroyed: bool = False


@dataclass(frozen=True)
class PaddleHit:
    """Outcome of testing one ball against the paddle"""
    paddle: Paddle
    ball: Ball
    replicas: int = 0
