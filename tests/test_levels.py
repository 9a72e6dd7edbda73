import random

import pytest

from game.breakout.config import DEFAULT_RULES
from game.breakout.entities import NormalBall, NormalBlock, NormalPaddle, SturdyBlock
from game.breakout.geometry import Point
from game.breakout.levels import make_blocks, make_level


def test_default_level_layout():
    game = make_level(rng=random.Random(0))
    assert len(game.blocks) == 50
    assert game.bottom_right == Point(1000, 1000)
    assert isinstance(game.paddle, NormalPaddle)
    assert game.paddle.center == Point(500, 940)

    (ball,) = game.balls
    assert isinstance(ball, NormalBall)
    assert ball.velocity.y < 0
    assert ball.rect.overlap(game.paddle.rect) is None


def test_level_is_reproducible():
    a = make_level(rng=random.Random(3))
    b = make_level(rng=random.Random(3))
    assert a.blocks == b.blocks
    assert a.balls == b.balls


def test_plain_blocks_only():
    blocks = make_blocks(1000, 2, 5, sturdy_ratio=0, powerup_ratio=0,
                         replicator_ratio=0, rng=random.Random(1))
    assert len(blocks) == 10
    assert all(type(b) is NormalBlock for b in blocks)


def test_sturdy_lifetimes_in_range():
    blocks = make_blocks(1000, 3, 6, sturdy_ratio=1.0, rng=random.Random(2))
    assert all(isinstance(b, SturdyBlock) for b in blocks)
    assert all(1 <= b.lifetime <= DEFAULT_RULES.max_sturdy_lifetime for b in blocks)


def test_too_many_columns():
    with pytest.raises(ValueError):
        make_blocks(1000, 1, 300)
