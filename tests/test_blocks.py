import pytest

from game.breakout.blocks import hit_block, hit_normal, is_hit
from game.breakout.config import DEFAULT_RULES
from game.breakout.entities import (
    NormalBall,
    NormalBlock,
    NormalPaddle,
    PowerupBallBlock,
    ReplicatorBlock,
    ReplicatorPaddle,
    SturdyBlock,
    SuperBall,
)
from game.breakout.geometry import UP, Point, Vector

TL, BR = Point(101, 101), Point(151, 151)


@pytest.fixture
def paddle():
    return NormalPaddle(Point(500, 900), Vector(10, 4))


@pytest.fixture
def ball():
    # just rolled up into the bottom face of the block
    return NormalBall(Point(125, 155), 10, Vector(0, -10))


@pytest.fixture
def super_ball():
    return SuperBall(Point(125, 155), 10, Vector(0, -10), 100)


def test_block_invariant():
    with pytest.raises(ValueError):
        NormalBlock(BR, TL)
    with pytest.raises(ValueError):
        NormalBlock(Point(0, 0), Point(10, 0))
    with pytest.raises(ValueError):
        SturdyBlock(TL, BR, 0)


def test_normal_block(ball, paddle):
    block = NormalBlock(TL, BR)
    hit = hit_block(block, ball, paddle)
    assert hit.destroyed
    assert hit.ball.velocity == Vector(0, 10)
    assert hit.paddle == paddle
    assert hit.block == block


def test_no_hit_when_moving_away(paddle):
    block = NormalBlock(TL, BR)
    leaving = NormalBall(Point(125, 155), 10, Vector(0, 10))
    assert not is_hit(block, leaving)
    hit = hit_block(block, leaving, paddle)
    assert not hit.destroyed
    assert hit.block is block
    assert hit.ball is leaving


def test_no_hit_when_apart(paddle):
    block = NormalBlock(TL, BR)
    far = NormalBall(Point(500, 500), 10, Vector(0, -10))
    hit = hit_block(block, far, paddle)
    assert not hit.destroyed
    assert hit.ball is far


def test_sturdy_block_decays(ball, paddle):
    hit = hit_block(SturdyBlock(TL, BR, 3), ball, paddle)
    assert not hit.destroyed
    assert hit.block == SturdyBlock(TL, BR, 2)
    assert hit.ball.velocity == Vector(0, 10)


def test_sturdy_block_destroyed_on_last_hit(ball, paddle):
    hit = hit_block(SturdyBlock(TL, BR, 1), ball, paddle)
    assert hit.destroyed
    assert hit.ball.velocity == Vector(0, 10)


def test_super_ball_bounces_off_dented_sturdy_block(super_ball, paddle):
    hit = hit_block(SturdyBlock(TL, BR, 2), super_ball, paddle)
    assert not hit.destroyed
    assert hit.ball.velocity == Vector(0, 10)


def test_super_ball_passes_through_destroyed_block(super_ball, paddle):
    hit = hit_block(SturdyBlock(TL, BR, 1), super_ball, paddle)
    assert hit.destroyed
    assert hit.ball == super_ball

    hit = hit_block(NormalBlock(TL, BR), super_ball, paddle)
    assert hit.destroyed
    assert hit.ball.velocity == Vector(0, -10)


def test_powerup_ball_block(ball, paddle):
    hit = hit_block(PowerupBallBlock(TL, BR), ball, paddle)
    assert hit.destroyed
    assert isinstance(hit.ball, SuperBall)
    assert hit.ball.lifetime == DEFAULT_RULES.max_ball_lifetime
    assert hit.ball.velocity == Vector(0, 10)


def test_powerup_ball_block_resets_super_ball(super_ball, paddle):
    hit = hit_block(PowerupBallBlock(TL, BR), super_ball, paddle)
    assert hit.ball.lifetime == DEFAULT_RULES.max_ball_lifetime
    assert hit.ball.velocity == Vector(0, -10)


def test_replicator_block_powers_up_paddle(ball, paddle):
    hit = hit_block(ReplicatorBlock(TL, BR), ball, paddle)
    assert hit.destroyed
    assert hit.ball.velocity == Vector(0, 10)
    assert hit.paddle == ReplicatorPaddle(paddle.center, paddle.half_size,
                                          DEFAULT_RULES.max_replicator_lifetime)


def test_replicator_block_resets_replicator_paddle(ball):
    paddle = ReplicatorPaddle(Point(500, 900), Vector(10, 4), 1)
    hit = hit_block(ReplicatorBlock(TL, BR), ball, paddle)
    assert hit.paddle.lifetime == DEFAULT_RULES.max_replicator_lifetime


def test_hit_normal(ball):
    block = NormalBlock(TL, BR)
    assert hit_normal(block, ball) == UP
    leaving = NormalBall(Point(125, 155), 10, Vector(0, 10))
    assert hit_normal(block, leaving) is None
