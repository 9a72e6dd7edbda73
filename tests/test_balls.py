import pytest

from game.breakout import balls
from game.breakout.config import RulesConfig, DEFAULT_RULES
from game.breakout.entities import NormalBall, SuperBall
from game.breakout.geometry import LEFT, UP, Point, Rect, Vector, ZERO

BLOCK_RECT = Rect(Point(101, 101), Point(151, 151))


@pytest.fixture
def ball():
    return NormalBall(Point(5, 5), 2, Vector(2, -1))


@pytest.fixture
def super_ball():
    return SuperBall(Point(5, 5), 2, Vector(2, -1), 100)


def test_ball_invariants():
    with pytest.raises(ValueError):
        NormalBall(Point(5, 5), 2, ZERO)
    with pytest.raises(ValueError):
        NormalBall(Point(5, 5), 0, Vector(1, 1))
    with pytest.raises(ValueError):
        SuperBall(Point(5, 5), 2, Vector(1, 1), 0)


def test_setters(ball):
    moved = ball.with_center(Point(4, 4))
    assert moved.center == Point(4, 4)
    assert moved.velocity == ball.velocity
    assert ball.center == Point(5, 5)

    faster = ball.with_velocity(Vector(1, -2))
    assert faster.velocity == Vector(1, -2)
    with pytest.raises(ValueError):
        ball.with_velocity(ZERO)


def test_rect_extends_one_diameter(ball):
    assert ball.rect == Rect(Point(3, 3), Point(7, 7))


def test_roll(ball, super_ball):
    assert balls.roll(ball, 3).center == Point(11, 2)
    rolled = balls.roll(super_ball, 1)
    assert isinstance(rolled, SuperBall)
    assert rolled.center == Point(7, 4)
    assert rolled.lifetime == 100


def test_roll_requires_elapsed_time(ball):
    with pytest.raises(ValueError):
        balls.roll(ball, 0)


def test_bounce(ball):
    bounced = balls.bounce(ball, UP)
    assert bounced.velocity == Vector(2, 1)
    assert bounced.center == ball.center
    assert bounced.velocity + ball.velocity == Vector(2 * ball.velocity.x, 0)


def test_bounce_requires_unit_direction(ball):
    with pytest.raises(ValueError):
        balls.bounce(ball, Vector(1, 1))


def test_age_normal_ball_is_noop(ball):
    assert balls.age(ball, 50) is ball


def test_age_super_ball(super_ball):
    aged = balls.age(super_ball, 40)
    assert isinstance(aged, SuperBall)
    assert aged.lifetime == 60


@pytest.mark.parametrize("elapsed", [100, 150])
def test_super_ball_expires(super_ball, elapsed):
    aged = balls.age(super_ball, elapsed)
    assert type(aged) is NormalBall
    assert aged.center == super_ball.center
    assert aged.diameter == super_ball.diameter
    assert aged.velocity == super_ball.velocity


def test_powerup(ball):
    powered = balls.powerup(ball)
    assert isinstance(powered, SuperBall)
    assert powered.lifetime == DEFAULT_RULES.max_ball_lifetime
    assert powered.velocity == ball.velocity


def test_powerup_resets_lifetime(super_ball):
    assert balls.powerup(super_ball).lifetime == DEFAULT_RULES.max_ball_lifetime
    assert balls.powerup(super_ball, RulesConfig(max_ball_lifetime=500)).lifetime == 500


def test_powerup_then_age(ball):
    aged = balls.age(balls.powerup(ball), 30)
    assert isinstance(aged, SuperBall)
    assert aged.lifetime == DEFAULT_RULES.max_ball_lifetime - 30


def test_replicate(ball):
    replicas = balls.replicate(ball, 3)
    assert [r.velocity for r in replicas] == [Vector(4, -3), Vector(0, 1), Vector(4, 1)]
    assert all(type(r) is NormalBall for r in replicas)
    assert all(r.center == ball.center and r.diameter == ball.diameter for r in replicas)


def test_replicate_super_keeps_lifetime(super_ball):
    replicas = balls.replicate(super_ball, 2)
    assert len(replicas) == 2
    assert all(isinstance(r, SuperBall) and r.lifetime == 100 for r in replicas)


@pytest.mark.parametrize("count", [0, 4])
def test_replicate_count_bounds(ball, count):
    with pytest.raises(ValueError):
        balls.replicate(ball, count)


def test_replicate_never_yields_zero_velocity():
    ball = NormalBall(Point(50, 50), 5, Vector(-2, 2))
    (replica,) = balls.replicate(ball, 1)
    assert replica.velocity == Vector(-2, 2)


def test_hit_block_normal_ball_always_bounces():
    ball = NormalBall(Point(125, 155), 10, Vector(0, -10))
    assert balls.hit_block(ball, BLOCK_RECT, True).velocity == Vector(0, 10)
    assert balls.hit_block(ball, BLOCK_RECT, False).velocity == Vector(0, 10)


def test_hit_block_super_ball_passes_destroyed_blocks():
    ball = SuperBall(Point(125, 155), 10, Vector(0, -10), 100)
    assert balls.hit_block(ball, BLOCK_RECT, True) == ball
    assert balls.hit_block(ball, BLOCK_RECT, False).velocity == Vector(0, 10)


def test_hit_block_uses_given_normal():
    # the supplied normal wins over recomputing the overlap
    ball = NormalBall(Point(125, 155), 10, Vector(3, -10))
    assert balls.hit_block(ball, BLOCK_RECT, False, LEFT).velocity == Vector(-3, -10)
