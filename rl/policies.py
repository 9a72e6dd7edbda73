"""
Scripted baseline policies for the breakout environment
Each policy takes the env and returns an action index.
"""

from game.breakout.utils import sign

LEFT, STAY, RIGHT = 0, 1, 2


def random_policy(env):
    return int(env.action_space.sample())


def tracking_policy(env):
    # Strategy: follow the lowest ball that is still falling, otherwise the
    # lowest ball overall. Stop once the ball is within a few px of center.
    game = env.game
    if not game.balls:
        return STAY

    falling = [b for b in game.balls if b.velocity.y > 0]
    target = max(falling or game.balls, key=lambda b: b.center.y)

    dx = target.center.x - game.paddle.center.x
    if abs(dx) <= game.config.paddle_speed * env.dt // 2:
        return STAY
    return RIGHT if sign(dx) > 0 else LEFT


POLICIES = {
    "random": random_policy,
    "tracking": tracking_policy,
}
