"""
Programmatic level layouts

Builds the initial rosters for a BreakoutState: a grid of blocks near the top
of the field, one ball resting above a centered paddle.
"""

from __future__ import annotations

import random
from typing import List, Optional

from .config import RulesConfig, DEFAULT_RULES
from .entities import (
    Block,
    NormalBall,
    NormalBlock,
    NormalPaddle,
    PowerupBallBlock,
    ReplicatorBlock,
    SturdyBlock,
)
from .geometry import Point, Vector
from .state import BreakoutState


def make_blocks(
    width: int,
    rows: int,
    cols: int,
    top: int = 60,
    margin: int = 40,
    gap: int = 4,
    block_height: int = 24,
    sturdy_ratio: float = 0.2,
    powerup_ratio: float = 0.05,
    replicator_ratio: float = 0.05,
    rng=random,
    config: RulesConfig = DEFAULT_RULES,
) -> List[Block]:
    """Lay out a rows x cols grid; each cell draws its variant from the ratios"""
    block_width = (width - 2 * margin - (cols - 1) * gap) // cols
    if block_width <= 0:
        raise ValueError(f"{cols} columns do not fit in a field {width} wide")

    blocks: List[Block] = []
    for row in range(rows):
        for col in range(cols):
            tl = Point(margin + col * (block_width + gap), top + row * (block_height + gap))
            br = tl + Vector(block_width, block_height)

            r = rng.random()
            if r < sturdy_ratio:
                lifetime = rng.randint(1, config.max_sturdy_lifetime)
                blocks.append(SturdyBlock(tl, br, lifetime))
            elif r < sturdy_ratio + powerup_ratio:
                blocks.append(PowerupBallBlock(tl, br))
            elif r < sturdy_ratio + powerup_ratio + replicator_ratio:
                blocks.append(ReplicatorBlock(tl, br))
            else:
                blocks.append(NormalBlock(tl, br))
    return blocks


def make_level(
    width: int = 1000,
    height: int = 1000,
    rows: int = 5,
    cols: int = 10,
    ball_diameter: int = 10,
    ball_speed: int = 10,
    paddle_half_size: Vector = Vector(60, 6),
    paddle_margin: int = 60,
    sturdy_ratio: float = 0.2,
    powerup_ratio: float = 0.05,
    replicator_ratio: float = 0.05,
    rng=None,
    config: Optional[RulesConfig] = None,
) -> BreakoutState:
    """Build a fresh, validated level"""
    rng = rng if rng is not None else random
    config = config if config is not None else DEFAULT_RULES

    blocks = make_blocks(
        width, rows, cols,
        sturdy_ratio=sturdy_ratio,
        powerup_ratio=powerup_ratio,
        replicator_ratio=replicator_ratio,
        rng=rng,
        config=config,
    )

    paddle = NormalPaddle(Point(width // 2, height - paddle_margin), paddle_half_size)

    # Ball starts just clear of the paddle, heading up at a random slant
    ball_y = paddle.rect.top - 2 * ball_diameter - 1
    vx = rng.choice([-3, -2, -1, 1, 2, 3])
    ball = NormalBall(Point(width // 2, ball_y), ball_diameter, Vector(vx, -ball_speed))

    return BreakoutState([ball], blocks, Point(width, height), paddle, config)
