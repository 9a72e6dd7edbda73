"""
Rules constants for the breakout engine
"""

from dataclasses import dataclass
from typing import Tuple

from .geometry import Vector


@dataclass(frozen=True)
class RulesConfig:
    """Gameplay constants, owned by a BreakoutState and passed down explicitly"""
    max_ball_lifetime: int = 10000        # elapsed-time units a super ball lasts
    max_sturdy_lifetime: int = 3          # hits a sturdy block absorbs
    max_replicator_lifetime: int = 3      # paddle hits before reverting to normal
    replication_offsets: Tuple[Vector, ...] = (
        Vector(2, -2),
        Vector(-2, 2),
        Vector(2, 2),
    )
    paddle_speed: int = 10                # px per elapsed-time unit
    paddle_boost: int = 2                 # x velocity added per unit of paddle direction

    def __post_init__(self):
        for name in ("max_ball_lifetime", "max_sturdy_lifetime", "max_replicator_lifetime"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be at least 1, got {getattr(self, name)}")
        if self.max_replicator_lifetime > len(self.replication_offsets):
            raise ValueError(
                "Need one replication offset per replicator lifetime unit: "
                f"{len(self.replication_offsets)} < {self.max_replicator_lifetime}"
            )
        if self.paddle_speed < 0:
            raise ValueError(f"paddle_speed must be non-negative, got {self.paddle_speed}")


DEFAULT_RULES = RulesConfig()
