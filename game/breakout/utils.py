"""
Small helpers shared by the engine and the environment
"""

from __future__ import annotations
import random
from typing import Optional
import numpy as np


def clamp(x, lo, hi):
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def sign(x) -> int:
    """-1, 0 or 1 depending on the sign of x"""
    return (x > 0) - (x < 0)


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)
