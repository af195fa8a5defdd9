"""Small numeric helpers shared by the scoring functions."""
from __future__ import annotations

import math


def clamp_0_100(x: float) -> float:
    return max(0.0, min(100.0, x))


def round_half_up(x: float) -> int:
    """Round to the nearest int, .5 going up (not banker's rounding)."""
    return int(math.floor(x + 0.5))


def percentage(count: int, total: int) -> float:
    """``count / total * 100``, 0.0 when ``total`` is 0."""
    if total <= 0:
        return 0.0
    return count / total * 100.0
