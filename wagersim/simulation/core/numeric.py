# wagersim/simulation/core/numeric.py
"""
Float helpers for bankroll arithmetic.

Pools are never validated: a zero or negative pool yields inf / nan,
which propagates deterministically instead of raising.
"""
from __future__ import annotations

import numpy as np


def ratio(numerator: float, denominator: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(np.float64(numerator), np.float64(denominator)))


def round_half_away(x: float) -> float:
    # np.round 是 banker's rounding，这里需要 2.5 -> 3
    return float(np.sign(x) * np.floor(np.abs(x) + 0.5))


def ceil(x: float) -> float:
    # inf / nan 原样传播（math.ceil 会抛异常）
    return float(np.ceil(x))
