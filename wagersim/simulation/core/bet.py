# wagersim/simulation/core/bet.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from wagersim.simulation.core.record import Winner


@dataclass(frozen=True)
class Bet:
    """
    Bet: LEFT(amount) | RIGHT(amount) | NONE

    amount 在 clamp 之前可以是任意实数
    """

    side: Optional[Winner] = None
    amount: float = 0.0

    @classmethod
    def left(cls, amount: float) -> "Bet":
        return cls(Winner.LEFT, float(amount))

    @classmethod
    def right(cls, amount: float) -> "Bet":
        return cls(Winner.RIGHT, float(amount))

    @classmethod
    def none(cls) -> "Bet":
        return cls()

    @property
    def is_none(self) -> bool:
        return self.side is None

    def with_amount(self, amount: float) -> "Bet":
        return replace(self, amount=float(amount))
