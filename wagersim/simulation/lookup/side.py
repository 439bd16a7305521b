# wagersim/simulation/lookup/side.py
from __future__ import annotations

from enum import Enum
from typing import Tuple

from wagersim.simulation.genetic import EnumGene


class LookupSide(EnumGene, Enum):
    LEFT = "left"
    RIGHT = "right"

    def resolve(self, left: str, right: str) -> Tuple[str, str]:
        """
        -> (target, other)
        """
        if self is LookupSide.LEFT:
            return left, right
        return right, left
