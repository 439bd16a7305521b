# wagersim/simulation/calculate.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from wagersim.simulation.core.record import Tier

if TYPE_CHECKING:
    from wagersim.simulation.engine import Simulation


class Calculate(ABC):
    """
    (Simulation, tier, left, right) -> float
    """

    @abstractmethod
    def calculate(self, simulation: "Simulation", tier: Tier, left: str, right: str) -> float:
        ...

    @property
    def uses_names(self) -> bool:
        """
        False: 结果与 left / right 无关（交换名字结果不变）
        """
        return True

    def optimize(self):
        return self
