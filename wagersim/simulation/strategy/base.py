# wagersim/simulation/strategy/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from wagersim.simulation.core.bet import Bet
from wagersim.simulation.core.record import Tier

if TYPE_CHECKING:
    from wagersim.simulation.engine import Simulation


class Strategy(ABC):
    """
    Strategy (FINAL / FROZEN)

    纯解释器：
      (Simulation, tier, left, right) -> Bet

    Simulation 只读，禁止修改；所有资金变化只经由 Simulation 结算
    """

    @abstractmethod
    def bet(self, simulation: "Simulation", tier: Tier, left: str, right: str) -> Bet:
        ...
