# wagersim/simulation/strategy/builtin.py
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from wagersim.simulation.core.bet import Bet
from wagersim.simulation.core.record import Tier
from wagersim.simulation.genetic import Gene, Genetics, RandomSource, choose2, default_random, resolve
from wagersim.simulation.lookup.lookup import Lookup
from wagersim.simulation.strategy.base import Strategy

if TYPE_CHECKING:
    from wagersim.simulation.engine import Simulation


class NoBetStrategy(Strategy):
    """
    永远不下注（floored 时由 Simulation 强制 all-in）
    """

    def bet(self, simulation: "Simulation", tier: Tier, left: str, right: str) -> Bet:
        return Bet.none()


class RandomStrategy(Strategy):
    """
    随机一侧，固定金额
    """

    def __init__(self, amount: float = 1.0, rng: Optional[RandomSource] = None) -> None:
        self._amount = float(amount)
        self._rng = rng or default_random

    def bet(self, simulation: "Simulation", tier: Tier, left: str, right: str) -> Bet:
        if self._rng.coin():
            return Bet.left(self._amount)
        return Bet.right(self._amount)


class LookupStrategy(Strategy, Gene):
    """
    LookupStrategy (VALID)

    规则：
      - 对 left / right 分别计算同一个 Lookup
      - 押值更大的一侧，金额 = 激活资金池 × fraction
      - 相等（包括 Sum 这类与选手无关的 Lookup）不下注
    """

    MIN_FRACTION = 0.01

    def __init__(self, lookup: Lookup, fraction: float = 0.1) -> None:
        if not isinstance(lookup, Lookup):
            raise TypeError(f"[LookupStrategy] lookup must be a Lookup, got {type(lookup).__name__}")

        self.lookup = lookup.optimize()
        self.fraction = float(fraction)

    def __eq__(self, other) -> bool:
        if not isinstance(other, LookupStrategy):
            return NotImplemented
        return self.lookup == other.lookup and self.fraction == other.fraction

    def __repr__(self) -> str:
        return f"LookupStrategy(lookup={self.lookup!r}, fraction={self.fraction})"

    def bet(self, simulation: "Simulation", tier: Tier, left: str, right: str) -> Bet:
        # 与名字无关的 Lookup 两侧必然相等
        if not self.lookup.uses_names:
            return Bet.none()

        # side=RIGHT 时比较方向相反（contrarian）
        value = self.lookup.calculate(simulation, tier, left, right)
        mirrored = self.lookup.calculate(simulation, tier, right, left)

        amount = simulation.active_sum * self.fraction

        if value > mirrored:
            return Bet.left(amount)

        if mirrored > value:
            return Bet.right(amount)

        return Bet.none()

    # --------------------------------------------------
    # Gene
    # --------------------------------------------------
    @classmethod
    def new(cls, genetics: Optional[Genetics] = None) -> "LookupStrategy":
        g = resolve(genetics)
        return cls(Lookup.new(g), g.rng.uniform(cls.MIN_FRACTION, 1.0))

    def choose(self, other: "LookupStrategy", genetics: Optional[Genetics] = None) -> "LookupStrategy":
        g = resolve(genetics)

        # random mutation
        if g.mutate():
            return LookupStrategy.new(g)

        return LookupStrategy(
            self.lookup.choose(other.lookup, g),
            choose2(self.fraction, other.fraction, g.rng),
        )
