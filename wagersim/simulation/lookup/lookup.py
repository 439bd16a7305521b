# wagersim/simulation/lookup/lookup.py
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from wagersim.simulation.core.record import Tier
from wagersim.simulation.genetic import Gene, Genetics, choose2, resolve
from wagersim.simulation.lookup.filter import LookupFilter
from wagersim.simulation.lookup.side import LookupSide
from wagersim.simulation.lookup.statistic import LookupStatistic
from wagersim.simulation.calculate import Calculate

if TYPE_CHECKING:
    from wagersim.simulation.engine import Simulation


class Lookup(Calculate, Gene):
    """
    Lookup gene: Sum | Character(side, filter, stat)

    Sum       -> 当前激活的资金池
    Character -> side 指定的选手历史上的 stat（filter 相对另一方）
    """

    @classmethod
    def new(cls, genetics: Optional[Genetics] = None) -> "Lookup":
        g = resolve(genetics)

        if g.rng.gen_rand_index(2) == 0:
            return SumLookup()

        return CharacterLookup(
            side=LookupSide.new(g),
            filter=LookupFilter.new(g),
            stat=LookupStatistic.new(g),
        )

    def choose(self, other: "Lookup", genetics: Optional[Genetics] = None) -> "Lookup":
        g = resolve(genetics)

        # random mutation
        if g.mutate():
            return Lookup.new(g)

        if isinstance(self, CharacterLookup) and isinstance(other, CharacterLookup):
            return CharacterLookup(
                side=self.side.choose(other.side, g),
                filter=self.filter.choose(other.filter, g),
                stat=self.stat.choose(other.stat, g),
            )

        return choose2(self, other, g.rng)


@dataclass(frozen=True)
class SumLookup(Lookup):

    @property
    def uses_names(self) -> bool:
        return False

    def calculate(self, simulation: "Simulation", tier: Tier, left: str, right: str) -> float:
        return simulation.active_sum


@dataclass(frozen=True)
class CharacterLookup(Lookup):
    side: LookupSide
    filter: LookupFilter
    stat: LookupStatistic

    def calculate(self, simulation: "Simulation", tier: Tier, left: str, right: str) -> float:
        name, other = self.side.resolve(left, right)
        return self.filter.lookup(self.stat, name, other, simulation.matches_for(name))
