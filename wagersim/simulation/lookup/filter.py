# wagersim/simulation/lookup/filter.py
from __future__ import annotations

from enum import Enum
from typing import Sequence

from wagersim.simulation.core.record import Record
from wagersim.simulation.genetic import EnumGene
from wagersim.simulation.lookup.statistic import LookupStatistic


class LookupFilter(EnumGene, Enum):
    """
    ALL      : name 的全部历史
    SPECIFIC : 只保留 other 出现过的比赛（head-to-head）
    """

    ALL = "all"
    SPECIFIC = "specific"

    def lookup(
        self,
        stat: LookupStatistic,
        name: str,
        other: str,
        matches: Sequence[Record],
    ) -> float:
        if self is LookupFilter.ALL:
            return stat.lookup(name, matches)

        return stat.lookup(name, (
            r for r in matches
            if r.left.name == other or r.right.name == other
        ))
