from wagersim.simulation.lookup.statistic import LookupStatistic
from wagersim.simulation.lookup.filter import LookupFilter
from wagersim.simulation.lookup.side import LookupSide
from wagersim.simulation.lookup.lookup import Lookup

__all__ = ["LookupStatistic", "LookupFilter", "LookupSide", "Lookup"]
