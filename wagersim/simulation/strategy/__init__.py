from wagersim.simulation.strategy.base import Strategy
from wagersim.simulation.calculate import Calculate
from wagersim.simulation.strategy.builtin import NoBetStrategy, RandomStrategy, LookupStrategy
from wagersim.simulation.strategy.factory import StrategyFactory

__all__ = [
    "Strategy", "Calculate",
    "NoBetStrategy", "RandomStrategy", "LookupStrategy",
    "StrategyFactory",
]
