# wagersim/simulation/strategy/factory.py
from __future__ import annotations

from typing import Any, Callable, Dict, Literal, Optional

from pydantic import BaseModel

from wagersim.config.simulation_config import GeneticConfig
from wagersim.simulation.genetic import Genetics, RandomSource, default_genetics
from wagersim.simulation.lookup import Lookup, LookupFilter, LookupSide, LookupStatistic
from wagersim.simulation.lookup.lookup import CharacterLookup, SumLookup
from wagersim.simulation.strategy.base import Strategy
from wagersim.simulation.strategy.builtin import LookupStrategy, NoBetStrategy, RandomStrategy
from wagersim.utils.errors import UnknownStrategyError


class LookupSpec(BaseModel):
    """
    Lookup gene 的声明式写法：
      {"kind": "sum"}
      {"kind": "character", "side": "left", "filter": "specific", "stat": "earnings"}
    """

    kind: Literal["sum", "character"] = "character"
    side: LookupSide = LookupSide.LEFT
    filter: LookupFilter = LookupFilter.ALL
    stat: LookupStatistic = LookupStatistic.WINRATE

    def build(self) -> Lookup:
        if self.kind == "sum":
            return SumLookup()
        return CharacterLookup(self.side, self.filter, self.stat)


def _genetics(cfg: Optional[Dict]) -> Genetics:
    if cfg is None:
        return default_genetics
    return Genetics.from_config(GeneticConfig(**cfg))


def _build_random(amount: float = 1.0, seed: Optional[int] = None) -> RandomStrategy:
    rng = None if seed is None else RandomSource(seed)
    return RandomStrategy(amount=amount, rng=rng)


def _build_lookup(
    lookup: Any = "random",
    fraction: Optional[float] = None,
    genetics: Optional[Dict] = None,
) -> LookupStrategy:
    """
    lookup:
      - "random"          -> Lookup.new()（fraction 缺省时也随机）
      - dict              -> LookupSpec
      - Lookup 实例       -> 原样使用
    """
    if isinstance(lookup, str):
        if lookup != "random":
            raise ValueError(f"[StrategyFactory] unknown lookup shorthand: {lookup}")

        g = _genetics(genetics)
        if fraction is None:
            return LookupStrategy.new(g)
        return LookupStrategy(Lookup.new(g), fraction)

    if isinstance(lookup, dict):
        lookup = LookupSpec.model_validate(lookup).build()

    return LookupStrategy(lookup, 0.1 if fraction is None else fraction)


class StrategyFactory:
    """
    StrategyFactory (FINAL / FROZEN)

    注册式 Strategy 构造器：type -> builder(**params)

    All strategies must be explicitly registered in StrategyFactory._REGISTRY.
    Adding a strategy requires a deliberate code change in the factory.
    """

    _REGISTRY: Dict[str, Callable[..., Strategy]] = {
        "no_bet": NoBetStrategy,
        "random": _build_random,
        "lookup": _build_lookup,
    }

    # --------------------------------------------------
    @classmethod
    def create(cls, cfg: Dict) -> Strategy:
        """
        cfg:
          {"type": "lookup", "lookup": {"side": "left", "stat": "odds"}, "fraction": 0.2}
          {"type": "lookup", "genetics": {"mutation_rate": 0.05, "seed": 3}}

        冻结规则：
          - cfg["type"] 必须存在
          - 未注册 type -> crash
        """
        if "type" not in cfg:
            raise KeyError("[StrategyFactory] missing 'type' in strategy config")

        typ = cfg["type"]

        if typ not in cls._REGISTRY:
            raise UnknownStrategyError(f"[StrategyFactory] unknown strategy type: {typ}")

        params = {k: v for k, v in cfg.items() if k != "type"}

        return cls._REGISTRY[typ](**params)
