#!filepath: wagersim/simulation/genetic.py
"""
Genetic primitives shared by every gene.

A gene is an evolvable value:
  - new()          : uniform random instance
  - choose(other)  : with probability `mutation_rate` discard both parents
                     and resample; otherwise crossover (gene specific)

Randomness is always explicit: operations take a `Genetics` bundle
(random source + mutation rate). When omitted, the process-wide
`default_genetics` is used; call `seed()` on it for reproducible runs.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, TypeVar

from wagersim.config.simulation_config import GeneticConfig

T = TypeVar("T")

MUTATION_RATE = 0.05


class RandomSource:
    """
    Thin wrapper over random.Random, injectable for determinism.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def seed(self, value: Optional[int]) -> None:
        self._rng.seed(value)

    def gen_rand_index(self, n: int) -> int:
        """[0, n)"""
        return self._rng.randrange(n)

    def rand_is_percent(self, percent: float) -> bool:
        return self._rng.random() < percent

    def coin(self) -> bool:
        return self._rng.random() < 0.5

    def uniform(self, low: float, high: float) -> float:
        return self._rng.uniform(low, high)


def choose2(a: T, b: T, rng: RandomSource) -> T:
    if rng.coin():
        return a
    return b


@dataclass
class Genetics:
    rng: RandomSource
    mutation_rate: float = MUTATION_RATE

    @classmethod
    def from_config(cls, cfg: GeneticConfig) -> "Genetics":
        return cls(rng=RandomSource(cfg.seed), mutation_rate=cfg.mutation_rate)

    def mutate(self) -> bool:
        return self.rng.rand_is_percent(self.mutation_rate)

    def seed(self, value: Optional[int]) -> None:
        self.rng.seed(value)


default_random = RandomSource()
default_genetics = Genetics(rng=default_random)


def resolve(genetics: Optional[Genetics]) -> Genetics:
    return default_genetics if genetics is None else genetics


class Gene:
    """
    Gene capability. Subclasses implement new() and choose().
    """

    @classmethod
    def new(cls, genetics: Optional[Genetics] = None):
        raise NotImplementedError

    def choose(self, other, genetics: Optional[Genetics] = None):
        raise NotImplementedError


class EnumGene(Gene):
    """
    Flat enumeration gene: uniform over members in declaration order,
    crossover picks one parent.

    Mix in before Enum:  class Foo(EnumGene, Enum): ...
    """

    @classmethod
    def new(cls, genetics: Optional[Genetics] = None):
        g = resolve(genetics)
        members = list(cls)
        return members[g.rng.gen_rand_index(len(members))]

    def choose(self, other, genetics: Optional[Genetics] = None):
        g = resolve(genetics)

        # random mutation
        if g.mutate():
            return type(self).new(g)

        return choose2(self, other, g.rng)
