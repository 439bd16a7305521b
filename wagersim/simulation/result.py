# wagersim/simulation/result.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SimulationResult:
    """
    SimulationResult (FINAL / FROZEN)

    一次 replay 结束后的不可变计数快照，供外部 GA 驱动打分
    """

    sum: float
    tournament_sum: float
    in_tournament: bool

    successes: int
    failures: int

    record_len: int
    max_character_len: int
    n_characters: int

    @property
    def bets(self) -> int:
        return self.successes + self.failures

    @property
    def accuracy(self) -> float:
        if self.bets == 0:
            return 0.0
        return self.successes / self.bets
