# tests/conftest.py
from __future__ import annotations

from typing import Iterable, List

import pytest
from loguru import logger

from wagersim.simulation.core.record import Character, Mode, Record, Winner
from wagersim.simulation.genetic import Genetics, RandomSource


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield


class ScriptedRandom(RandomSource):
    """
    RandomSource with scripted answers (testing only).

    coins   : consumed by coin(); falls back to `default_coin`
    indexes : consumed by gen_rand_index(); falls back to 0
    percent : consumed by rand_is_percent(); falls back to False
    """

    def __init__(
        self,
        coins: Iterable[bool] = (),
        indexes: Iterable[int] = (),
        percent: Iterable[bool] = (),
        default_coin: bool = False,
    ) -> None:
        super().__init__(0)
        self.coins: List[bool] = list(coins)
        self.indexes: List[int] = list(indexes)
        self.percent: List[bool] = list(percent)
        self.default_coin = default_coin

    def coin(self) -> bool:
        if self.coins:
            return self.coins.pop(0)
        return self.default_coin

    def gen_rand_index(self, n: int) -> int:
        if self.indexes:
            return self.indexes.pop(0) % n
        return 0

    def rand_is_percent(self, percent: float) -> bool:
        if self.percent:
            return self.percent.pop(0)
        return False


@pytest.fixture
def scripted_random():
    return ScriptedRandom


@pytest.fixture
def no_shuffle():
    """
    coin() 永远 False：record 不交换，强制下注押 RIGHT
    """
    return ScriptedRandom(default_coin=False)


@pytest.fixture
def genetics() -> Genetics:
    return Genetics(rng=RandomSource(1234), mutation_rate=0.05)


@pytest.fixture
def make_record():
    """
    Factory fixture for Record.

    Usage:
        r = make_record("a", "b")                       # a wins
        r = make_record("a", "b", winner=Winner.RIGHT, left_pool=100, right_pool=200)
    """

    def _make(
        left: str = "left",
        right: str = "right",
        *,
        winner: Winner = Winner.LEFT,
        left_pool: float = 100.0,
        right_pool: float = 100.0,
        mode: Mode = Mode.MATCHMAKING,
        tier: str = "A",
        duration: float = 60.0,
    ) -> Record:
        return Record(
            left=Character(left, left_pool),
            right=Character(right, right_pool),
            winner=winner,
            tier=tier,
            mode=mode,
            duration=duration,
        )

    return _make
