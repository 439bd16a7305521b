# wagersim/simulation/lookup/statistic.py
from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable

from wagersim.simulation.core.numeric import ratio
from wagersim.simulation.core.record import Record, Winner
from wagersim.simulation.genetic import EnumGene


def iterate_percentage(
    records: Iterable[Record],
    default: float,
    matches: Callable[[Record], bool],
) -> float:
    """
    fraction of records satisfying `matches`, `default` when empty
    """
    hits = 0.0
    n = 0.0

    for record in records:
        n += 1.0
        if matches(record):
            hits += 1.0

    if n == 0.0:
        return default

    return hits / n


# 注意：upsets / favored 用下注池比例近似 underdog / favorite，公式保持原样
def upsets(records: Iterable[Record], name: str) -> float:
    return iterate_percentage(records, 0.0, lambda r: (
        (r.left.name == name and ratio(r.right.bet_amount, r.left.bet_amount) > 1.0)
        or
        (r.right.name == name and ratio(r.left.bet_amount, r.right.bet_amount) > 1.0)
    ))


def favored(records: Iterable[Record], name: str) -> float:
    return iterate_percentage(records, 0.0, lambda r: (
        (r.left.name == name and ratio(r.left.bet_amount, r.right.bet_amount) > 1.0)
        or
        (r.right.name == name and ratio(r.right.bet_amount, r.left.bet_amount) > 1.0)
    ))


def winrate(records: Iterable[Record], name: str) -> float:
    return iterate_percentage(records, 0.5, lambda r: r.is_winner(name))


def bet_amount(records: Iterable[Record], name: str) -> float:
    total = 0.0
    n = 0.0

    for r in records:
        n += 1.0
        if r.left.name == name:
            total += r.left.bet_amount
        else:
            total += r.right.bet_amount

    if n == 0.0:
        return 0.0

    return total / n


def duration(records: Iterable[Record]) -> float:
    total = 0.0
    n = 0.0

    for r in records:
        n += 1.0
        total += float(r.duration)

    if n == 0.0:
        return 0.0

    return total / n


def odds(records: Iterable[Record], name: str) -> float:
    total = 0.0
    n = 0.0

    for r in records:
        n += 1.0
        if r.left.name == name:
            total += ratio(r.right.bet_amount, r.left.bet_amount)
        else:
            total += ratio(r.left.bet_amount, r.right.bet_amount)

    if n == 0.0:
        return 0.0

    return total / n


def earnings(records: Iterable[Record], name: str) -> float:
    """
    flat 1-unit bet on `name` every match:
      win  -> + opponent pool / own pool
      loss -> - 1
    summed, not averaged
    """
    total = 0.0

    for r in records:
        if r.winner is Winner.LEFT:
            if r.left.name == name:
                total += ratio(r.right.bet_amount, r.left.bet_amount)
            else:
                total -= 1.0
        else:
            if r.right.name == name:
                total += ratio(r.left.bet_amount, r.right.bet_amount)
            else:
                total -= 1.0

    return total


def matches_len(records: Iterable[Record]) -> float:
    n = 0.0
    for _ in records:
        n += 1.0
    return n


class LookupStatistic(EnumGene, Enum):
    UPSETS = "upsets"
    FAVORED = "favored"
    WINRATE = "winrate"
    ODDS = "odds"
    EARNINGS = "earnings"
    MATCHES_LEN = "matches_len"
    BET_AMOUNT = "bet_amount"
    DURATION = "duration"

    def lookup(self, name: str, records: Iterable[Record]) -> float:
        if self is LookupStatistic.DURATION:
            return duration(records)
        if self is LookupStatistic.MATCHES_LEN:
            return matches_len(records)
        return _BY_NAME[self](records, name)


_BY_NAME = {
    LookupStatistic.UPSETS: upsets,
    LookupStatistic.FAVORED: favored,
    LookupStatistic.WINRATE: winrate,
    LookupStatistic.ODDS: odds,
    LookupStatistic.EARNINGS: earnings,
    LookupStatistic.BET_AMOUNT: bet_amount,
}
