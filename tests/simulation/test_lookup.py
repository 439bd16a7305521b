#!filepath: tests/simulation/test_lookup.py
from __future__ import annotations

from wagersim.simulation.core.record import Mode, Winner
from wagersim.simulation.engine import Simulation
from wagersim.simulation.lookup import Lookup, LookupFilter, LookupSide, LookupStatistic
from wagersim.simulation.lookup.lookup import CharacterLookup, SumLookup


def _history(make_record):
    return [
        make_record("a", "b", winner=Winner.LEFT),
        make_record("a", "c", winner=Winner.RIGHT),
        make_record("b", "a", winner=Winner.RIGHT),
        make_record("c", "b", winner=Winner.LEFT),
    ]


def test_sum_yields_matchmaking_pool(no_shuffle):
    sim = Simulation(rng=no_shuffle)
    sim.sum = 321.0

    assert SumLookup().calculate(sim, "A", "a", "b") == 321.0


def test_sum_yields_tournament_pool_inside_tournament(make_record, no_shuffle):
    sim = Simulation(rng=no_shuffle)
    sim.calculate(make_record("a", "b", mode=Mode.TOURNAMENT))

    assert sim.in_tournament
    assert SumLookup().calculate(sim, "A", "a", "b") == sim.tournament_sum == 1000.0


def test_character_all_uses_full_history(make_record, no_shuffle):
    sim = Simulation(rng=no_shuffle)
    sim.insert_records(_history(make_record))

    lookup = CharacterLookup(LookupSide.LEFT, LookupFilter.ALL, LookupStatistic.WINRATE)

    # a: won vs b, lost vs c, won vs b
    assert lookup.calculate(sim, "A", "a", "b") == 2 / 3


def test_character_specific_is_head_to_head(make_record, no_shuffle):
    sim = Simulation(rng=no_shuffle)
    sim.insert_records(_history(make_record))

    lookup = CharacterLookup(LookupSide.LEFT, LookupFilter.SPECIFIC, LookupStatistic.WINRATE)

    assert lookup.calculate(sim, "A", "a", "b") == 1.0
    assert lookup.calculate(sim, "A", "a", "c") == 0.0


def test_character_right_side_targets_right_name(make_record, no_shuffle):
    sim = Simulation(rng=no_shuffle)
    sim.insert_records(_history(make_record))

    lookup = CharacterLookup(LookupSide.RIGHT, LookupFilter.ALL, LookupStatistic.MATCHES_LEN)

    assert lookup.calculate(sim, "A", "a", "c") == 2.0
    assert lookup.calculate(sim, "A", "c", "b") == 3.0


def test_unknown_competitor_gets_defaults(no_shuffle):
    sim = Simulation(rng=no_shuffle)

    winrate = CharacterLookup(LookupSide.LEFT, LookupFilter.ALL, LookupStatistic.WINRATE)
    earnings = CharacterLookup(LookupSide.LEFT, LookupFilter.SPECIFIC, LookupStatistic.EARNINGS)

    assert winrate.calculate(sim, "A", "ghost", "b") == 0.5
    assert earnings.calculate(sim, "A", "ghost", "b") == 0.0


def test_calculate_does_not_mutate_simulation(make_record, no_shuffle):
    sim = Simulation(rng=no_shuffle)
    sim.insert_records(_history(make_record))
    before = sim.result()

    for stat in LookupStatistic:
        CharacterLookup(LookupSide.LEFT, LookupFilter.ALL, stat).calculate(sim, "A", "a", "b")

    assert sim.result() == before


def test_uses_names_and_optimize_hooks():
    lookup = CharacterLookup(LookupSide.LEFT, LookupFilter.ALL, LookupStatistic.ODDS)

    assert lookup.uses_names
    assert lookup.optimize() is lookup
    assert not SumLookup().uses_names


def test_lookup_is_value_type():
    a = CharacterLookup(LookupSide.LEFT, LookupFilter.ALL, LookupStatistic.ODDS)
    b = CharacterLookup(LookupSide.LEFT, LookupFilter.ALL, LookupStatistic.ODDS)

    assert a == b
    assert SumLookup() == SumLookup()
    assert isinstance(a, Lookup)
