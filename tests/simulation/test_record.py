#!filepath: tests/simulation/test_record.py
from __future__ import annotations

import dataclasses

import pytest

from wagersim.simulation.core.bet import Bet
from wagersim.simulation.core.record import Winner


def test_record_is_frozen(make_record):
    r = make_record("a", "b")

    with pytest.raises(dataclasses.FrozenInstanceError):
        r.winner = Winner.RIGHT


def test_is_winner_by_name(make_record):
    r = make_record("a", "b", winner=Winner.RIGHT)

    assert r.is_winner("b")
    assert not r.is_winner("a")
    assert not r.is_winner("nobody")


def test_shuffle_swaps_sides_and_winner(make_record, scripted_random):
    r = make_record("a", "b", winner=Winner.LEFT, left_pool=10, right_pool=30)

    swapped = r.shuffle(scripted_random(coins=[True]))

    assert swapped.left.name == "b"
    assert swapped.right.name == "a"
    assert swapped.left.bet_amount == 30
    assert swapped.winner is Winner.RIGHT
    # 原 record 不变
    assert r.left.name == "a"
    assert r.winner is Winner.LEFT
    assert swapped.is_winner("a")


def test_shuffle_keeps_record_on_tails(make_record, scripted_random):
    r = make_record("a", "b")

    assert r.shuffle(scripted_random(coins=[False])) is r


def test_mirror(make_record):
    assert make_record("x", "x").is_mirror
    assert not make_record("x", "y").is_mirror


def test_bet_constructors():
    assert Bet.none().is_none
    assert Bet.left(3.5) == Bet(Winner.LEFT, 3.5)
    assert Bet.right(2).amount == 2.0
    assert Bet.left(1).with_amount(9).amount == 9.0
