"""
Tests for the random source used by every game component.
"""

import pytest
from core.dice import RandomSource, ScriptedRandomSource


def test_same_seed_replays_the_same_rolls():
    first = RandomSource(1234)
    second = RandomSource(1234)
    assert [first.roll(20) for _ in range(50)] == [second.roll(20) for _ in range(50)]


def test_seed_is_recorded():
    assert RandomSource(7).seed == 7
    assert RandomSource().seed is None


def test_roll_stays_within_the_die():
    dice = RandomSource(99)
    results = {dice.roll(6) for _ in range(2000)}
    assert results == {1, 2, 3, 4, 5, 6}


@pytest.mark.parametrize("sides", [1, 0, -5])
def test_degenerate_die_always_rolls_one(sides):
    dice = ScriptedRandomSource([])
    assert dice.roll(sides) == 1
    # No scripted value is consumed by a degenerate die.
    assert dice.remaining == 0


def test_chance_is_inclusive():
    dice = ScriptedRandomSource([40, 41])
    assert dice.chance(40)
    assert not dice.chance(40)


def test_chance_frequency():
    dice = RandomSource(2024)
    trials = 50_000
    hits = sum(dice.chance(25) for _ in range(trials))
    assert abs(hits / trials - 0.25) < 0.01


def test_scripted_source_replays_in_order():
    dice = ScriptedRandomSource([3, 17])
    dice.push(100)
    assert dice.remaining == 3
    assert dice.roll(6) == 3
    assert dice.roll(20) == 17
    assert dice.roll(100) == 100
    assert dice.remaining == 0


def test_scripted_source_exhausted():
    dice = ScriptedRandomSource([])
    with pytest.raises(IndexError):
        dice.roll(20)


def test_scripted_source_rejects_impossible_roll():
    dice = ScriptedRandomSource([21])
    with pytest.raises(ValueError):
        dice.roll(20)
