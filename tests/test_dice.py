"""Tests for snakes_ladders.dice."""

import random

import pytest

from snakes_ladders.dice import Dice, default_rng
from snakes_ladders.errors import ConfigurationError


def test_rolls_stay_in_range():
    dice = Dice(6, random.Random(1))
    rolls = [dice.roll() for _ in range(600)]
    assert min(rolls) == 1
    assert max(rolls) == 6


def test_every_face_shows_up():
    dice = Dice(4, random.Random(7))
    assert {dice.roll() for _ in range(400)} == {1, 2, 3, 4}


def test_single_face():
    dice = Dice(1)
    assert [dice.roll() for _ in range(5)] == [1] * 5


def test_zero_faces_rejected():
    with pytest.raises(ConfigurationError):
        Dice(0)


def test_same_seed_same_rolls():
    a = Dice(6, random.Random(42))
    b = Dice(6, random.Random(42))
    assert [a.roll() for _ in range(20)] == [b.roll() for _ in range(20)]


def test_default_generator_is_shared():
    """Dice built back to back draw from one generator, not fresh reseeds."""
    assert Dice().rng is default_rng()
    assert Dice().rng is Dice().rng
