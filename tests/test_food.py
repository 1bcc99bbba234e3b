import random

import pytest

from fauxgen.food import FRUITS, VEGETABLES, Food
from fauxgen.generator import Generator


def make_food(seed=None):
    return Food(Generator(random.Random(seed)))


@pytest.mark.parametrize("seed", range(5))
def test_fruit(seed):
    value = make_food(seed).fruit()
    assert value != ""
    assert value in FRUITS


@pytest.mark.parametrize("seed", range(5))
def test_vegetable(seed):
    value = make_food(seed).vegetable()
    assert value != ""
    assert value in VEGETABLES


def test_same_seed_same_fruit():
    first = make_food(11).fruit()
    second = make_food(11).fruit()
    assert first == second
    assert first in FRUITS