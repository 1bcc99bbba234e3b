import random

import pytest

from fauxgen.boolean import Boolean
from fauxgen.generator import Generator


class FixedSource:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        return self.value

    def getrandbits(self, k):
        return self.value


@pytest.fixture
def boolean():
    return Boolean(Generator(random.Random(7)))


def fixed(value):
    return Boolean(Generator(FixedSource(value)))


def test_bool_threshold():
    assert fixed(51).bool() is True
    assert fixed(50).bool() is False


def test_bool_produces_both_values(boolean):
    values = {boolean.bool() for _ in range(200)}
    assert values == {True, False}


def test_bool_with_chance_limits(boolean):
    assert boolean.bool_with_chance(100) is True
    assert boolean.bool_with_chance(0) is False
    assert boolean.bool_with_chance(101) is True
    assert boolean.bool_with_chance(-1) is False


def test_bool_with_chance_threshold():
    assert fixed(29).bool_with_chance(30) is True
    assert fixed(30).bool_with_chance(30) is False


def test_bool_int(boolean):
    assert boolean.bool_int() in (0, 1)


def test_bool_int_fixed():
    assert fixed(1).bool_int() == 1


def test_bool_string(boolean):
    assert boolean.bool_string("yes", "no") in ("yes", "no")


def test_bool_string_fixed():
    assert fixed(0).bool_string("yes", "no") == "yes"
    assert fixed(1).bool_string("yes", "no") == "no"