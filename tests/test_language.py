import random

import pytest

from fauxgen.generator import Generator
from fauxgen.language import (
    LANGUAGE_ABBREVIATIONS,
    LANGUAGES,
    PROGRAMMING_LANGUAGES,
    Language,
)

SEEDS = range(10)


def _language(seed):
    return Language(Generator(random.Random(seed)))


@pytest.mark.parametrize("seed", SEEDS)
def test_language(seed):
    value = _language(seed).language()
    assert value != ""
    assert value in LANGUAGES


@pytest.mark.parametrize("seed", SEEDS)
def test_language_abbr(seed):
    value = _language(seed).language_abbr()
    assert len(value) == 2
    assert value in LANGUAGE_ABBREVIATIONS


@pytest.mark.parametrize("seed", SEEDS)
def test_programming_language(seed):
    value = _language(seed).programming_language()
    assert value != ""
    assert value in PROGRAMMING_LANGUAGES


def test_same_seed_gives_same_values():
    first = _language(42)
    second = _language(42)
    assert [first.language() for _ in range(5)] == [
        second.language() for _ in range(5)
    ]