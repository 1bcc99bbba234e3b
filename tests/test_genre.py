import random

import pytest

from fauxgen.generator import Generator
from fauxgen.genre import GENRES, Genre


@pytest.fixture
def genre():
    return Genre(Generator(random.Random(0)))


def test_name_is_known(genre):
    value = genre.name()
    assert value != ""
    assert value in GENRES


def test_name_with_description(genre):
    name, description = genre.name_with_description()
    assert name != ""
    assert description != ""
    assert GENRES[name] == description


def test_names_are_reproducible_with_same_seed():
    first = Genre(Generator(random.Random(42)))
    second = Genre(Generator(random.Random(42)))
    assert [first.name() for _ in range(20)] == [second.name() for _ in range(20)]


def test_all_descriptions_present():
    assert all(description for description in GENRES.values())
    assert GENRES["Agender"] == "the feeling of no gender/absence of gender or neutral gender."