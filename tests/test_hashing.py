import random
import string

import pytest

from fauxgen.generator import Generator
from fauxgen.hashing import Hash

HEX = set(string.digits + "abcdef")


@pytest.fixture
def hasher():
    return Hash(Generator(random.Random(0)))


def test_sha256(hasher):
    value = hasher.sha256()
    assert len(value) == 64
    assert set(value) <= HEX


def test_sha512(hasher):
    value = hasher.sha512()
    assert len(value) == 128
    assert set(value) <= HEX


def test_md5(hasher):
    value = hasher.md5()
    assert len(value) == 32
    assert set(value) <= HEX


def test_same_seed_gives_same_digest():
    first = Hash(Generator(random.Random(7)))
    second = Hash(Generator(random.Random(7)))
    assert first.sha256() == second.sha256()
    assert first.md5() == second.md5()