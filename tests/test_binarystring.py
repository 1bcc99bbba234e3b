import random

from fauxgen.binarystring import BinaryString
from fauxgen.generator import Generator


def make():
    return BinaryString(Generator(random.Random(3)))


def test_binary_string():
    value = make().binary_string(11)
    assert len(value) == 11
    assert set(value) <= {"0", "1"}


def test_binary_string_long():
    value = make().binary_string(100)
    assert len(value) == 100
    assert set(value) == {"0", "1"}


def test_binary_string_empty():
    assert make().binary_string(0) == ""