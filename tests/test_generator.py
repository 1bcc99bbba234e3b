import random
import string

import pytest

from fauxgen.generator import MAX_INT, MIN_INT, Generator


class FixedSource:
    def __init__(self, range_value=0, bits_value=0):
        self.range_value = range_value
        self.bits_value = bits_value

    def randrange(self, stop):
        return self.range_value

    def getrandbits(self, k):
        return self.bits_value


@pytest.fixture
def gen():
    return Generator(random.Random(1234))


def test_seeded_generators_agree():
    first = Generator(random.Random(0))
    second = Generator(random.Random(0))
    assert [first.int_between(0, 1000) for _ in range(20)] == [
        second.int_between(0, 1000) for _ in range(20)
    ]


def test_random_digit(gen):
    for _ in range(100):
        assert 0 <= gen.random_digit() < 10


def test_random_digit_fixed():
    assert Generator(FixedSource(bits_value=123)).random_digit() == 3


def test_random_digit_not(gen):
    allowed = {0, 2, 3, 4, 5, 6, 7, 8, 9}
    for _ in range(100):
        assert gen.random_digit_not(1) in allowed


def test_random_digit_not_all_excluded(gen):
    with pytest.raises(ValueError):
        gen.random_digit_not(*range(10))


def test_random_digit_not_null(gen):
    for _ in range(100):
        value = gen.random_digit_not_null()
        assert 0 < value <= 9


def test_random_number(gen):
    for _ in range(50):
        assert 1000 <= gen.random_number(4) <= 9999


def test_random_number_single_digit(gen):
    assert 0 <= gen.random_number(1) <= 9


def test_int(gen):
    value = gen.int()
    assert 0 <= value < MAX_INT


def test_int64(gen):
    assert MIN_INT <= gen.int64() <= MAX_INT


def test_int32(gen):
    assert -(2**31) <= gen.int32() < 2**31


def test_int8_and_int16(gen):
    assert -128 <= gen.int8() <= 127
    assert -(2**15) <= gen.int16() < 2**15


def test_int_between(gen):
    for _ in range(100):
        assert 1 <= gen.int_between(1, 100) <= 100


def test_int_between_negative_values(gen):
    for _ in range(100):
        assert -100 <= gen.int_between(-100, -50) <= -50


def test_int_between_with_max_values(gen):
    value = gen.int_between(MIN_INT, MAX_INT)
    assert MIN_INT <= value <= MAX_INT


def test_int_between_with_invalid_interval(gen):
    value = gen.int_between(100, 50)
    assert 50 <= value <= 100


def test_int_between_equal_bounds(gen):
    assert gen.int_between(7, 7) == 7


def test_int_between_can_generate_first_element(gen):
    assert any(gen.int_between(0, 1) == 0 for _ in range(100))


def test_int_between_can_generate_last_element(gen):
    assert any(gen.int_between(0, 1) == 1 for _ in range(100))


def test_int32_between_and_int64_between(gen):
    assert -5 <= gen.int32_between(-5, 5) <= 5
    assert 10 <= gen.int64_between(10, 20) <= 20


def test_uint(gen):
    assert 0 <= gen.uint() < MAX_INT


def test_uint_fixed():
    assert Generator(FixedSource(range_value=42)).uint() == 42


@pytest.mark.parametrize(
    "method, bits", [("uint8", 8), ("uint16", 16), ("uint32", 32), ("uint64", 64)]
)
def test_unsigned_widths(gen, method, bits):
    value = getattr(gen, method)()
    assert 0 <= value < 2**bits


@pytest.mark.parametrize("method", ["random_float", "float", "float32", "float64"])
def test_random_float(gen, method):
    for _ in range(50):
        value = getattr(gen, method)(1, 1, 100)
        assert 1 <= value <= 100


def test_random_float_fixed():
    value = Generator(FixedSource(range_value=0)).random_float(1, 5, 10)
    assert value == pytest.approx(5.1)


def test_letter(gen):
    value = gen.letter()
    assert len(value) == 1
    assert value in string.ascii_lowercase


def test_random_letter(gen):
    value = gen.random_letter()
    assert len(value) == 1
    assert value in string.ascii_lowercase


def test_random_string_with_length(gen):
    length = gen.int_between(97, 1000)
    value = gen.random_string_with_length(length)
    assert len(value) == length
    assert set(value) <= set(string.ascii_lowercase)


def test_random_string_element(gen):
    elements = ["a", "b", "c"]
    assert gen.random_string_element(elements) in elements


def test_random_string_element_empty(gen):
    with pytest.raises(IndexError):
        gen.random_string_element([])


def test_random_int_element(gen):
    elements = list(range(10))
    assert gen.random_int_element(elements) in elements


def test_shuffle_string(gen):
    orig = "foo bar"
    returned = gen.shuffle_string(orig)
    assert len(returned) == len(orig)
    assert all(char in orig for char in returned)
    assert returned == "rab oof"


def test_numerify(gen):
    value = gen.numerify("Hello ##?#")
    assert len(value) == 10
    assert "Hello" in value
    assert "?" in value
    assert "#" not in value


def test_lexify(gen):
    value = gen.lexify("Hello ??#?")
    assert len(value) == 10
    assert "Hello" in value
    assert "#" in value
    assert "?" not in value


def test_bothify(gen):
    value = gen.bothify("Hello ??#?")
    assert len(value) == 10
    assert "Hello" in value
    assert "#" not in value
    assert "?" not in value


def test_asciify(gen):
    value = gen.asciify("Hello ??#?****")
    assert len(value) == 14
    assert "Hello" in value
    assert "#" in value
    assert "?" in value
    assert "*" not in value
    assert all("a" <= char <= "~" for char in value[-4:])


def test_random_string_map_key(gen):
    mapping = {"k0": "v0", "k1": "v1"}
    assert gen.random_string_map_key(mapping) in ("k0", "k1")


def test_random_string_map_value(gen):
    mapping = {"k0": "v0", "k1": "v1"}
    assert gen.random_string_map_value(mapping) in ("v0", "v1")