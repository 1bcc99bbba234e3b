"""Core random value generator shared by every fake-data provider."""

from __future__ import annotations

import math
import random
import struct
from collections.abc import Mapping, Sequence
from typing import Protocol, TypeVar

MAX_INT = 2**63 - 1
MIN_INT = -MAX_INT - 1

_T = TypeVar("_T")


class RandomSource(Protocol):
    """The two primitives a generator draws its randomness from."""

    def randrange(self, stop: int) -> int: ...

    def getrandbits(self, k: int) -> int: ...


def _wrap(value: int, bits: int, signed: bool) -> int:
    """Truncate an integer to a fixed width, as a machine integer would."""
    value &= (1 << bits) - 1
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _to_float32(value: float) -> float:
    """Round a float to the nearest single-precision value."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


class Generator:
    """Produces random primitive values: digits, numbers, letters and patterns."""

    def __init__(self, rng: RandomSource | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def _intn(self, n: int) -> int:
        return self.rng.randrange(n)

    def _next_int(self) -> int:
        return self.rng.getrandbits(63)

    def random_digit(self) -> int:
        """Return a digit from 0 to 9."""
        return self._next_int() % 10

    def random_digit_not(self, *args: int) -> int:
        """Return a digit from 0 to 9 that is not among the given ones."""
        ignored = set(args)
        if ignored.issuperset(range(10)):
            raise ValueError("every digit is excluded")
        while True:
            digit = self.random_digit()
            if digit not in ignored:
                return digit

    def random_digit_not_null(self) -> int:
        """Return a digit from 1 to 8."""
        return self._next_int() % 8 + 1

    def random_number(self, size: int) -> int:
        """Return a number with exactly ``size`` digits."""
        if size == 1:
            return self.random_digit()
        if size < 1:
            return 0
        return self.int_between(10 ** (size - 1), 10**size - 1)

    def _decimal(self, max_decimals: int, minimum: int, maximum: int) -> float:
        whole = self.int_between(minimum, maximum - 1)
        fraction = self.int_between(1, max_decimals)
        return _to_float32(float(f"{whole}.{fraction}"))

    def random_float(self, max_decimals: int, minimum: int, maximum: int) -> float:
        """Return a float whose integer part lies in [minimum, maximum)."""
        return self._decimal(max_decimals, minimum, maximum)

    def float(self, max_decimals: int, minimum: int, maximum: int) -> float:
        """Same as :meth:`random_float`."""
        return self._decimal(max_decimals, minimum, maximum)

    def float32(self, max_decimals: int, minimum: int, maximum: int) -> float:
        """Same as :meth:`random_float`, with single precision."""
        return self._decimal(max_decimals, minimum, maximum)

    def float64(self, max_decimals: int, minimum: int, maximum: int) -> float:
        """Same as :meth:`random_float`."""
        return self._decimal(max_decimals, minimum, maximum)

    def int(self) -> int:
        """Return a non-negative 64-bit integer."""
        return self.int_between(0, MAX_INT - 1)

    def int8(self) -> int:
        return _wrap(self.int(), 8, signed=True)

    def int16(self) -> int:
        return _wrap(self.int(), 16, signed=True)

    def int32(self) -> int:
        return _wrap(self.int(), 32, signed=True)

    def int64(self) -> int:
        return _wrap(self.int(), 64, signed=True)

    def uint(self) -> int:
        """Return a non-negative integer below the largest signed 64-bit value."""
        return self.int_between(0, MAX_INT)

    def uint8(self) -> int:
        return _wrap(self.int(), 8, signed=False)

    def uint16(self) -> int:
        return _wrap(self.int(), 16, signed=False)

    def uint32(self) -> int:
        return _wrap(self.int(), 32, signed=False)

    def uint64(self) -> int:
        return _wrap(self.int(), 64, signed=False)

    def int_between(self, minimum: int, maximum: int) -> int:
        """Return an integer in [minimum, maximum]; ``minimum`` if the range is empty."""
        diff = maximum - minimum
        if diff <= 0:
            return minimum
        if diff == MAX_INT:
            return self._intn(diff)
        return self._intn(diff + 1) + minimum

    def int64_between(self, minimum: int, maximum: int) -> int:
        return _wrap(self.int_between(minimum, maximum), 64, signed=True)

    def int32_between(self, minimum: int, maximum: int) -> int:
        return _wrap(self.int_between(minimum, maximum), 32, signed=True)

    def letter(self) -> str:
        """Return a single lower-case ASCII letter."""
        return self.random_letter()

    def random_letter(self) -> str:
        """Return a single lower-case ASCII letter."""
        return chr(self.int_between(ord("a"), ord("z")))

    def random_string_with_length(self, length: int) -> str:
        """Return ``length`` random lower-case letters."""
        return "".join(self.random_letter() for _ in range(length))

    def _pick(self, elements: Sequence[_T]) -> _T:
        if not elements:
            raise IndexError("cannot pick from an empty sequence")
        return elements[self.int_between(0, len(elements) - 1)]

    def random_string_element(self, elements: Sequence[str]) -> str:
        """Return one element of a sequence of strings."""
        return self._pick(elements)

    def random_string_map_key(self, mapping: Mapping[str, str]) -> str:
        """Return one key of a mapping."""
        return self._pick(list(mapping))

    def random_string_map_value(self, mapping: Mapping[str, str]) -> str:
        """Return one value of a mapping."""
        return self._pick(list(mapping.values()))

    def random_int_element(self, elements: Sequence[int]) -> int:
        """Return one element of a sequence of integers."""
        return self._pick(elements)

    def shuffle_string(self, text: str) -> str:
        """Return the characters of ``text`` in reverse order."""
        return text[::-1]

    def _replace_each(self, text: str, marker: str, make) -> str:
        return "".join(make() if char == marker else char for char in text)

    def numerify(self, text: str) -> str:
        """Replace every ``#`` with a random digit."""
        return self._replace_each(text, "#", lambda: str(self.random_digit()))

    def lexify(self, text: str) -> str:
        """Replace every ``?`` with a random letter."""
        return self._replace_each(text, "?", self.random_letter)

    def bothify(self, text: str) -> str:
        """Apply :meth:`lexify` and then :meth:`numerify`."""
        return self.numerify(self.lexify(text))

    def asciify(self, text: str) -> str:
        """Replace every ``*`` with a character from ``a`` to ``~``."""
        return self._replace_each(
            text, "*", lambda: chr(self.int_between(ord("a"), ord("~")))
        )