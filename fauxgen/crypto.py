"""Random cryptocurrency addresses."""

from __future__ import annotations

from .generator import Generator

BITCOIN_MIN = 26
BITCOIN_MAX = 35
ETH_LENGTH = 42
ETH_PREFIX = "0x"

# Characters "0", "I", "O" and "l" are not used in bitcoin addresses.
_EXCLUDED_CODES = frozenset({48, 73, 79, 108})

_DIGITS = (ord("0"), ord("9"))
_UPPER = (ord("A"), ord("Z"))
_LOWER = (ord("a"), ord("z"))


class Crypto:
    """Produces bitcoin and ethereum style addresses."""

    def __init__(self, faker: Generator) -> None:
        self.faker = faker

    def _character_range(self) -> tuple[int, int]:
        choice = self.faker.int_between(0, 2)
        if choice == 0:
            return _DIGITS
        if choice == 1:
            return _UPPER
        return _LOWER

    def _random_alnum_code(self) -> int:
        start, end = self._character_range()
        return self.faker.int_between(start, end)

    def _bitcoin_address(self, length: int, prefix: str) -> str:
        chars = []
        for _ in range(length):
            code = self._random_alnum_code()
            if code in _EXCLUDED_CODES:
                code += 1
            chars.append(chr(code))
        return prefix + "".join(chars)

    def _random_length(self) -> int:
        return self.faker.int_between(BITCOIN_MIN, BITCOIN_MAX)

    def p2pkh_address(self) -> str:
        """Return a P2PKH address, starting with ``1``."""
        return self.p2pkh_address_with_length(self._random_length())

    def p2pkh_address_with_length(self, length: int) -> str:
        """Return a P2PKH address of ``length`` characters."""
        return self._bitcoin_address(length - 1, "1")

    def p2sh_address(self) -> str:
        """Return a P2SH address, starting with ``3``."""
        return self.p2sh_address_with_length(self._random_length())

    def p2sh_address_with_length(self, length: int) -> str:
        """Return a P2SH address of ``length`` characters."""
        return self._bitcoin_address(length - 1, "3")

    def bech32_address(self) -> str:
        """Return a Bech32 address, starting with ``bc1``."""
        return self.bech32_address_with_length(self._random_length())

    def bech32_address_with_length(self, length: int) -> str:
        """Return a Bech32 address of ``length`` characters."""
        return self._bitcoin_address(length - 3, "bc1")

    def bitcoin_address(self) -> str:
        """Return a Bech32, P2SH or P2PKH address."""
        choice = self.faker.int_between(0, 2)
        if choice == 0:
            return self.bech32_address()
        if choice == 1:
            return self.p2sh_address()
        return self.p2pkh_address()

    def etherium_address(self) -> str:
        """Return a 42-character address starting with ``0x``."""
        body = "".join(
            chr(self._random_alnum_code()) for _ in range(ETH_LENGTH - len(ETH_PREFIX))
        )
        return ETH_PREFIX + body