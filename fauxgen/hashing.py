"""Random hexadecimal digests."""

from __future__ import annotations

import hashlib

from .generator import Generator


class Hash:
    """Produces hex digests of random words."""

    def __init__(self, faker: Generator) -> None:
        self.faker = faker

    def _random_word(self) -> bytes:
        length = self.faker.int_between(3, 10)
        return self.faker.random_string_with_length(length).encode()

    def _digest(self, algorithm: str) -> str:
        return hashlib.new(algorithm, self._random_word()).hexdigest()

    def sha256(self) -> str:
        """Return the SHA-256 hex digest of a random word."""
        return self._digest("sha256")

    def sha512(self) -> str:
        """Return the SHA-512 hex digest of a random word."""
        return self._digest("sha512")

    def md5(self) -> str:
        """Return the MD5 hex digest of a random word."""
        return self._digest("md5")