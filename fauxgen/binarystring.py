"""Random strings of binary digits."""

from __future__ import annotations

from .generator import Generator


class BinaryString:
    """Produces strings made of ``0`` and ``1``."""

    def __init__(self, faker: Generator) -> None:
        self.faker = faker

    def binary_string(self, length: int) -> str:
        """Return a string of ``length`` random binary digits."""
        return "".join(
            self.faker.random_string_element(["0", "1"]) for _ in range(length)
        )