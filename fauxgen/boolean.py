"""Random boolean values."""

from __future__ import annotations

from .generator import Generator


class Boolean:
    """Produces random booleans in several shapes."""

    def __init__(self, faker: Generator) -> None:
        self.faker = faker

    def bool(self) -> bool:
        """Return True or False."""
        return self.faker.int_between(0, 100) > 50

    def bool_with_chance(self, chance_true: int) -> bool:
        """Return True with the given percentage chance."""
        if chance_true <= 0:
            return False
        if chance_true >= 100:
            return True
        return self.faker.int_between(0, 100) < chance_true

    def bool_int(self) -> int:
        """Return 0 or 1."""
        return self.faker.random_int_element([0, 1])

    def bool_string(self, first: str, second: str) -> str:
        """Return one of the two given strings."""
        return self.faker.random_string_element([first, second])