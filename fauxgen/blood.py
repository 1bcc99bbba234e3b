"""Random blood types."""

from __future__ import annotations

from .generator import Generator

BLOOD_TYPES = ("A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-")


class Blood:
    """Produces blood type names."""

    def __init__(self, faker: Generator) -> None:
        self.faker = faker

    def name(self) -> str:
        """Return a blood type such as ``AB+``."""
        return self.faker.random_string_element(BLOOD_TYPES)