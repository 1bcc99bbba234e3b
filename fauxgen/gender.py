"""Random grammatical gender names."""

from __future__ import annotations

from .generator import Generator


class Gender:
    """Produces gender names and abbreviations."""

    def __init__(self, faker: Generator) -> None:
        self.faker = faker

    def name(self) -> str:
        """Return ``masculine`` or ``feminine``."""
        return self.faker.random_string_element(["masculine", "feminine"])

    def abbr(self) -> str:
        """Return ``masc`` or ``fem``."""
        return self.faker.random_string_element(["masc", "fem"])