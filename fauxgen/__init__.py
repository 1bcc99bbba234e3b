"""Fake data for tests: a random value generator and providers built on it."""

__version__ = "0.1.0"
__all__ = ["__version__"]