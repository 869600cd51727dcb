"""Test helpers for loading fixture data."""

from .fixtures import load_fixture

__all__ = ["load_fixture"]
