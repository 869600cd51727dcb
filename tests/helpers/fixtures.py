"""Loader for JSON API fixtures."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

# Root directory for fixture files
FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


@lru_cache(maxsize=32)
def _read_fixture(provider: str, filename: str) -> str:
    fixture_path = FIXTURES_DIR / provider / filename
    if not fixture_path.exists():
        raise FileNotFoundError(f"Fixture file not found: {fixture_path}")
    return fixture_path.read_text()


def load_fixture(provider: str, filename: str) -> dict[str, Any]:
    """Load a fixture file from tests/fixtures.

    Args:
        provider: Provider directory (e.g., "steamgriddb")
        filename: Fixture filename (e.g., "search_celeste.json")

    Returns:
        A fresh copy of the parsed JSON document
    """
    return json.loads(_read_fixture(provider, filename))
