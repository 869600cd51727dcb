"""Pytest configuration and fixtures."""

from __future__ import annotations

import sqlite3
from collections.abc import Callable
from contextlib import closing
from pathlib import Path

import pytest

from lutris_sgdb import LutrisPaths, ProviderConfig


@pytest.fixture
def lutris_paths(tmp_path: Path) -> LutrisPaths:
    """Create an empty Lutris data directory layout."""
    paths = LutrisPaths.from_data_dir(tmp_path / "lutris")
    paths.coverart_dir.mkdir(parents=True)
    paths.banners_dir.mkdir(parents=True)
    return paths


@pytest.fixture
def make_catalog() -> Callable[[Path, list[str | None]], Path]:
    """Return a factory writing a minimal pga.db with the given slugs."""

    def _make(db_path: Path, slugs: list[str | None]) -> Path:
        db_path.parent.mkdir(parents=True, exist_ok=True)
        with closing(sqlite3.connect(db_path)) as conn:
            conn.execute(
                "CREATE TABLE games (id INTEGER PRIMARY KEY, name TEXT, slug TEXT, runner TEXT)"
            )
            conn.executemany(
                "INSERT INTO games (name, slug, runner) VALUES (?, ?, ?)",
                [(slug or "unnamed", slug, "wine") for slug in slugs],
            )
            conn.commit()
        return db_path

    return _make


@pytest.fixture
def sgdb_config() -> ProviderConfig:
    """Create a SteamGridDB provider configuration for testing."""
    return ProviderConfig(
        enabled=True,
        credentials={"api_key": "test_api_key"},
    )
