"""Checks for artwork already present on disk."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from lutris_sgdb.artwork.utils import ASSET_EXTENSIONS, asset_path
from lutris_sgdb.types.common import AssetCategory

if TYPE_CHECKING:
    from lutris_sgdb.core.config import LutrisPaths


def find_asset(asset_dir: Path, slug: str) -> Path | None:
    """Find an existing artwork file for a game.

    Args:
        asset_dir: Artwork directory to look in
        slug: Game slug

    Returns:
        Path of the first existing ``.jpg`` or ``.png`` file, or None
    """
    for extension in ASSET_EXTENSIONS:
        path = asset_path(asset_dir, slug, extension)
        if path.is_file():
            return path
    return None


def asset_missing(asset_dir: Path, slug: str) -> bool:
    """Check whether a game has no artwork in a directory.

    One encoding is enough: the asset is missing only if neither
    ``<slug>.jpg`` nor ``<slug>.png`` exists.
    """
    return find_asset(asset_dir, slug) is None


def missing_categories(paths: LutrisPaths, slug: str) -> list[AssetCategory]:
    """List the artwork categories a game still needs."""
    return [
        category
        for category in AssetCategory
        if asset_missing(paths.asset_dir(category), slug)
    ]


def filter_missing(paths: LutrisPaths, slugs: Iterable[str]) -> list[str]:
    """Keep the slugs whose cover or banner is missing.

    Args:
        paths: Lutris locations
        slugs: Game slugs in catalog order

    Returns:
        Slugs needing at least one download, order preserved
    """
    return [slug for slug in slugs if missing_categories(paths, slug)]
