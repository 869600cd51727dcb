"""Artwork module for lutris-sgdb.

This module finds which Lutris covers and banners are missing on disk and
downloads matching SteamGridDB grids into place.

Example usage:
    from lutris_sgdb.artwork import AssetDownloader, filter_missing

    slugs = filter_missing(paths, catalog.read_slugs())

    async with AssetDownloader() as downloader:
        result = await downloader.download_if_missing(
            paths.coverart_dir,
            "celeste",
            AssetCategory.COVER,
            candidates,
        )
"""

from lutris_sgdb.artwork.config import ArtworkConfig
from lutris_sgdb.artwork.downloader import (
    ArtworkDownloadResult,
    AssetDownloader,
    select_candidate,
)
from lutris_sgdb.artwork.exceptions import (
    ArtworkDownloadError,
    ArtworkError,
    ArtworkNotFoundError,
    UnsupportedMimeTypeError,
)
from lutris_sgdb.artwork.probe import (
    asset_missing,
    filter_missing,
    find_asset,
    missing_categories,
)
from lutris_sgdb.artwork.utils import (
    ASSET_EXTENSIONS,
    asset_path,
    get_extension_from_mime,
    partial_path,
)

__all__ = [
    # Config
    "ArtworkConfig",
    # Downloader
    "AssetDownloader",
    "ArtworkDownloadResult",
    "select_candidate",
    # Probe
    "asset_missing",
    "filter_missing",
    "find_asset",
    "missing_categories",
    # Exceptions
    "ArtworkError",
    "ArtworkDownloadError",
    "ArtworkNotFoundError",
    "UnsupportedMimeTypeError",
    # Utilities
    "ASSET_EXTENSIONS",
    "asset_path",
    "get_extension_from_mime",
    "partial_path",
]
