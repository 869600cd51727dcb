"""
lutris-sgdb: fill missing Lutris covers and banners from SteamGridDB.

The library reads game slugs from the Lutris catalog, finds which of them
lack a cover or a banner on disk, and downloads matching static grids from
SteamGridDB, one game at a time.

Example usage:
    from lutris_sgdb import (
        ArtworkSync,
        AssetDownloader,
        LutrisCatalog,
        SteamGridDBProvider,
        SyncConfig,
    )

    config = SyncConfig.from_env()
    paths = config.get_paths()
    slugs = LutrisCatalog(paths.db_path).read_slugs()

    async with (
        SteamGridDBProvider(config.provider_config()) as provider,
        AssetDownloader() as downloader,
    ):
        result = await ArtworkSync(provider, downloader, paths).run(slugs)
        for item in result.downloaded:
            print(item.slug, item.category, item.path)
"""

from lutris_sgdb.artwork.config import ArtworkConfig
from lutris_sgdb.artwork.downloader import ArtworkDownloadResult, AssetDownloader
from lutris_sgdb.artwork.exceptions import (
    ArtworkDownloadError,
    ArtworkError,
    ArtworkNotFoundError,
    UnsupportedMimeTypeError,
)
from lutris_sgdb.artwork.probe import asset_missing, filter_missing
from lutris_sgdb.catalog.lutris import LutrisCatalog
from lutris_sgdb.core.config import LutrisPaths, ProviderConfig, SyncConfig
from lutris_sgdb.core.exceptions import (
    CatalogError,
    GameNotFoundError,
    GridsNotFoundError,
    MetadataError,
    ProviderAuthenticationError,
    ProviderConnectionError,
    ProviderRateLimitError,
    ProviderResponseError,
)
from lutris_sgdb.core.sync import ArtworkSync, SyncResult
from lutris_sgdb.providers.steamgriddb import SteamGridDBProvider
from lutris_sgdb.types.common import AssetCategory, CandidateImage

__version__ = "1.0.0"

__all__ = [
    # Core
    "ArtworkSync",
    "LutrisPaths",
    "ProviderConfig",
    "SyncConfig",
    "SyncResult",
    # Catalog
    "LutrisCatalog",
    # Provider
    "SteamGridDBProvider",
    # Artwork
    "ArtworkConfig",
    "AssetDownloader",
    "ArtworkDownloadResult",
    "asset_missing",
    "filter_missing",
    # Exceptions
    "MetadataError",
    "CatalogError",
    "GameNotFoundError",
    "GridsNotFoundError",
    "ProviderAuthenticationError",
    "ProviderConnectionError",
    "ProviderRateLimitError",
    "ProviderResponseError",
    "ArtworkError",
    "ArtworkDownloadError",
    "ArtworkNotFoundError",
    "UnsupportedMimeTypeError",
    # Types
    "AssetCategory",
    "CandidateImage",
]
