"""Core functionality for lutris-sgdb."""

from lutris_sgdb.core.config import LutrisPaths, ProviderConfig, SyncConfig
from lutris_sgdb.core.exceptions import (
    CatalogError,
    GameNotFoundError,
    GridsNotFoundError,
    InvalidConfigurationError,
    MetadataError,
    ProviderAuthenticationError,
    ProviderConnectionError,
    ProviderRateLimitError,
    ProviderResponseError,
)
from lutris_sgdb.core.sync import ArtworkSync, SyncResult

__all__ = [
    "ArtworkSync",
    "LutrisPaths",
    "ProviderConfig",
    "SyncConfig",
    "SyncResult",
    "CatalogError",
    "GameNotFoundError",
    "GridsNotFoundError",
    "InvalidConfigurationError",
    "MetadataError",
    "ProviderAuthenticationError",
    "ProviderConnectionError",
    "ProviderRateLimitError",
    "ProviderResponseError",
]
