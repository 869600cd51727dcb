"""Artwork provider implementations."""

from lutris_sgdb.providers.base import ArtworkProvider
from lutris_sgdb.providers.steamgriddb import SteamGridDBProvider

__all__ = [
    "ArtworkProvider",
    "SteamGridDBProvider",
]
