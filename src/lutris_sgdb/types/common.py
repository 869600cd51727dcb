"""Common type definitions used across lutris-sgdb."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

from lutris_sgdb.types.steamgriddb import SGDBDimension


@enum.unique
class AssetCategory(enum.StrEnum):
    """Artwork categories Lutris displays.

    Each category maps to a directory under the Lutris data dir and to the
    SteamGridDB grid dimension used to fill it.
    """

    COVER = "cover"
    BANNER = "banner"

    @property
    def directory(self) -> str:
        """Directory name under the Lutris data dir."""
        return _DIRECTORIES[self]

    @property
    def dimension(self) -> SGDBDimension:
        """SteamGridDB grid dimension for this category."""
        return _DIMENSIONS[self]

    @property
    def width(self) -> int:
        """Expected pixel width of a matching grid."""
        return int(self.dimension.split("x")[0])

    @property
    def height(self) -> int:
        """Expected pixel height of a matching grid."""
        return int(self.dimension.split("x")[1])


_DIRECTORIES = {
    AssetCategory.COVER: "coverart",
    AssetCategory.BANNER: "banners",
}

_DIMENSIONS = {
    AssetCategory.COVER: SGDBDimension.STEAM_VERTICAL,
    AssetCategory.BANNER: SGDBDimension.STEAM_HORIZONTAL_2X,
}


@dataclass(frozen=True)
class CandidateImage:
    """A grid image offered by SteamGridDB for a game.

    Attributes:
        url: Direct URL of the image file
        mime: Declared MIME type (e.g., "image/png")
        width: Declared width in pixels
        height: Declared height in pixels
    """

    url: str
    mime: str
    width: int
    height: int

    @classmethod
    def from_grid(cls, grid: dict[str, Any]) -> CandidateImage:
        """Build a candidate from a raw grid entry.

        Raises:
            KeyError: If a required field is missing
            TypeError, ValueError: If width or height is not an integer
        """
        return cls(
            url=str(grid["url"]),
            mime=str(grid["mime"]),
            width=int(grid["width"]),
            height=int(grid["height"]),
        )
