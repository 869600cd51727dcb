"""Utility functions for artwork files."""

from __future__ import annotations

from pathlib import Path

from lutris_sgdb.artwork.exceptions import UnsupportedMimeTypeError
from lutris_sgdb.types.steamgriddb import SGDBMime

# Extensions Lutris accepts for covers and banners, in lookup order
ASSET_EXTENSIONS: tuple[str, ...] = (".jpg", ".png")

MIME_EXTENSIONS: dict[str, str] = {
    SGDBMime.JPEG: ".jpg",
    SGDBMime.PNG: ".png",
}

PARTIAL_SUFFIX = ".part"


def get_extension_from_mime(mime: str) -> str:
    """Get the file extension for a declared MIME type.

    Args:
        mime: The MIME type (parameters such as charset are ignored)

    Returns:
        File extension including the dot

    Raises:
        UnsupportedMimeTypeError: If the MIME type is not JPEG or PNG
    """
    normalized = mime.lower().split(";")[0].strip()
    try:
        return MIME_EXTENSIONS[normalized]
    except KeyError:
        raise UnsupportedMimeTypeError(mime, list(MIME_EXTENSIONS)) from None


def asset_path(asset_dir: Path, slug: str, extension: str) -> Path:
    """Build the path of an artwork file for a game.

    Args:
        asset_dir: Artwork directory (coverart or banners)
        slug: Game slug
        extension: File extension, with or without the leading dot

    Returns:
        Path like ``asset_dir/slug.jpg``
    """
    if not extension.startswith("."):
        extension = f".{extension}"
    return asset_dir / f"{slug}{extension}"


def partial_path(path: Path) -> Path:
    """Get the temporary path used while a download is in progress."""
    return path.with_name(path.name + PARTIAL_SUFFIX)
