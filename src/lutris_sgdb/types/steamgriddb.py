"""SteamGridDB-specific type definitions.

Based on the SteamGridDB API: https://www.steamgriddb.com/api/v2
"""

from __future__ import annotations

import enum


@enum.unique
class SGDBDimension(enum.StrEnum):
    """Grid dimensions requested for Lutris artwork."""

    STEAM_HORIZONTAL_2X = "920x430"
    STEAM_VERTICAL = "600x900"


@enum.unique
class SGDBMime(enum.StrEnum):
    """Image MIME types Lutris can display."""

    PNG = "image/png"
    JPEG = "image/jpeg"


@enum.unique
class SGDBType(enum.StrEnum):
    """SteamGridDB image types."""

    STATIC = "static"
