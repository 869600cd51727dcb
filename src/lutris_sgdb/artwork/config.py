"""Configuration classes for artwork downloading."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ArtworkConfig:
    """Configuration for artwork downloading.

    Attributes:
        timeout: HTTP request timeout in seconds (None = no timeout)
        chunk_size: Size of the chunks written to disk while streaming
        user_agent: User agent string for image requests
    """

    timeout: float | None = None
    chunk_size: int = 64 * 1024
    user_agent: str = "lutris-sgdb/1.0"
