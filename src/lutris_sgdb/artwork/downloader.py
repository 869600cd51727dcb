"""Artwork selection and download logic."""

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import httpx

from lutris_sgdb.artwork.config import ArtworkConfig
from lutris_sgdb.artwork.exceptions import ArtworkDownloadError, ArtworkNotFoundError
from lutris_sgdb.artwork.probe import asset_missing
from lutris_sgdb.artwork.utils import asset_path, get_extension_from_mime, partial_path
from lutris_sgdb.types.common import AssetCategory, CandidateImage

logger = logging.getLogger(__name__)


@dataclass
class ArtworkDownloadResult:
    """Result of a single artwork download.

    Attributes:
        slug: Game slug the artwork belongs to
        category: Artwork category (cover or banner)
        url: Original URL
        path: Path where artwork was saved
        width: Declared image width in pixels
        height: Declared image height in pixels
    """

    slug: str
    category: AssetCategory
    url: str
    path: Path
    width: int
    height: int


def select_candidate(
    candidates: Sequence[CandidateImage],
    width: int,
) -> CandidateImage | None:
    """Pick the first candidate whose width is exactly the expected width.

    Args:
        candidates: Candidate images in API order
        width: Expected pixel width

    Returns:
        The matching candidate, or None
    """
    for candidate in candidates:
        if candidate.width == width:
            return candidate
    return None


class AssetDownloader:
    """Downloads the best-matching grid image into a Lutris artwork directory."""

    def __init__(
        self,
        config: ArtworkConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the artwork downloader.

        Args:
            config: Artwork configuration (uses defaults if None)
            http_client: HTTP client to use; one is created on demand if None
        """
        self.config = config or ArtworkConfig()
        self._http_client = http_client
        self._owns_client = http_client is None

    async def __aenter__(self) -> AssetDownloader:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    def _get_http_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._http_client is None or self._http_client.is_closed:
            self._http_client = httpx.AsyncClient(
                headers={"User-Agent": self.config.user_agent},
                timeout=httpx.Timeout(self.config.timeout),
                follow_redirects=True,
            )
            self._owns_client = True
        return self._http_client

    async def _stream_to_file(self, url: str, path: Path) -> None:
        """Stream a remote image into a local file.

        Args:
            url: Image URL
            path: Destination file (created or truncated)
        """
        client = self._get_http_client()

        try:
            async with client.stream("GET", url) as response:
                response.raise_for_status()
                with path.open("wb") as f:
                    async for chunk in response.aiter_bytes(self.config.chunk_size):
                        f.write(chunk)
        except httpx.HTTPStatusError as e:
            logger.debug("HTTP error %d for URL: %s", e.response.status_code, url)
            raise ArtworkDownloadError(url, "steamgriddb", f"HTTP {e.response.status_code}") from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.debug("Request error for URL %s: %s", url, e)
            raise ArtworkDownloadError(url, "steamgriddb", str(e)) from e
        except OSError as e:
            logger.debug("Cannot write %s: %s", path, e)
            raise ArtworkDownloadError(url, "steamgriddb", str(e)) from e

    async def download(
        self,
        asset_dir: Path,
        slug: str,
        category: AssetCategory,
        candidate: CandidateImage,
    ) -> ArtworkDownloadResult:
        """Download one candidate image for a game.

        The image is written to a ``.part`` file first and renamed into
        place only once the transfer completed.

        Raises:
            UnsupportedMimeTypeError: If the candidate is not JPEG or PNG
            ArtworkDownloadError: If the transfer or the write fails
        """
        extension = get_extension_from_mime(candidate.mime)
        path = asset_path(asset_dir, slug, extension)
        tmp_path = partial_path(path)

        logger.debug("Downloading %s for '%s' from %s", category, slug, candidate.url)

        try:
            asset_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ArtworkDownloadError(candidate.url, "steamgriddb", str(e)) from e

        try:
            await self._stream_to_file(candidate.url, tmp_path)
            try:
                os.replace(tmp_path, path)
            except OSError as e:
                raise ArtworkDownloadError(candidate.url, "steamgriddb", str(e)) from e
        except BaseException:
            with contextlib.suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            raise

        logger.info("Saved %s for '%s' to %s", category, slug, path)
        return ArtworkDownloadResult(
            slug=slug,
            category=category,
            url=candidate.url,
            path=path,
            width=candidate.width,
            height=candidate.height,
        )

    async def download_if_missing(
        self,
        asset_dir: Path,
        slug: str,
        category: AssetCategory,
        candidates: Sequence[CandidateImage],
    ) -> ArtworkDownloadResult | None:
        """Download artwork for a game unless it is already on disk.

        Args:
            asset_dir: Artwork directory for the category
            slug: Game slug
            category: Artwork category; its width selects the candidate
            candidates: Candidate images for the game

        Returns:
            ArtworkDownloadResult, or None if the artwork already exists

        Raises:
            ArtworkNotFoundError: If no candidate has the expected width
            UnsupportedMimeTypeError: If the selected candidate is not JPEG or PNG
            ArtworkDownloadError: If the transfer or the write fails
        """
        if not asset_missing(asset_dir, slug):
            logger.debug("%s for '%s' already exists, skipping", category, slug)
            return None

        candidate = select_candidate(candidates, category.width)
        if candidate is None:
            raise ArtworkNotFoundError(slug, str(category), "steamgriddb")

        return await self.download(asset_dir, slug, category, candidate)

    async def close(self) -> None:
        """Close the HTTP client if this downloader created it."""
        if self._http_client is not None and self._owns_client:
            await self._http_client.aclose()
            self._http_client = None
