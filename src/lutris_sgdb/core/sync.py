"""Sequential artwork sync between the Lutris catalog and SteamGridDB."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from lutris_sgdb.artwork.exceptions import ArtworkError
from lutris_sgdb.artwork.probe import filter_missing
from lutris_sgdb.core.exceptions import MetadataError
from lutris_sgdb.types.common import AssetCategory

if TYPE_CHECKING:
    from lutris_sgdb.artwork.downloader import ArtworkDownloadResult, AssetDownloader
    from lutris_sgdb.core.config import LutrisPaths
    from lutris_sgdb.providers.base import ArtworkProvider

logger = logging.getLogger(__name__)


@dataclass
class SyncResult:
    """Summary of an artwork sync run.

    Attributes:
        total_games: Number of slugs read from the catalog
        selected: Slugs that were missing a cover or a banner
        downloaded: Artwork files written during the run
        skipped: Slugs or assets given up on, with the reason
    """

    total_games: int = 0
    selected: list[str] = field(default_factory=list)
    downloaded: list[ArtworkDownloadResult] = field(default_factory=list)
    skipped: list[dict] = field(default_factory=list)

    def skip(self, slug: str, reason: str, category: AssetCategory | None = None) -> None:
        entry = {"slug": slug, "reason": reason}
        if category is not None:
            entry["category"] = str(category)
        self.skipped.append(entry)


class ArtworkSync:
    """Fills missing Lutris covers and banners from an artwork provider.

    Games are processed one at a time. A failure for one game is logged at
    debug level and recorded in the result; it never stops the run.

    Example:
        async with SteamGridDBProvider(config) as provider, AssetDownloader() as downloader:
            sync = ArtworkSync(provider, downloader, paths)
            result = await sync.run(catalog.read_slugs())
    """

    def __init__(
        self,
        provider: ArtworkProvider,
        downloader: AssetDownloader,
        paths: LutrisPaths,
    ) -> None:
        self.provider = provider
        self.downloader = downloader
        self.paths = paths

    def select_slugs(self, slugs: Iterable[str]) -> list[str]:
        """Keep the slugs missing a cover or a banner, in catalog order."""
        return filter_missing(self.paths, slugs)

    async def sync_game(self, slug: str, result: SyncResult | None = None) -> SyncResult:
        """Fetch and download the missing artwork of one game.

        Resolution and grid lookup errors end this game's processing. A
        failed cover download does not prevent the banner attempt.

        Args:
            slug: Game slug
            result: Result to record into (a new one is created if None)

        Returns:
            The updated SyncResult

        Raises:
            MetadataError: If the game cannot be resolved or has no grids
        """
        if result is None:
            result = SyncResult()

        game_id = await self.provider.resolve_game_id(slug)
        candidates = await self.provider.fetch_grids(game_id)

        for category in AssetCategory:
            try:
                downloaded = await self.downloader.download_if_missing(
                    self.paths.asset_dir(category),
                    slug,
                    category,
                    candidates,
                )
            except ArtworkError as e:
                logger.debug("Skipping %s for '%s': %s", category, slug, e)
                result.skip(slug, str(e), category)
                continue

            if downloaded is not None:
                result.downloaded.append(downloaded)

        return result

    async def run(
        self,
        slugs: Iterable[str],
        progress_callback: Callable[[int, int, str], None] | None = None,
    ) -> SyncResult:
        """Sync artwork for every game that needs it.

        Args:
            slugs: Game slugs in catalog order
            progress_callback: Callback function(current, total, slug)

        Returns:
            SyncResult with run statistics
        """
        slugs = list(slugs)
        selected = self.select_slugs(slugs)
        result = SyncResult(total_games=len(slugs), selected=selected)

        logger.info("%d of %d games are missing artwork", len(selected), len(slugs))

        for i, slug in enumerate(selected):
            if progress_callback:
                progress_callback(i + 1, len(selected), slug)

            try:
                await self.sync_game(slug, result)
            except MetadataError as e:
                logger.debug("Skipping '%s': %s", slug, e)
                result.skip(slug, str(e))

        logger.info(
            "Downloaded %d artwork files, skipped %d",
            len(result.downloaded),
            len(result.skipped),
        )
        return result
