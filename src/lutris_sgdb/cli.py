"""Command-line entry point for lutris-sgdb.

Reads SGDB_API_KEY (and optionally SGDB_LOG_LEVEL) from the environment,
after loading a ``.env`` file from the working directory if there is one.

Usage:
    lutris-sgdb
    python -m lutris_sgdb
"""

from __future__ import annotations

import asyncio
import logging

from dotenv import load_dotenv

from lutris_sgdb.artwork.config import ArtworkConfig
from lutris_sgdb.artwork.downloader import AssetDownloader
from lutris_sgdb.catalog.lutris import LutrisCatalog
from lutris_sgdb.core.config import API_KEY_ENV, LutrisPaths, SyncConfig
from lutris_sgdb.core.exceptions import CatalogError, InvalidConfigurationError
from lutris_sgdb.core.sync import ArtworkSync, SyncResult
from lutris_sgdb.providers.steamgriddb import SteamGridDBProvider

logger = logging.getLogger(__name__)


def setup_logging(level_name: str) -> None:
    """Configure console logging.

    Args:
        level_name: Logging level name (e.g., "INFO"); unknown names fall back to WARNING
    """
    level = getattr(logging, level_name.upper(), logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        force=True,
    )

    # httpx logs every request URL at INFO/DEBUG
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


async def run_sync(config: SyncConfig, paths: LutrisPaths, slugs: list[str]) -> SyncResult:
    """Run the artwork sync for a list of catalog slugs."""
    artwork_config = ArtworkConfig(timeout=config.timeout, user_agent=config.user_agent)

    async with (
        SteamGridDBProvider(config.provider_config(), user_agent=config.user_agent) as provider,
        AssetDownloader(artwork_config) as downloader,
    ):
        sync = ArtworkSync(provider, downloader, paths)
        return await sync.run(slugs)


def main() -> int:
    """Main entry point for the lutris-sgdb CLI.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    load_dotenv(".env")
    config = SyncConfig.from_env()
    setup_logging(config.log_level)

    try:
        paths = config.get_paths()
        slugs = LutrisCatalog(paths.db_path).read_slugs()
    except (InvalidConfigurationError, CatalogError) as e:
        logger.critical("%s", e)
        return 1

    if not config.api_key:
        logger.warning("%s is not set; SteamGridDB lookups will fail", API_KEY_ENV)

    try:
        asyncio.run(run_sync(config, paths, slugs))
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130

    return 0
