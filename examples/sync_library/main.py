#!/usr/bin/env python3
"""Example: Sync Library

This example demonstrates how to fill the missing covers and banners of a
Lutris library from SteamGridDB, printing progress as it goes.

To run:
    export SGDB_API_KEY="your_api_key"
    python main.py
"""

from __future__ import annotations

import asyncio
import os
import sys

from lutris_sgdb import (
    ArtworkSync,
    AssetDownloader,
    LutrisCatalog,
    LutrisPaths,
    ProviderConfig,
    SteamGridDBProvider,
)


def print_progress(current: int, total: int, slug: str) -> None:
    print(f"[{current}/{total}] {slug}")


async def main() -> None:
    api_key = os.getenv("SGDB_API_KEY", "")

    if not api_key:
        print("Please set the SGDB_API_KEY environment variable")
        sys.exit(1)

    # Locate the Lutris data directory and read the catalog
    paths = LutrisPaths.from_home()
    slugs = LutrisCatalog(paths.db_path).read_slugs()
    print(f"Found {len(slugs)} games in {paths.db_path}\n")

    config = ProviderConfig(
        enabled=True,
        credentials={"api_key": api_key},
        timeout=30,
    )

    async with (
        SteamGridDBProvider(config) as provider,
        AssetDownloader() as downloader,
    ):
        sync = ArtworkSync(provider, downloader, paths)
        result = await sync.run(slugs, progress_callback=print_progress)

    print(f"\n{len(result.selected)} games were missing artwork\n")

    for item in result.downloaded:
        print(f"Downloaded {item.category} for {item.slug}")
        print(f"   {item.width}x{item.height} -> {item.path}")

    if result.skipped:
        print("\nSkipped:")
        for entry in result.skipped:
            category = entry.get("category", "game")
            print(f"   {entry['slug']} ({category}): {entry['reason']}")


if __name__ == "__main__":
    asyncio.run(main())
