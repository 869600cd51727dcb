"""Abstract base class for artwork providers."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lutris_sgdb.core.config import ProviderConfig
    from lutris_sgdb.types.common import CandidateImage


class ArtworkProvider(abc.ABC):
    """Abstract base class for artwork providers.

    Providers resolve a Lutris slug to their own game ID and list the
    candidate images available for that game.

    Attributes:
        name: Provider name (e.g., "steamgriddb")
        config: Provider configuration
    """

    name: str = "base"

    def __init__(self, config: ProviderConfig) -> None:
        self.config = config

    async def __aenter__(self) -> ArtworkProvider:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @property
    def is_enabled(self) -> bool:
        """Check if this provider is enabled and configured."""
        return self.config.enabled and self.config.is_configured

    @abc.abstractmethod
    async def resolve_game_id(self, slug: str) -> int:
        """Resolve a game slug to a provider-specific game ID.

        Args:
            slug: Game slug from the local catalog

        Returns:
            Provider-specific game ID

        Raises:
            GameNotFoundError: If the provider knows no such game
        """

    @abc.abstractmethod
    async def fetch_grids(self, game_id: int) -> list[CandidateImage]:
        """List candidate images for a game.

        Args:
            game_id: Provider-specific game ID

        Returns:
            Non-empty list of candidate images
        """

    async def close(self) -> None:
        """Clean up provider resources.

        Override in subclasses if cleanup is needed.
        """
