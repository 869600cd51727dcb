"""SteamGridDB artwork provider implementation."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, Final
from urllib.parse import quote

import httpx

from lutris_sgdb.core.exceptions import (
    GameNotFoundError,
    GridsNotFoundError,
    ProviderAuthenticationError,
    ProviderConnectionError,
    ProviderRateLimitError,
    ProviderResponseError,
)
from lutris_sgdb.providers.base import ArtworkProvider
from lutris_sgdb.types.common import AssetCategory, CandidateImage
from lutris_sgdb.types.steamgriddb import SGDBType

if TYPE_CHECKING:
    from lutris_sgdb.core.config import ProviderConfig

logger = logging.getLogger(__name__)

SGDB_API_URL: Final = "https://www.steamgriddb.com/api/v2/"

# Grid dimensions requested for every game, one per artwork category
GRID_DIMENSIONS: Final = tuple(category.dimension for category in AssetCategory)


class SteamGridDBProvider(ArtworkProvider):
    """SteamGridDB artwork provider.

    Resolves Lutris slugs through the autocomplete search and lists the
    static cover and banner grids of the matched game.

    Requires an api_key credential from SteamGridDB.

    Example:
        config = ProviderConfig(
            enabled=True,
            credentials={"api_key": "your_api_key"}
        )
        async with SteamGridDBProvider(config) as provider:
            game_id = await provider.resolve_game_id("celeste")
            grids = await provider.fetch_grids(game_id)
    """

    name = "steamgriddb"

    def __init__(
        self,
        config: ProviderConfig,
        user_agent: str = "lutris-sgdb/1.0",
        base_url: str = SGDB_API_URL,
    ) -> None:
        super().__init__(config)
        self._base_url = base_url
        self._user_agent = user_agent
        self._client: httpx.AsyncClient | None = None

    @property
    def api_key(self) -> str:
        return self.config.get_credential("api_key")

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={
                    "User-Agent": self._user_agent,
                    "Authorization": f"Bearer {self.api_key}",
                },
                timeout=httpx.Timeout(self.config.timeout),
            )
        return self._client

    async def _request(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Make an API request to SteamGridDB."""
        client = self._get_client()

        logger.debug("SteamGridDB API: GET %s%s", self._base_url, endpoint)
        if params:
            logger.debug("SteamGridDB API params: %s", params)

        try:
            response = await client.get(endpoint, params=params)
        except httpx.RequestError as e:
            logger.debug("SteamGridDB API error: %s", e)
            raise ProviderConnectionError(self.name, str(e)) from e

        if response.status_code == 401:
            logger.debug("SteamGridDB API: 401 Unauthorized")
            raise ProviderAuthenticationError(self.name, "Invalid API key")
        elif response.status_code == 429:
            logger.debug("SteamGridDB API: 429 Rate limited")
            retry_after = response.headers.get("Retry-After")
            raise ProviderRateLimitError(
                self.name,
                int(retry_after) if retry_after and retry_after.isdigit() else None,
            )
        elif response.is_error:
            logger.debug("SteamGridDB API: HTTP %d", response.status_code)
            raise ProviderResponseError(self.name, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderResponseError(self.name, f"invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ProviderResponseError(self.name, "unexpected response body")

        # Log full response body only when debug logging is enabled
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("SteamGridDB API response:\n%s", json.dumps(data, indent=2, ensure_ascii=False))

        return data

    def _get_data(self, result: dict[str, Any]) -> list[dict[str, Any]]:
        """Extract the data list from a response envelope."""
        data = result.get("data") or []
        if not isinstance(data, list):
            raise ProviderResponseError(self.name, "'data' is not a list")
        return data

    async def resolve_game_id(self, slug: str) -> int:
        """Resolve a Lutris slug to a SteamGridDB game ID.

        The first autocomplete result wins; there is no disambiguation.

        Args:
            slug: Game slug

        Returns:
            SteamGridDB game ID

        Raises:
            GameNotFoundError: If the search returned no game
            MetadataError: On transport, status or decode failures
        """
        result = await self._request("search/autocomplete/" + quote(slug, safe=""))
        games = self._get_data(result)

        if not games:
            raise GameNotFoundError(slug, self.name)

        try:
            game_id = int(games[0]["id"])
        except (KeyError, TypeError, ValueError) as e:
            raise ProviderResponseError(self.name, f"malformed game entry: {e}") from e

        logger.debug("Resolved '%s' to SteamGridDB game %d (%s)", slug, game_id, games[0].get("name"))
        return game_id

    async def fetch_grids(self, game_id: int) -> list[CandidateImage]:
        """List the static cover and banner grids of a game.

        Args:
            game_id: SteamGridDB game ID

        Returns:
            Candidate images in API order

        Raises:
            GridsNotFoundError: If no grid matched the requested dimensions
            MetadataError: On transport, status or decode failures
        """
        params = {
            "dimensions": ",".join(GRID_DIMENSIONS),
            "types": SGDBType.STATIC.value,
        }
        result = await self._request(f"grids/game/{game_id}", params)
        grids = self._get_data(result)

        if not grids:
            raise GridsNotFoundError(game_id, self.name)

        try:
            candidates = [CandidateImage.from_grid(grid) for grid in grids]
        except (KeyError, TypeError, ValueError) as e:
            raise ProviderResponseError(self.name, f"malformed grid entry: {e}") from e

        logger.debug("SteamGridDB game %d has %d candidate grids", game_id, len(candidates))
        return candidates

    async def close(self) -> None:
        """Close the httpx client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
