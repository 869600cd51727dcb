"""Tests for the SteamGridDB provider using mocked HTTP responses."""

import re

import httpx
import pytest
import respx

from lutris_sgdb.core.exceptions import (
    GameNotFoundError,
    GridsNotFoundError,
    MetadataError,
    ProviderAuthenticationError,
    ProviderConnectionError,
    ProviderRateLimitError,
    ProviderResponseError,
)
from lutris_sgdb.providers.steamgriddb import SteamGridDBProvider
from lutris_sgdb.types.common import CandidateImage
from tests.helpers import load_fixture

SEARCH_URL = re.compile(r"https://www\.steamgriddb\.com/api/v2/search/autocomplete/.*")
GRIDS_URL = re.compile(r"https://www\.steamgriddb\.com/api/v2/grids/game/5328.*")


@pytest.fixture
async def provider(sgdb_config):
    """Create a SteamGridDB provider and close it afterwards."""
    provider = SteamGridDBProvider(sgdb_config)
    yield provider
    await provider.close()


class TestResolveGameId:
    """Tests for SteamGridDBProvider.resolve_game_id."""

    @respx.mock
    async def test_first_result_wins(self, provider):
        """Test that the first autocomplete result is used."""
        route = respx.get(SEARCH_URL).mock(
            return_value=httpx.Response(200, json=load_fixture("steamgriddb", "search_celeste.json"))
        )

        assert await provider.resolve_game_id("celeste") == 5328

        request = route.calls.last.request
        assert request.url.path == "/api/v2/search/autocomplete/celeste"
        assert request.headers["Authorization"] == "Bearer test_api_key"

    @respx.mock
    async def test_empty_results(self, provider):
        """Test that an empty result list means the game is unknown."""
        respx.get(SEARCH_URL).mock(
            return_value=httpx.Response(200, json=load_fixture("steamgriddb", "search_empty.json"))
        )

        with pytest.raises(GameNotFoundError) as exc_info:
            await provider.resolve_game_id("not-a-game")

        assert exc_info.value.search_term == "not-a-game"
        assert exc_info.value.provider == "steamgriddb"

    @respx.mock
    async def test_slug_is_path_escaped(self, provider):
        """Test that a slug cannot escape its path segment."""
        route = respx.get(SEARCH_URL).mock(
            return_value=httpx.Response(200, json=load_fixture("steamgriddb", "search_celeste.json"))
        )

        await provider.resolve_game_id("a/b c")

        assert route.calls.last.request.url.raw_path == b"/api/v2/search/autocomplete/a%2Fb%20c"

    @respx.mock
    async def test_unauthorized(self, provider):
        """Test that a 401 is reported as an authentication error."""
        respx.get(SEARCH_URL).mock(return_value=httpx.Response(401, json={"success": False}))

        with pytest.raises(ProviderAuthenticationError):
            await provider.resolve_game_id("celeste")

    @respx.mock
    async def test_rate_limited(self, provider):
        """Test that a 429 is reported with its Retry-After value."""
        respx.get(SEARCH_URL).mock(return_value=httpx.Response(429, headers={"Retry-After": "30"}))

        with pytest.raises(ProviderRateLimitError) as exc_info:
            await provider.resolve_game_id("celeste")

        assert exc_info.value.retry_after == 30

    @respx.mock
    async def test_server_error(self, provider):
        """Test that other error statuses are response errors."""
        respx.get(SEARCH_URL).mock(return_value=httpx.Response(503))

        with pytest.raises(ProviderResponseError) as exc_info:
            await provider.resolve_game_id("celeste")

        assert exc_info.value.status_code == 503

    @respx.mock
    async def test_invalid_json(self, provider):
        """Test that an undecodable body is a response error."""
        respx.get(SEARCH_URL).mock(return_value=httpx.Response(200, text="<html>oops</html>"))

        with pytest.raises(ProviderResponseError, match="invalid JSON"):
            await provider.resolve_game_id("celeste")

    @respx.mock
    async def test_malformed_game_entry(self, provider):
        """Test that a result without an id is a response error."""
        respx.get(SEARCH_URL).mock(
            return_value=httpx.Response(200, json={"success": True, "data": [{"name": "Celeste"}]})
        )

        with pytest.raises(ProviderResponseError, match="malformed game entry"):
            await provider.resolve_game_id("celeste")

    @respx.mock
    async def test_connection_error(self, provider):
        """Test that transport failures are connection errors."""
        respx.get(SEARCH_URL).mock(side_effect=httpx.ConnectError("connection refused"))

        with pytest.raises(ProviderConnectionError):
            await provider.resolve_game_id("celeste")

    def test_errors_share_a_base(self):
        """Test that every provider failure can be handled as one type."""
        for error in (
            GameNotFoundError,
            GridsNotFoundError,
            ProviderAuthenticationError,
            ProviderConnectionError,
            ProviderRateLimitError,
            ProviderResponseError,
        ):
            assert issubclass(error, MetadataError)


class TestFetchGrids:
    """Tests for SteamGridDBProvider.fetch_grids."""

    @respx.mock
    async def test_fetch_grids(self, provider):
        """Test that grids are returned as candidates in API order."""
        route = respx.get(GRIDS_URL).mock(
            return_value=httpx.Response(200, json=load_fixture("steamgriddb", "grids_5328.json"))
        )

        candidates = await provider.fetch_grids(5328)

        assert candidates == [
            CandidateImage(
                url="https://cdn2.steamgriddb.com/grid/celeste-cover.png",
                mime="image/png",
                width=600,
                height=900,
            ),
            CandidateImage(
                url="https://cdn2.steamgriddb.com/grid/celeste-cover-alt.jpg",
                mime="image/jpeg",
                width=600,
                height=900,
            ),
            CandidateImage(
                url="https://cdn2.steamgriddb.com/grid/celeste-banner.jpg",
                mime="image/jpeg",
                width=920,
                height=430,
            ),
        ]

        request = route.calls.last.request
        assert request.url.path == "/api/v2/grids/game/5328"
        assert request.url.params["dimensions"] == "600x900,920x430"
        assert request.url.params["types"] == "static"
        assert request.headers["Authorization"] == "Bearer test_api_key"

    @respx.mock
    async def test_no_grids(self, provider):
        """Test that a game without matching grids is reported."""
        respx.get(GRIDS_URL).mock(return_value=httpx.Response(200, json={"success": True, "data": []}))

        with pytest.raises(GridsNotFoundError) as exc_info:
            await provider.fetch_grids(5328)

        assert exc_info.value.game_id == 5328

    @respx.mock
    async def test_missing_data_key(self, provider):
        """Test that a body without data counts as no grids."""
        respx.get(GRIDS_URL).mock(return_value=httpx.Response(200, json={"success": False}))

        with pytest.raises(GridsNotFoundError):
            await provider.fetch_grids(5328)

    @respx.mock
    async def test_malformed_grid_entry(self, provider):
        """Test that a grid without dimensions is a response error."""
        respx.get(GRIDS_URL).mock(
            return_value=httpx.Response(
                200,
                json={"success": True, "data": [{"url": "https://cdn/x.png", "mime": "image/png"}]},
            )
        )

        with pytest.raises(ProviderResponseError, match="malformed grid entry"):
            await provider.fetch_grids(5328)

    @respx.mock
    async def test_data_not_a_list(self, provider):
        """Test that an unexpected data shape is a response error."""
        respx.get(GRIDS_URL).mock(
            return_value=httpx.Response(200, json={"success": True, "data": {"url": "x"}})
        )

        with pytest.raises(ProviderResponseError):
            await provider.fetch_grids(5328)


class TestProviderLifecycle:
    """Tests for provider setup and teardown."""

    def test_api_key_comes_from_config(self, sgdb_config):
        """Test that the API key is injected through the configuration."""
        provider = SteamGridDBProvider(sgdb_config)
        assert provider.api_key == "test_api_key"
        assert provider.is_enabled

    async def test_context_manager_closes_client(self, sgdb_config):
        """Test that leaving the context closes the HTTP client."""
        async with SteamGridDBProvider(sgdb_config) as provider:
            client = provider._get_client()
            assert not client.is_closed

        assert client.is_closed
