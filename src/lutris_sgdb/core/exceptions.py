"""Custom exceptions for lutris-sgdb."""

from __future__ import annotations


class MetadataError(Exception):
    """Base exception for all metadata and setup errors."""

    def __init__(self, message: str, provider: str | None = None) -> None:
        self.provider = provider
        super().__init__(message)


class ProviderAuthenticationError(MetadataError):
    """Raised when provider authentication fails."""

    def __init__(self, provider: str, details: str | None = None) -> None:
        message = f"Authentication failed for provider '{provider}'"
        if details:
            message += f": {details}"
        super().__init__(message, provider)


class ProviderConnectionError(MetadataError):
    """Raised when connection to a provider fails."""

    def __init__(self, provider: str, details: str | None = None) -> None:
        message = f"Connection failed for provider '{provider}'"
        if details:
            message += f": {details}"
        super().__init__(message, provider)


class ProviderRateLimitError(MetadataError):
    """Raised when a provider rate limit is exceeded."""

    def __init__(
        self, provider: str, retry_after: int | None = None, details: str | None = None
    ) -> None:
        self.retry_after = retry_after
        message = f"Rate limit exceeded for provider '{provider}'"
        if retry_after:
            message += f" (retry after {retry_after}s)"
        if details:
            message += f": {details}"
        super().__init__(message, provider)


class ProviderResponseError(MetadataError):
    """Raised when a provider answers with an error status or an unreadable body."""

    def __init__(
        self, provider: str, details: str | None = None, status_code: int | None = None
    ) -> None:
        self.status_code = status_code
        message = f"Invalid response from provider '{provider}'"
        if status_code is not None:
            message += f" (HTTP {status_code})"
        if details:
            message += f": {details}"
        super().__init__(message, provider)


class GameNotFoundError(MetadataError):
    """Raised when a slug does not resolve to any game."""

    def __init__(self, search_term: str, provider: str | None = None) -> None:
        self.search_term = search_term
        message = f"Game not found: '{search_term}'"
        if provider:
            message += f" in provider '{provider}'"
        super().__init__(message, provider)


class GridsNotFoundError(MetadataError):
    """Raised when a game has no grid matching the requested dimensions."""

    def __init__(self, game_id: int, provider: str | None = None) -> None:
        self.game_id = game_id
        message = f"No grids found for game {game_id}"
        if provider:
            message += f" in provider '{provider}'"
        super().__init__(message, provider)


class InvalidConfigurationError(MetadataError):
    """Raised when configuration is invalid."""

    def __init__(self, details: str) -> None:
        super().__init__(f"Invalid configuration: {details}")


class CatalogError(MetadataError):
    """Raised when the local game catalog cannot be read."""

    def __init__(self, path: str, details: str | None = None) -> None:
        self.path = path
        message = f"Cannot read game catalog '{path}'"
        if details:
            message += f": {details}"
        super().__init__(message)
