"""Custom exceptions for artwork downloading."""

from __future__ import annotations


class ArtworkError(Exception):
    """Base exception for all artwork-related errors."""

    def __init__(self, message: str, provider: str | None = None) -> None:
        self.provider = provider
        super().__init__(message)


class ArtworkDownloadError(ArtworkError):
    """Raised when artwork download fails."""

    def __init__(
        self,
        url: str,
        provider: str | None = None,
        details: str | None = None,
    ) -> None:
        self.url = url
        message = f"Failed to download artwork from '{url}'"
        if details:
            message += f": {details}"
        super().__init__(message, provider)


class ArtworkNotFoundError(ArtworkError):
    """Raised when no candidate image matches the wanted artwork."""

    def __init__(
        self,
        game_name: str,
        artwork_type: str,
        provider: str | None = None,
    ) -> None:
        self.game_name = game_name
        self.artwork_type = artwork_type
        message = f"No {artwork_type} artwork found for '{game_name}'"
        if provider:
            message += f" from provider '{provider}'"
        super().__init__(message, provider)


class UnsupportedMimeTypeError(ArtworkError):
    """Raised when a candidate image has a MIME type that cannot be stored."""

    def __init__(self, mime: str, valid_types: list[str]) -> None:
        self.mime = mime
        self.valid_types = valid_types
        message = f"Unsupported artwork MIME type '{mime}'. Valid types: {', '.join(valid_types)}"
        super().__init__(message)
