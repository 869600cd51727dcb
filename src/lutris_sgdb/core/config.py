"""Configuration classes for lutris-sgdb."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from lutris_sgdb.core.exceptions import InvalidConfigurationError
from lutris_sgdb.types.common import AssetCategory

API_KEY_ENV = "SGDB_API_KEY"
LOG_LEVEL_ENV = "SGDB_LOG_LEVEL"


@dataclass
class ProviderConfig:
    """Configuration for the artwork provider.

    Attributes:
        enabled: Whether this provider is enabled
        credentials: Provider-specific credentials (API keys, secrets, etc.)
        timeout: Request timeout in seconds (None = no timeout)
        options: Additional provider-specific options
    """

    enabled: bool = False
    credentials: dict[str, str] = field(default_factory=dict)
    timeout: float | None = None
    options: dict[str, Any] = field(default_factory=dict)

    def get_credential(self, key: str, default: str = "") -> str:
        """Get a credential value by key."""
        return self.credentials.get(key, default)

    @property
    def is_configured(self) -> bool:
        """Check if the provider has credentials configured."""
        return self.enabled and any(self.credentials.values())


@dataclass(frozen=True)
class LutrisPaths:
    """Locations of the Lutris catalog and artwork directories.

    Attributes:
        data_dir: Lutris data directory (~/.local/share/lutris)
        db_path: Path to the pga.db catalog
        coverart_dir: Directory holding cover images
        banners_dir: Directory holding banner images
    """

    data_dir: Path
    db_path: Path
    coverart_dir: Path
    banners_dir: Path

    @classmethod
    def from_data_dir(cls, data_dir: Path) -> LutrisPaths:
        """Derive every path from a Lutris data directory."""
        return cls(
            data_dir=data_dir,
            db_path=data_dir / "pga.db",
            coverart_dir=data_dir / AssetCategory.COVER.directory,
            banners_dir=data_dir / AssetCategory.BANNER.directory,
        )

    @classmethod
    def from_home(cls, home: Path | None = None) -> LutrisPaths:
        """Derive the paths from the user's home directory.

        Raises:
            InvalidConfigurationError: If the home directory cannot be resolved
        """
        if home is None:
            try:
                home = Path.home()
            except RuntimeError as e:
                raise InvalidConfigurationError(f"cannot resolve home directory: {e}") from e
        return cls.from_data_dir(home / ".local" / "share" / "lutris")

    def asset_dir(self, category: AssetCategory) -> Path:
        """Get the directory for an artwork category."""
        if category is AssetCategory.COVER:
            return self.coverart_dir
        return self.banners_dir


@dataclass
class SyncConfig:
    """Main configuration for an artwork sync run.

    Attributes:
        api_key: SteamGridDB API key
        paths: Lutris locations (None resolves them from the home directory)
        timeout: HTTP timeout in seconds (None = no timeout)
        user_agent: User agent string for HTTP requests
        log_level: Logging level name for the CLI
    """

    api_key: str = ""
    paths: LutrisPaths | None = None
    timeout: float | None = None
    user_agent: str = "lutris-sgdb/1.0"
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SyncConfig:
        """Create a SyncConfig from environment variables."""
        if environ is None:
            environ = os.environ
        return cls(
            api_key=environ.get(API_KEY_ENV, "").strip(),
            log_level=environ.get(LOG_LEVEL_ENV, "WARNING").strip().upper() or "WARNING",
        )

    def get_paths(self) -> LutrisPaths:
        """Get the resolved Lutris paths."""
        if self.paths is not None:
            return self.paths
        return LutrisPaths.from_home()

    def provider_config(self) -> ProviderConfig:
        """Build the SteamGridDB provider configuration."""
        return ProviderConfig(
            enabled=True,
            credentials={"api_key": self.api_key},
            timeout=self.timeout,
        )
