"""CLI configuration using Pydantic settings.

Configuration is loaded from:
1. Environment variables (LIBBY_* prefix)
2. .env file in current directory
3. Default values
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40, "CRITICAL": 50}


class LibbyConfig(BaseSettings):
    """Configuration for the libby-manifest CLI.

    Environment variables are prefixed with LIBBY_.
    """

    model_config = SettingsConfigDict(
        env_prefix="LIBBY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Output location
    build_dir: Path = Path("build")
    manifest_path: str = "libby/libby.json"

    # Logging
    debug: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        upper = v.upper()
        if upper not in LOG_LEVELS:
            msg = f"Invalid log level: {v}. Must be one of {sorted(LOG_LEVELS)}"
            raise ValueError(msg)
        return upper

    @field_validator("manifest_path")
    @classmethod
    def validate_manifest_path(cls, v: str) -> str:
        """Manifest path must stay inside the build directory."""
        path = Path(v)
        if not v or path.is_absolute() or ".." in path.parts:
            msg = f"Invalid manifest path: {v!r}. Must be relative to the build directory"
            raise ValueError(msg)
        return v

    @property
    def log_level_number(self) -> int:
        """Numeric level for structlog's filtering logger."""
        return LOG_LEVELS["DEBUG"] if self.debug else LOG_LEVELS[self.log_level]

    def output_path(self, build_dir: Path | None = None) -> Path:
        """Resolve where libby.json is written.

        Args:
            build_dir: Override for the configured build directory.
        """
        return (build_dir or self.build_dir) / self.manifest_path


@lru_cache
def get_config() -> LibbyConfig:
    """Get the global configuration.

    Configuration is cached after first load.

    Returns:
        LibbyConfig instance.
    """
    return LibbyConfig()


def clear_config_cache() -> None:
    """Clear the configuration cache (for testing)."""
    get_config.cache_clear()
