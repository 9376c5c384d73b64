"""Tests for CLI configuration."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest


class TestLibbyConfig:
    """Tests for LibbyConfig."""

    def test_default_values(self) -> None:
        """Config has sensible defaults."""
        from libby_manifest.cli.config import LibbyConfig

        with patch.dict(os.environ, {}, clear=True):
            config = LibbyConfig(_env_file=None)  # type: ignore[call-arg]

        assert config.build_dir == Path("build")
        assert config.manifest_path == "libby/libby.json"
        assert config.output_path() == Path("build/libby/libby.json")
        assert config.log_level == "INFO"

    def test_from_environment(self) -> None:
        """Config reads from environment variables."""
        from libby_manifest.cli.config import LibbyConfig

        env = {
            "LIBBY_BUILD_DIR": "/tmp/out",
            "LIBBY_MANIFEST_PATH": "meta/deps.json",
            "LIBBY_LOG_LEVEL": "debug",
        }

        with patch.dict(os.environ, env, clear=True):
            config = LibbyConfig(_env_file=None)  # type: ignore[call-arg]

        assert config.output_path() == Path("/tmp/out/meta/deps.json")
        assert config.log_level == "DEBUG"
        assert config.log_level_number == 10

    def test_build_dir_override(self) -> None:
        from libby_manifest.cli.config import LibbyConfig

        with patch.dict(os.environ, {}, clear=True):
            config = LibbyConfig(_env_file=None)  # type: ignore[call-arg]

        assert config.output_path(Path("target")) == Path("target/libby/libby.json")

    def test_debug_forces_debug_level(self) -> None:
        from libby_manifest.cli.config import LibbyConfig

        with patch.dict(os.environ, {"LIBBY_DEBUG": "true"}, clear=True):
            config = LibbyConfig(_env_file=None)  # type: ignore[call-arg]

        assert config.log_level_number == 10

    def test_invalid_log_level(self) -> None:
        from pydantic import ValidationError

        from libby_manifest.cli.config import LibbyConfig

        with patch.dict(os.environ, {"LIBBY_LOG_LEVEL": "chatty"}, clear=True), pytest.raises(
            ValidationError, match="Invalid log level"
        ):
            LibbyConfig(_env_file=None)  # type: ignore[call-arg]

    @pytest.mark.parametrize("value", ["/abs/libby.json", "../escape.json"])
    def test_manifest_path_must_stay_in_build_dir(self, value: str) -> None:
        from pydantic import ValidationError

        from libby_manifest.cli.config import LibbyConfig

        with patch.dict(os.environ, {"LIBBY_MANIFEST_PATH": value}, clear=True), pytest.raises(
            ValidationError, match="Invalid manifest path"
        ):
            LibbyConfig(_env_file=None)  # type: ignore[call-arg]


class TestGetConfig:
    """Tests for get_config function."""

    def test_returns_cached_config(self) -> None:
        """get_config returns the same LibbyConfig until cleared."""
        from libby_manifest.cli.config import LibbyConfig, clear_config_cache, get_config

        clear_config_cache()
        config = get_config()

        assert isinstance(config, LibbyConfig)
        assert get_config() is config

        clear_config_cache()
        assert get_config() is not config
