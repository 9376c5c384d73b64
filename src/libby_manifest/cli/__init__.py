"""CLI module."""

from __future__ import annotations

from libby_manifest.cli.config import LibbyConfig, get_config
from libby_manifest.cli.main import app

__all__ = ["LibbyConfig", "app", "get_config"]
