"""Relocation rule type shared by the extractor and the manifest model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RelocationMapping:
    """Package prefix rewrite applied by the repackaging step.

    Example:
        >>> RelocationMapping("com.google.gson", "app.libs.gson")
    """

    from_prefix: str
    to_prefix: str
