"""Deterministic JSON serialization of the libby manifest.

This module provides serialization that:
- Keeps keys in wire order (version, libraries, repositories, relocations)
- Preserves the order of libraries, repositories and relocation pairs
- Removes whitespace for compact representation
- Produces identical output for identical input (no timestamps, no locale)
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from libby_manifest.manifest.model import LibraryManifest

# Placeholder for the namespace separator in group ids and relocation prefixes.
NAMESPACE_SEPARATOR = "."
NAMESPACE_PLACEHOLDER = "{}"


def encode_namespace(namespace: str) -> str:
    """Replace namespace separators with the wire placeholder.

    Example:
        >>> encode_namespace("com.example")
        "com{}example"
    """
    return namespace.replace(NAMESPACE_SEPARATOR, NAMESPACE_PLACEHOLDER)


def decode_namespace(encoded: str) -> str:
    """Inverse of encode_namespace.

    Example:
        >>> decode_namespace("com{}example")
        "com.example"
    """
    return encoded.replace(NAMESPACE_PLACEHOLDER, NAMESPACE_SEPARATOR)


def dumps_compact(data: Any) -> str:
    """Serialize a JSON value without whitespace, keeping key order."""
    return json.dumps(
        data,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )


def serialize_manifest(manifest: LibraryManifest) -> str:
    """Serialize a manifest to the libby.json wire format.

    Args:
        manifest: Manifest produced by the builder.

    Returns:
        Compact JSON string.

    Example:
        >>> serialize_manifest(LibraryManifest())
        '{"version":0,"libraries":[],"repositories":[]}'
    """
    return dumps_compact(manifest.to_dict())
