"""Manifest generation module."""

from __future__ import annotations

from libby_manifest.manifest.builder import ManifestBuilder
from libby_manifest.manifest.model import MANIFEST_FORMAT_VERSION, LibraryManifest, ManifestEntry
from libby_manifest.manifest.reader import load_manifest, parse_manifest
from libby_manifest.manifest.serialization import (
    decode_namespace,
    encode_namespace,
    serialize_manifest,
)
from libby_manifest.manifest.writer import write_atomic

__all__ = [
    "MANIFEST_FORMAT_VERSION",
    "LibraryManifest",
    "ManifestBuilder",
    "ManifestEntry",
    "decode_namespace",
    "encode_namespace",
    "load_manifest",
    "parse_manifest",
    "serialize_manifest",
    "write_atomic",
]
