"""Reading libby.json documents back into the manifest model."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from libby_manifest.errors import ManifestFormatError, UnsupportedManifestVersionError
from libby_manifest.manifest.model import MANIFEST_FORMAT_VERSION, LibraryManifest, ManifestEntry
from libby_manifest.manifest.serialization import decode_namespace
from libby_manifest.types.relocation import RelocationMapping

if TYPE_CHECKING:
    from pathlib import Path


def _require_str(data: dict[str, Any], key: str, where: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        msg = f"{where}: {key!r} must be a string, got {type(value).__name__}"
        raise ManifestFormatError(msg)
    return value


def _optional_str(data: dict[str, Any], key: str, where: str) -> str | None:
    if key not in data:
        return None
    return _require_str(data, key, where)


def _parse_entry(raw: object, index: int) -> ManifestEntry:
    where = f"libraries[{index}]"
    if not isinstance(raw, dict):
        msg = f"{where} must be an object"
        raise ManifestFormatError(msg)
    return ManifestEntry(
        group=decode_namespace(_require_str(raw, "group", where)),
        name=_require_str(raw, "name", where),
        version=_require_str(raw, "version", where),
        classifier=_optional_str(raw, "classifier", where),
        checksum=_optional_str(raw, "checksum", where),
    )


def _parse_relocations(raw: object) -> tuple[RelocationMapping, ...]:
    if not isinstance(raw, dict):
        msg = "relocations must be an object"
        raise ManifestFormatError(msg)
    mappings: list[RelocationMapping] = []
    for from_prefix, to_prefix in raw.items():
        if not isinstance(to_prefix, str):
            msg = f"relocation target for {from_prefix!r} must be a string"
            raise ManifestFormatError(msg)
        mappings.append(
            RelocationMapping(
                from_prefix=decode_namespace(from_prefix),
                to_prefix=decode_namespace(to_prefix),
            )
        )
    return tuple(mappings)


def parse_manifest(text: str) -> LibraryManifest:
    """Parse a serialized manifest.

    Args:
        text: libby.json content.

    Returns:
        The decoded manifest (namespaces decoded back to dotted form).

    Raises:
        UnsupportedManifestVersionError: If the version is not understood.
        ManifestFormatError: If the document is not a valid manifest.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as err:
        msg = f"Manifest is not valid JSON: {err}"
        raise ManifestFormatError(msg) from err

    if not isinstance(data, dict):
        msg = "Manifest must be a JSON object"
        raise ManifestFormatError(msg)

    version = data.get("version")
    # bool is an int subclass and 0.0 == 0; only a real int is accepted.
    if type(version) is not int or version != MANIFEST_FORMAT_VERSION:
        raise UnsupportedManifestVersionError(version, MANIFEST_FORMAT_VERSION)

    libraries = data.get("libraries")
    repositories = data.get("repositories")
    if not isinstance(libraries, list):
        msg = "'libraries' must be an array"
        raise ManifestFormatError(msg)
    if not isinstance(repositories, list) or not all(isinstance(r, str) for r in repositories):
        msg = "'repositories' must be an array of strings"
        raise ManifestFormatError(msg)

    relocations = _parse_relocations(data["relocations"]) if "relocations" in data else None

    return LibraryManifest(
        version=MANIFEST_FORMAT_VERSION,
        libraries=[_parse_entry(raw, i) for i, raw in enumerate(libraries)],
        repositories=list(repositories),
        relocations=relocations,
    )


def load_manifest(path: Path) -> LibraryManifest:
    """Read and parse a manifest file.

    Raises:
        ManifestFormatError: If the file cannot be read or parsed.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as err:
        msg = f"Cannot read manifest {path}: {err}"
        raise ManifestFormatError(msg) from err
    return parse_manifest(text)
