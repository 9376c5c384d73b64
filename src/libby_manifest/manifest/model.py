"""Manifest model matching the libby.json wire format.

The runtime loader reads this document to download, verify and relocate
dependencies on startup.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from libby_manifest.manifest.serialization import encode_namespace, serialize_manifest

if TYPE_CHECKING:
    from libby_manifest.types.coordinate import DependencyCoordinate
    from libby_manifest.types.relocation import RelocationMapping

# Bump only together with the runtime loader; readers reject other versions.
MANIFEST_FORMAT_VERSION = 0


@dataclass
class ManifestEntry:
    """Library entry in the manifest (serializable form of a coordinate).

    ``classifier`` and ``checksum`` are None when the key is absent on the wire.
    """

    group: str
    name: str
    version: str
    classifier: str | None = None
    checksum: str | None = None

    @classmethod
    def from_coordinate(
        cls,
        coordinate: DependencyCoordinate,
        checksum: str | None = None,
    ) -> ManifestEntry:
        """Create a ManifestEntry from a resolved coordinate.

        Args:
            coordinate: The resolved dependency.
            checksum: Base64 digest of the artifact, if one is recorded.

        Returns:
            ManifestEntry ready for serialization.
        """
        return cls(
            group=coordinate.group,
            name=coordinate.name,
            version=coordinate.version,
            classifier=coordinate.classifier,
            checksum=checksum,
        )

    @property
    def identity(self) -> tuple[str, str, str, str | None]:
        """Tuple identifying this entry within a manifest."""
        return (self.group, self.name, self.version, self.classifier)

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire dictionary, omitting absent optional keys."""
        data: dict[str, Any] = {
            "group": encode_namespace(self.group),
            "name": self.name,
            "version": self.version,
        }
        if self.classifier is not None:
            data["classifier"] = self.classifier
        if self.checksum is not None:
            data["checksum"] = self.checksum
        return data


@dataclass
class LibraryManifest:
    """Complete libby.json document.

    ``relocations`` is None when the build has no repackaging step, and an
    empty tuple when the step exists but yields no usable rules.
    """

    version: int = MANIFEST_FORMAT_VERSION
    libraries: list[ManifestEntry] = field(default_factory=list)
    repositories: list[str] = field(default_factory=list)
    relocations: tuple[RelocationMapping, ...] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire dictionary in wire key order."""
        data: dict[str, Any] = {
            "version": self.version,
            "libraries": [entry.to_dict() for entry in self.libraries],
            "repositories": list(self.repositories),
        }
        if self.relocations is not None:
            relocations: dict[str, str] = {}
            for mapping in self.relocations:
                # First rule for a prefix wins.
                relocations.setdefault(
                    encode_namespace(mapping.from_prefix), encode_namespace(mapping.to_prefix)
                )
            data["relocations"] = relocations
        return data

    def to_json(self) -> str:
        """Serialize to the libby.json wire format.

        Returns:
            Compact JSON string, identical for identical manifests.
        """
        return serialize_manifest(self)

    def fingerprint(self) -> str:
        """Compute SHA-256 fingerprint of the serialized form.

        Returns:
            64-character hex string.
        """
        return hashlib.sha256(self.to_json().encode("utf-8")).hexdigest()
