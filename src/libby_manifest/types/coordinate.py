"""Resolved dependency and repository types supplied by the host build."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from urllib.parse import urlsplit

# Artifact type that carries a checksum in the manifest.
JAR_TYPE = "jar"

_NETWORK_SCHEMES = frozenset({"http", "https"})


@dataclass(frozen=True)
class DependencyCoordinate:
    """A dependency resolved by the build graph.

    Identity is (group, name, version, classifier); the artifact type and the
    file on disk only describe how it is packaged.

    Example:
        >>> coord = DependencyCoordinate("com.example", "core", "1.2.0")
        >>> str(coord)
        "com.example:core:1.2.0"
    """

    group: str
    name: str
    version: str
    classifier: str | None = None
    type: str = JAR_TYPE
    path: Path | None = None

    def __str__(self) -> str:
        """Return the canonical group:name:version notation."""
        return f"{self.group}:{self.name}:{self.version}"

    @property
    def identity(self) -> tuple[str, str, str, str | None]:
        """Tuple identifying this dependency within a manifest."""
        return (self.group, self.name, self.version, self.classifier)

    @property
    def is_jar(self) -> bool:
        """Whether the artifact is a binary archive."""
        return self.type == JAR_TYPE


class RepositoryKind(str, Enum):
    """Kind of repository declared in the build."""

    MAVEN = "maven"
    IVY = "ivy"
    FLAT_DIR = "flat_dir"
    MAVEN_LOCAL = "maven_local"


@dataclass(frozen=True)
class RepositoryDeclaration:
    """A repository declared by the build, in declaration order."""

    url: str
    kind: RepositoryKind = RepositoryKind.MAVEN

    @property
    def is_network(self) -> bool:
        """Whether a runtime loader can fetch from this repository over HTTP(S)."""
        if self.kind not in (RepositoryKind.MAVEN, RepositoryKind.IVY):
            return False
        return urlsplit(self.url).scheme.lower() in _NETWORK_SCHEMES
