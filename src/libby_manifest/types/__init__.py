"""Types describing what the host build resolved."""

from __future__ import annotations

from libby_manifest.types.coordinate import (
    JAR_TYPE,
    DependencyCoordinate,
    RepositoryDeclaration,
    RepositoryKind,
)
from libby_manifest.types.relocation import RelocationMapping

__all__ = [
    "JAR_TYPE",
    "DependencyCoordinate",
    "RelocationMapping",
    "RepositoryDeclaration",
    "RepositoryKind",
]
