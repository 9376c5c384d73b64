"""libby-manifest.

Builds the libby.json manifest a runtime dependency loader reads to download,
checksum-verify and relocate dependencies at startup.

Example:
    >>> from libby_manifest import FilterConfig, ManifestBuilder
    >>> from libby_manifest.types import DependencyCoordinate, RepositoryDeclaration
    >>>
    >>> builder = ManifestBuilder(FilterConfig(no_checksum_dependencies=(r"com\\.example:.*",)))
    >>> manifest = builder.build(
    ...     [DependencyCoordinate("com.example", "core", "1.2.0", path=jar_path)],
    ...     [RepositoryDeclaration("https://repo1.maven.org/maven2/")],
    ... )
    >>> manifest.to_json()
    '{"version":0,"libraries":[{"group":"com{}example","name":"core","version":"1.2.0"}],...}'
"""

from __future__ import annotations

__version__ = "0.1.0"

from libby_manifest.checksum import ChecksumComputer
from libby_manifest.errors import (
    ArtifactReadError,
    ConfigurationError,
    LibbyManifestError,
    ManifestFormatError,
    OutputWriteError,
    RelocationIntrospectionError,
    UnsupportedManifestVersionError,
)
from libby_manifest.filtering import FilterConfig, FilterDecision
from libby_manifest.manifest import (
    MANIFEST_FORMAT_VERSION,
    LibraryManifest,
    ManifestBuilder,
    ManifestEntry,
    parse_manifest,
    serialize_manifest,
)
from libby_manifest.relocation import (
    NoRelocationSource,
    RelocationSource,
    ShadowRelocationSource,
    StaticRelocationSource,
)
from libby_manifest.types import (
    DependencyCoordinate,
    RelocationMapping,
    RepositoryDeclaration,
    RepositoryKind,
)

__all__ = [
    "MANIFEST_FORMAT_VERSION",
    "ArtifactReadError",
    "ChecksumComputer",
    "ConfigurationError",
    "DependencyCoordinate",
    "FilterConfig",
    "FilterDecision",
    "LibbyManifestError",
    "LibraryManifest",
    "ManifestBuilder",
    "ManifestEntry",
    "ManifestFormatError",
    "NoRelocationSource",
    "OutputWriteError",
    "RelocationIntrospectionError",
    "RelocationMapping",
    "RelocationSource",
    "RepositoryDeclaration",
    "RepositoryKind",
    "ShadowRelocationSource",
    "StaticRelocationSource",
    "UnsupportedManifestVersionError",
    "__version__",
    "parse_manifest",
    "serialize_manifest",
]
