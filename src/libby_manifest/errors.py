"""Error types raised while building or reading a libby manifest.

Fatal errors (configuration, artifact reads, output writes) propagate to the
caller and abort the build. Relocation introspection errors are caught per
rule by the relocation extractor and never escape it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from libby_manifest.types.coordinate import DependencyCoordinate


class LibbyManifestError(Exception):
    """Base class for all libby manifest errors."""


class ConfigurationError(LibbyManifestError):
    """Invalid configuration detected before any artifact is processed."""


class ArtifactReadError(LibbyManifestError):
    """The binary content of an artifact that needs a checksum is unreadable."""

    def __init__(
        self,
        coordinate: DependencyCoordinate | None,
        path: Path | None,
        cause: BaseException | None = None,
    ) -> None:
        self.coordinate = coordinate
        self.path = path
        self.cause = cause

        subject = str(coordinate) if coordinate is not None else "artifact"
        if path is None:
            msg = f"Cannot read {subject}: no artifact file was resolved"
        else:
            msg = f"Cannot read {subject} from {path}"
        if cause is not None:
            msg = f"{msg}: {cause}"
        super().__init__(msg)


class RelocationIntrospectionError(LibbyManifestError):
    """A repackaging rule could not be read from the tool's configuration."""


class OutputWriteError(LibbyManifestError):
    """The manifest could not be written to its destination."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write manifest to {path}: {cause}")


class ManifestFormatError(LibbyManifestError):
    """A serialized manifest is not structurally valid."""


class UnsupportedManifestVersionError(ManifestFormatError):
    """A serialized manifest declares a format version this reader does not know."""

    def __init__(self, version: object, supported: int) -> None:
        self.version = version
        self.supported = supported
        super().__init__(
            f"Unsupported manifest version {version!r} (this reader understands {supported})"
        )
