"""Artifact checksums embedded in the manifest."""

from __future__ import annotations

import base64
import hashlib
from typing import TYPE_CHECKING

from libby_manifest.errors import ArtifactReadError, ConfigurationError

if TYPE_CHECKING:
    from pathlib import Path

    from libby_manifest.types.coordinate import DependencyCoordinate

CHECKSUM_ALGORITHM = "sha256"

# The runtime loader verifies 256-bit digests.
CHECKSUM_DIGEST_SIZE = 32


class ChecksumComputer:
    """Computes base64-encoded digests of artifact content.

    Example:
        >>> ChecksumComputer().digest(b"")
        "47DEQpj8HBSa+/TImW+5JCeuQeRkm5NMpJWZG3hSuFU="
    """

    def __init__(self, algorithm: str = CHECKSUM_ALGORITHM) -> None:
        """Initialize the computer.

        Args:
            algorithm: hashlib algorithm name.

        Raises:
            ConfigurationError: If the runtime does not provide the algorithm,
                or it does not produce a 256-bit digest.
        """
        try:
            digest_size = hashlib.new(algorithm).digest_size
        except ValueError as err:
            msg = f"Checksum algorithm {algorithm!r} is not available: {err}"
            raise ConfigurationError(msg) from err
        if digest_size != CHECKSUM_DIGEST_SIZE:
            msg = (
                f"Checksum algorithm {algorithm!r} produces {digest_size * 8}-bit digests, "
                f"expected {CHECKSUM_DIGEST_SIZE * 8}"
            )
            raise ConfigurationError(msg)
        self.algorithm = algorithm

    def digest(self, data: bytes) -> str:
        """Return the base64 digest of the given bytes."""
        hashed = hashlib.new(self.algorithm, data).digest()
        return base64.b64encode(hashed).decode("ascii")

    def checksum_file(self, path: Path, coordinate: DependencyCoordinate | None = None) -> str:
        """Read the whole artifact file and return its digest.

        Args:
            path: Artifact file on disk.
            coordinate: Dependency the file belongs to (for error reporting).

        Raises:
            ArtifactReadError: If the file cannot be read completely.
        """
        try:
            data = path.read_bytes()
        except OSError as err:
            raise ArtifactReadError(coordinate, path, err) from err
        return self.digest(data)

    def checksum_artifact(self, coordinate: DependencyCoordinate) -> str:
        """Digest the file a resolved dependency points at.

        Raises:
            ArtifactReadError: If no file was resolved or it cannot be read.
        """
        if coordinate.path is None:
            raise ArtifactReadError(coordinate, None)
        return self.checksum_file(coordinate.path, coordinate)
