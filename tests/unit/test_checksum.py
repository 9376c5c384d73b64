"""Tests for artifact checksums."""

from __future__ import annotations

import base64
import hashlib
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


class TestChecksumComputer:
    """Tests for ChecksumComputer."""

    def test_empty_digest(self) -> None:
        """SHA-256 of no bytes has the well-known base64 value."""
        from libby_manifest.checksum import ChecksumComputer

        assert ChecksumComputer().digest(b"") == "47DEQpj8HBSa+/TImW+5JCeuQeRkm5NMpJWZG3hSuFU="

    def test_digest_is_base64_sha256(self) -> None:
        """Digest is the standard base64 of the raw SHA-256 bytes."""
        from libby_manifest.checksum import ChecksumComputer

        data = b"PK\x03\x04 not really a jar"
        expected = base64.b64encode(hashlib.sha256(data).digest()).decode("ascii")

        digest = ChecksumComputer().digest(data)

        assert digest == expected
        assert len(base64.b64decode(digest)) == 32

    def test_unknown_algorithm_is_configuration_error(self) -> None:
        """Unavailable algorithms fail at construction."""
        from libby_manifest.checksum import ChecksumComputer
        from libby_manifest.errors import ConfigurationError

        with pytest.raises(ConfigurationError, match="not available"):
            ChecksumComputer("definitely-not-a-hash")

    @pytest.mark.parametrize("algorithm", ["sha1", "sha224", "sha512"])
    def test_non_256_bit_algorithm_rejected(self, algorithm: str) -> None:
        """Only 256-bit digests are accepted by the runtime loader."""
        from libby_manifest.checksum import ChecksumComputer
        from libby_manifest.errors import ConfigurationError

        with pytest.raises(ConfigurationError, match="expected 256"):
            ChecksumComputer(algorithm)

    def test_checksum_file_reads_whole_file(self, tmp_path: Path) -> None:
        """File checksum covers the complete content."""
        from libby_manifest.checksum import ChecksumComputer

        data = bytes(range(256)) * 4096
        jar = tmp_path / "big.jar"
        jar.write_bytes(data)

        computer = ChecksumComputer()
        assert computer.checksum_file(jar) == computer.digest(data)

    def test_missing_file_raises_artifact_read_error(self, tmp_path: Path) -> None:
        """A missing artifact is fatal and names the dependency."""
        from libby_manifest.checksum import ChecksumComputer
        from libby_manifest.errors import ArtifactReadError
        from libby_manifest.types import DependencyCoordinate

        missing = tmp_path / "missing.jar"
        coord = DependencyCoordinate("com.example", "core", "1.2.0", path=missing)

        with pytest.raises(ArtifactReadError, match="com.example:core:1.2.0") as exc_info:
            ChecksumComputer().checksum_artifact(coord)

        assert exc_info.value.path == missing
        assert exc_info.value.coordinate == coord
        assert isinstance(exc_info.value.cause, OSError)

    def test_directory_is_unreadable(self, tmp_path: Path) -> None:
        """A directory in place of an artifact is an ArtifactReadError."""
        from libby_manifest.checksum import ChecksumComputer
        from libby_manifest.errors import ArtifactReadError

        with pytest.raises(ArtifactReadError):
            ChecksumComputer().checksum_file(tmp_path)

    def test_unresolved_path_raises(self) -> None:
        """A coordinate without a file cannot be checksummed."""
        from libby_manifest.checksum import ChecksumComputer
        from libby_manifest.errors import ArtifactReadError
        from libby_manifest.types import DependencyCoordinate

        with pytest.raises(ArtifactReadError, match="no artifact file"):
            ChecksumComputer().checksum_artifact(DependencyCoordinate("a", "b", "1"))
