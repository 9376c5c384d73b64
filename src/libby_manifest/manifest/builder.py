"""Manifest builder for creating libby.json documents."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from libby_manifest.checksum import ChecksumComputer
from libby_manifest.filtering import FilterConfig
from libby_manifest.manifest.model import MANIFEST_FORMAT_VERSION, LibraryManifest, ManifestEntry
from libby_manifest.relocation import NoRelocationSource

if TYPE_CHECKING:
    from collections.abc import Iterable

    from libby_manifest.relocation import RelocationSource
    from libby_manifest.types.coordinate import DependencyCoordinate, RepositoryDeclaration

logger = structlog.get_logger()


class ManifestBuilder:
    """Builder for creating dependency manifests.

    The builder holds no state between builds; every call to ``build`` starts
    from the inputs it is given.

    Example:
        >>> builder = ManifestBuilder(FilterConfig(excluded_dependencies=(r"org\\.slf4j:.*",)))
        >>> manifest = builder.build(resolved_coordinates, declared_repositories)
    """

    def __init__(
        self,
        filter_config: FilterConfig | None = None,
        *,
        relocation_source: RelocationSource | None = None,
        checksum: ChecksumComputer | None = None,
    ) -> None:
        """Initialize the manifest builder.

        Args:
            filter_config: Exclusion and no-checksum patterns.
            relocation_source: Where relocations come from (none by default).
            checksum: Digest implementation (SHA-256 by default).
        """
        self.filter_config = filter_config or FilterConfig()
        self.relocation_source = relocation_source or NoRelocationSource()
        self.checksum = checksum or ChecksumComputer()

    def build_entries(self, coordinates: Iterable[DependencyCoordinate]) -> list[ManifestEntry]:
        """Convert resolved coordinates into manifest entries, in resolution order.

        Raises:
            ArtifactReadError: If an artifact that needs a checksum is unreadable.
        """
        entries: list[ManifestEntry] = []
        seen: set[tuple[str, str, str, str | None]] = set()

        for coordinate in coordinates:
            decision = self.filter_config.evaluate(coordinate)
            if decision.excluded:
                logger.debug("dependency_excluded", dependency=str(coordinate))
                continue

            if coordinate.identity in seen:
                logger.debug(
                    "duplicate_dependency_skipped",
                    dependency=str(coordinate),
                    classifier=coordinate.classifier,
                )
                continue
            seen.add(coordinate.identity)

            checksum: str | None = None
            if decision.skip_checksum:
                logger.debug(
                    "checksum_skipped",
                    dependency=str(coordinate),
                    by_pattern=decision.skip_checksum_by_pattern,
                    by_type=decision.skip_checksum_by_type,
                )
            else:
                checksum = self.checksum.checksum_artifact(coordinate)

            entries.append(ManifestEntry.from_coordinate(coordinate, checksum))

        return entries

    def build(
        self,
        coordinates: Iterable[DependencyCoordinate],
        repositories: Iterable[RepositoryDeclaration] = (),
    ) -> LibraryManifest:
        """Build a manifest from the resolved build graph.

        Args:
            coordinates: Resolved dependencies in resolution order.
            repositories: Declared repositories in declaration order.

        Returns:
            Complete LibraryManifest ready for serialization.

        Raises:
            ArtifactReadError: If an artifact that needs a checksum is unreadable.
        """
        entries = self.build_entries(coordinates)

        # Only network repositories are usable by the runtime loader.
        repository_urls = [repo.url for repo in repositories if repo.is_network]

        relocations = self.relocation_source.extract()

        manifest = LibraryManifest(
            version=MANIFEST_FORMAT_VERSION,
            libraries=entries,
            repositories=repository_urls,
            relocations=relocations,
        )
        logger.info(
            "manifest_built",
            library_count=len(entries),
            repository_count=len(repository_urls),
            relocation_count=None if relocations is None else len(relocations),
        )
        return manifest
