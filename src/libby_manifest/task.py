"""Manifest task: build, serialize and persist libby.json for one build."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

from libby_manifest.manifest.builder import ManifestBuilder
from libby_manifest.manifest.writer import write_atomic

if TYPE_CHECKING:
    from pathlib import Path

    from libby_manifest.build import BuildDescription
    from libby_manifest.manifest.model import LibraryManifest

logger = structlog.get_logger()

DEFAULT_MANIFEST_PATH = "libby/libby.json"


@dataclass(frozen=True)
class TaskResult:
    """Outcome of a manifest task run.

    Attributes:
        output_path: Where libby.json was written.
        resource_dir: Directory to register as a resource root so the
            manifest ships inside the packaged artifact.
        manifest: The manifest that was written.
    """

    output_path: Path
    resource_dir: Path
    manifest: LibraryManifest


class ManifestTask:
    """Generates libby.json from a build description.

    Example:
        >>> task = ManifestTask(BuildDescription.load(Path("build.json")), build_dir=Path("build"))
        >>> result = task.run()
        >>> result.output_path
        PosixPath("build/libby/libby.json")
    """

    def __init__(
        self,
        description: BuildDescription,
        *,
        build_dir: Path,
        manifest_path: str = DEFAULT_MANIFEST_PATH,
        output: Path | None = None,
    ) -> None:
        """Initialize the task.

        Args:
            description: Resolved build graph and task configuration.
            build_dir: Build output directory.
            manifest_path: Manifest location relative to build_dir.
            output: Explicit output file, overriding build_dir/manifest_path.
        """
        self.description = description
        self.output_path = output if output is not None else build_dir / manifest_path

    def run(self) -> TaskResult:
        """Build the manifest and write it atomically.

        Nothing is written unless the whole manifest was generated.

        Raises:
            ConfigurationError: If patterns or the hash algorithm are invalid.
            ArtifactReadError: If an artifact that needs a checksum is unreadable.
            OutputWriteError: If the manifest cannot be written.
        """
        # Validate configuration before touching any artifact.
        filter_config = self.description.filter_config()
        builder = ManifestBuilder(
            filter_config,
            relocation_source=self.description.relocation_source(),
        )

        manifest = builder.build(
            self.description.coordinates(),
            self.description.repository_declarations(),
        )
        content = manifest.to_json()

        write_atomic(self.output_path, content)
        logger.info(
            "manifest_task_complete",
            path=str(self.output_path),
            fingerprint=manifest.fingerprint(),
        )

        return TaskResult(
            output_path=self.output_path,
            resource_dir=self.output_path.parent,
            manifest=manifest,
        )
