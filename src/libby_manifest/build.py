"""Build description handed over by the host build.

The host build tool resolves dependencies and repositories and describes the
result in a JSON document. These models validate that document and adapt it
to the types the manifest builder consumes.

Example document:

    {
      "dependencies": [
        {"group": "com.example", "name": "core", "version": "1.2.0",
         "type": "jar", "file": "libs/core-1.2.0.jar"}
      ],
      "repositories": [{"url": "https://repo1.maven.org/maven2/"}],
      "libby": {"excludedDependencies": [], "noChecksumDependencies": []},
      "tasks": {"shadowJar": {"relocators": [
        {"kind": "simple", "pattern": "com.google", "shadedPattern": "app.libs.google"}
      ]}}
    }
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError, field_validator

from libby_manifest.errors import ConfigurationError
from libby_manifest.filtering import FilterConfig
from libby_manifest.relocation import ShadowRelocationSource
from libby_manifest.types.coordinate import (
    JAR_TYPE,
    DependencyCoordinate,
    RepositoryDeclaration,
    RepositoryKind,
)

logger = structlog.get_logger()


class ResolvedArtifact(BaseModel):
    """A dependency artifact resolved by the host build."""

    model_config = ConfigDict(frozen=True)

    group: str
    name: str
    version: str
    classifier: str | None = None
    type: str = JAR_TYPE
    file: Path | None = None


class RepositoryModel(BaseModel):
    """A repository declared in the host build."""

    model_config = ConfigDict(frozen=True)

    url: str
    kind: RepositoryKind = RepositoryKind.MAVEN


class LibbyExtension(BaseModel):
    """Pattern configuration of the manifest task.

    Patterns are regexes matched against "group:name:version".
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    excluded_dependencies: list[str] = Field(default_factory=list, alias="excludedDependencies")
    no_checksum_dependencies: list[str] = Field(
        default_factory=list, alias="noChecksumDependencies"
    )


class Relocator(BaseModel):
    """A relocator configured on the repackaging task.

    Unknown relocator kinds carry arbitrary extra fields.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    kind: str = "simple"
    pattern: str | None = None
    shaded_pattern: str | None = Field(default=None, alias="shadedPattern")


class RepackagingTask(BaseModel):
    """Configuration of a repackaging (shadow) task.

    Relocators are validated one by one. A relocator that does not validate is
    kept raw so one bad rule does not hide its siblings.
    """

    model_config = ConfigDict(frozen=True)

    relocators: list[Any] = Field(default_factory=list)

    @field_validator("relocators", mode="before")
    @classmethod
    def validate_each_relocator(cls, value: Any) -> Any:
        """Validate every relocator on its own."""
        if not isinstance(value, list):
            return value
        relocators: list[Any] = []
        for index, raw in enumerate(value):
            try:
                relocators.append(Relocator.model_validate(raw))
            except ValidationError as err:
                logger.debug(
                    "relocator_not_validated",
                    index=index,
                    error_count=err.error_count(),
                )
                relocators.append(raw)
        return relocators


class BuildDescription(BaseModel):
    """Everything the manifest task needs from the host build."""

    model_config = ConfigDict(populate_by_name=True)

    dependencies: list[ResolvedArtifact] = Field(default_factory=list)
    repositories: list[RepositoryModel] = Field(default_factory=list)
    libby: LibbyExtension = Field(default_factory=LibbyExtension)
    tasks: dict[str, Any] = Field(default_factory=dict)

    _base_dir: Path = PrivateAttr(default_factory=Path.cwd)

    @classmethod
    def load(cls, path: Path) -> BuildDescription:
        """Load a build description from a JSON file.

        Relative artifact paths are resolved against the file's directory.

        Raises:
            ConfigurationError: If the file is unreadable or invalid.
        """
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as err:
            msg = f"Cannot read build description {path}: {err}"
            raise ConfigurationError(msg) from err
        return cls.parse(text, base_dir=path.resolve().parent)

    @classmethod
    def parse(cls, text: str, *, base_dir: Path | None = None) -> BuildDescription:
        """Parse a build description from JSON text.

        Raises:
            ConfigurationError: If the document is invalid.
        """
        try:
            description = cls.model_validate_json(text)
        except ValidationError as err:
            msg = f"Invalid build description: {err}"
            raise ConfigurationError(msg) from err
        if base_dir is not None:
            description._base_dir = base_dir
        logger.debug(
            "build_description_loaded",
            dependency_count=len(description.dependencies),
            repository_count=len(description.repositories),
            tasks=sorted(description.tasks),
        )
        return description

    def _resolve_file(self, file: Path | None) -> Path | None:
        if file is None or file.is_absolute():
            return file
        return self._base_dir / file

    def coordinates(self) -> list[DependencyCoordinate]:
        """Resolved dependencies in resolution order."""
        return [
            DependencyCoordinate(
                group=artifact.group,
                name=artifact.name,
                version=artifact.version,
                classifier=artifact.classifier,
                type=artifact.type,
                path=self._resolve_file(artifact.file),
            )
            for artifact in self.dependencies
        ]

    def repository_declarations(self) -> list[RepositoryDeclaration]:
        """Declared repositories in declaration order."""
        return [RepositoryDeclaration(url=repo.url, kind=repo.kind) for repo in self.repositories]

    def filter_config(self) -> FilterConfig:
        """Validated pattern configuration.

        Raises:
            ConfigurationError: If any pattern does not compile.
        """
        return FilterConfig.from_patterns(
            excluded=self.libby.excluded_dependencies,
            no_checksum=self.libby.no_checksum_dependencies,
        )

    def repackaging_tasks(self) -> dict[str, Any]:
        """Configured tasks, with recognizable repackaging tasks validated.

        Tasks that do not validate are handed over raw; the relocation
        extractor copes with whatever shape they have.
        """
        tasks: dict[str, Any] = {}
        for name, raw in self.tasks.items():
            try:
                tasks[name] = RepackagingTask.model_validate(raw)
            except ValidationError:
                tasks[name] = raw
        return tasks

    def relocation_source(self) -> ShadowRelocationSource:
        """Relocation source reading the repackaging task, if any."""
        return ShadowRelocationSource(self.repackaging_tasks())
