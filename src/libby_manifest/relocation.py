"""Relocation data for the manifest.

A relocation source answers one question for the builder: which package
prefixes does the repackaging step rewrite? ``None`` means the build has no
repackaging step at all; an empty tuple means the step exists but yields no
usable rules. Extraction is best-effort and never fails the build.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable

import structlog

from libby_manifest._internal.introspection import (
    find_task,
    is_simple_relocator,
    read_relocators,
    read_simple_relocation,
    relocator_kind,
)
from libby_manifest.errors import RelocationIntrospectionError
from libby_manifest.types.relocation import RelocationMapping

logger = structlog.get_logger()

SHADOW_TASK_NAME = "shadowJar"


@runtime_checkable
class RelocationSource(Protocol):
    """Supplies relocation mappings to the manifest builder."""

    def extract(self) -> tuple[RelocationMapping, ...] | None:
        """Return mappings in extraction order, or None if not configured."""
        ...


class NoRelocationSource:
    """The build has no repackaging step."""

    def extract(self) -> tuple[RelocationMapping, ...] | None:
        return None


class StaticRelocationSource:
    """Relocations declared directly through a public API."""

    def __init__(self, mappings: Iterable[RelocationMapping | tuple[str, str]]) -> None:
        self.mappings = tuple(
            m if isinstance(m, RelocationMapping) else RelocationMapping(*m) for m in mappings
        )

    def extract(self) -> tuple[RelocationMapping, ...] | None:
        return self.mappings


class ShadowRelocationSource:
    """Reads relocations from a shadow-style repackaging task.

    Example:
        >>> source = ShadowRelocationSource(build_tasks)
        >>> source.extract()
        (RelocationMapping(from_prefix="com.google", to_prefix="app.libs.google"),)
    """

    def __init__(
        self,
        tasks: Mapping[str, Any] | None,
        *,
        task_name: str = SHADOW_TASK_NAME,
    ) -> None:
        """Initialize the source.

        Args:
            tasks: Configured build tasks by name.
            task_name: Name of the repackaging task.
        """
        self.tasks = tasks
        self.task_name = task_name

    def extract(self) -> tuple[RelocationMapping, ...] | None:
        """Extract relocations, degrading to an empty tuple on any failure."""
        task = find_task(self.tasks, self.task_name)
        if task is None:
            logger.debug(
                "repackaging_task_not_configured",
                task=self.task_name,
            )
            return None

        try:
            relocators = read_relocators(task)
        except RelocationIntrospectionError as err:
            logger.debug(
                "relocators_unreadable",
                task=self.task_name,
                error=str(err),
            )
            return ()

        mappings: list[RelocationMapping] = []
        seen_prefixes: set[str] = set()
        for index, relocator in enumerate(relocators):
            if not is_simple_relocator(relocator):
                logger.debug(
                    "unsupported_relocator",
                    task=self.task_name,
                    index=index,
                    kind=relocator_kind(relocator),
                )
                continue
            try:
                from_prefix, to_prefix = read_simple_relocation(relocator)
            except RelocationIntrospectionError as err:
                logger.debug(
                    "relocation_introspection_failed",
                    task=self.task_name,
                    index=index,
                    error=str(err),
                )
                continue
            if from_prefix in seen_prefixes:
                logger.debug(
                    "duplicate_relocation_skipped",
                    task=self.task_name,
                    index=index,
                    from_prefix=from_prefix,
                )
                continue
            seen_prefixes.add(from_prefix)
            mappings.append(RelocationMapping(from_prefix=from_prefix, to_prefix=to_prefix))

        logger.debug(
            "relocations_extracted",
            task=self.task_name,
            relocation_count=len(mappings),
        )
        return tuple(mappings)
