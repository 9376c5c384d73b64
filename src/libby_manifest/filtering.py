"""Dependency exclusion and checksum-skip patterns.

Patterns are regular expressions matched against the whole canonical
``group:name:version`` string of a dependency. For example
``org\\.company:library:.*`` matches every version of ``org.company:library``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from libby_manifest.errors import ConfigurationError

if TYPE_CHECKING:
    from libby_manifest.types.coordinate import DependencyCoordinate


def _compile_patterns(patterns: tuple[str, ...], setting: str) -> tuple[re.Pattern[str], ...]:
    compiled: list[re.Pattern[str]] = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as err:
            msg = f"Invalid {setting} pattern {pattern!r}: {err}"
            raise ConfigurationError(msg) from err
    return tuple(compiled)


def _matches_any(patterns: tuple[re.Pattern[str], ...], value: str) -> bool:
    return any(p.fullmatch(value) is not None for p in patterns)


@dataclass(frozen=True)
class FilterDecision:
    """Outcome of filtering a single dependency.

    The two checksum-skip reasons are kept apart so callers can tell which one
    applied.
    """

    excluded: bool
    skip_checksum_by_pattern: bool
    skip_checksum_by_type: bool

    @property
    def skip_checksum(self) -> bool:
        """Whether the manifest entry must be emitted without a checksum."""
        return self.skip_checksum_by_pattern or self.skip_checksum_by_type


@dataclass(frozen=True)
class FilterConfig:
    """Immutable pattern configuration, validated on construction.

    Attributes:
        excluded_dependencies: Patterns of dependencies left out of the manifest.
        no_checksum_dependencies: Patterns of dependencies emitted without checksum.

    Raises:
        ConfigurationError: If any pattern does not compile.
    """

    excluded_dependencies: tuple[str, ...] = ()
    no_checksum_dependencies: tuple[str, ...] = ()

    _excluded: tuple[re.Pattern[str], ...] = field(init=False, repr=False, compare=False)
    _no_checksum: tuple[re.Pattern[str], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Freeze the pattern lists and compile every pattern."""
        excluded = tuple(self.excluded_dependencies)
        no_checksum = tuple(self.no_checksum_dependencies)
        object.__setattr__(self, "excluded_dependencies", excluded)
        object.__setattr__(self, "no_checksum_dependencies", no_checksum)
        object.__setattr__(self, "_excluded", _compile_patterns(excluded, "excluded dependency"))
        object.__setattr__(
            self, "_no_checksum", _compile_patterns(no_checksum, "no-checksum dependency")
        )

    @classmethod
    def from_patterns(
        cls,
        excluded: Iterable[str] = (),
        no_checksum: Iterable[str] = (),
    ) -> FilterConfig:
        """Build a config from any iterables of pattern strings."""
        return cls(
            excluded_dependencies=tuple(excluded),
            no_checksum_dependencies=tuple(no_checksum),
        )

    def is_excluded(self, coordinate: DependencyCoordinate) -> bool:
        """Whether the dependency is left out of the manifest entirely."""
        return _matches_any(self._excluded, str(coordinate))

    def skips_checksum(self, coordinate: DependencyCoordinate) -> bool:
        """Whether a no-checksum pattern matches the dependency."""
        return _matches_any(self._no_checksum, str(coordinate))

    def evaluate(self, coordinate: DependencyCoordinate) -> FilterDecision:
        """Decide how a dependency appears in the manifest."""
        return FilterDecision(
            excluded=self.is_excluded(coordinate),
            skip_checksum_by_pattern=self.skips_checksum(coordinate),
            skip_checksum_by_type=not coordinate.is_jar,
        )
