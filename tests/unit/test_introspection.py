"""Tests for repackaging-tool introspection utilities."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from libby_manifest._internal.introspection import (
    find_task,
    is_simple_relocator,
    read_relocators,
    read_simple_relocation,
    relocator_kind,
)
from libby_manifest.errors import RelocationIntrospectionError


class SimpleRelocator:
    """Stand-in for a tool relocator keeping its rule in private fields."""

    def __init__(self, pattern: str, shaded_pattern: str) -> None:
        self._pattern = pattern
        self._shaded_pattern = shaded_pattern


class ServiceFileTransformer:
    """A relocator shape the extractor does not understand."""


@dataclass
class Provider:
    """Lazily configured value with a ``get()`` accessor."""

    value: object

    def get(self) -> object:
        return self.value


class TestFindTask:
    """Tests for find_task."""

    def test_missing_task_is_none(self) -> None:
        assert find_task({"jar": object()}, "shadowJar") is None

    def test_no_tasks_is_none(self) -> None:
        assert find_task(None, "shadowJar") is None
        assert find_task({}, "shadowJar") is None

    def test_finds_task_by_name(self) -> None:
        task = object()
        assert find_task({"shadowJar": task}, "shadowJar") is task


class TestReadRelocators:
    """Tests for read_relocators."""

    def test_reads_attribute_list(self) -> None:
        """Relocators exposed as a plain attribute are returned."""
        relocator = SimpleRelocator("a", "b")

        @dataclass
        class Task:
            relocators: list[object]

        assert read_relocators(Task([relocator])) == [relocator]

    def test_unwraps_provider(self) -> None:
        """Relocators behind a provider are resolved."""
        relocator = SimpleRelocator("a", "b")

        @dataclass
        class Task:
            relocators: Provider

        assert read_relocators(Task(Provider([relocator]))) == [relocator]

    def test_reads_mapping_task(self) -> None:
        """Raw mapping tasks expose relocators by key."""
        assert read_relocators({"relocators": [{"kind": "simple"}]}) == [{"kind": "simple"}]

    def test_none_is_empty(self) -> None:
        """A task with no relocator collection yields no rules."""

        @dataclass
        class Task:
            relocators: object = None

        assert read_relocators(Task()) == []

    def test_task_without_relocators_raises(self) -> None:
        """Tasks that do not expose relocators cannot be introspected."""
        with pytest.raises(RelocationIntrospectionError, match="no relocators"):
            read_relocators(object())

    def test_failing_provider_raises(self) -> None:
        """A provider that fails to resolve is an introspection error."""

        class Broken:
            def get(self) -> object:
                raise RuntimeError("not configured yet")

        @dataclass
        class Task:
            relocators: Broken

        with pytest.raises(RelocationIntrospectionError, match="not configured yet"):
            read_relocators(Task(Broken()))

    def test_non_collection_raises(self) -> None:
        """A scalar in place of the relocator collection is rejected."""

        @dataclass
        class Task:
            relocators: object

        with pytest.raises(RelocationIntrospectionError, match="not a collection"):
            read_relocators(Task("com.google"))


class TestRelocatorShape:
    """Tests for relocator kind detection and field reading."""

    def test_kind_falls_back_to_class_name(self) -> None:
        assert relocator_kind(ServiceFileTransformer()) == "ServiceFileTransformer"
        assert relocator_kind({"kind": "simple"}) == "simple"

    def test_mapping_without_kind_is_simple(self) -> None:
        """Mappings default to the simple kind, like validated relocators."""
        relocator = {"pattern": "com.google", "shadedPattern": "app.google"}

        assert relocator_kind(relocator) == "simple"
        assert is_simple_relocator(relocator) is True

    def test_simple_relocator_detection(self) -> None:
        assert is_simple_relocator(SimpleRelocator("a", "b")) is True
        assert is_simple_relocator({"kind": "simple"}) is True
        assert is_simple_relocator(ServiceFileTransformer()) is False
        assert is_simple_relocator({"kind": "regex"}) is False

    def test_reads_private_fields(self) -> None:
        """Private pattern fields are read."""
        relocator = SimpleRelocator("com.google.gson", "app.libs.gson")

        assert read_simple_relocation(relocator) == ("com.google.gson", "app.libs.gson")

    def test_reads_mapping_fields(self) -> None:
        """Mapping relocators use camelCase shaded pattern keys."""
        relocator = {"kind": "simple", "pattern": "org.yaml", "shadedPattern": "app.libs.yaml"}

        assert read_simple_relocation(relocator) == ("org.yaml", "app.libs.yaml")

    def test_missing_fields_raise(self) -> None:
        """Changed internals surface as an introspection error."""
        with pytest.raises(RelocationIntrospectionError, match="has none of the fields"):
            read_simple_relocation({"kind": "simple", "from": "a", "to": "b"})

    def test_non_string_field_raises(self) -> None:
        """Fields of the wrong type are rejected."""
        with pytest.raises(RelocationIntrospectionError, match="expected str"):
            read_simple_relocation(SimpleRelocator(None, "b"))  # type: ignore[arg-type]
