"""Introspection of repackaging-tool configuration objects.

The repackaging tool does not expose its relocation rules through a public
contract, so they are read from whatever configuration object the host build
hands over. All knowledge of that object's shape lives here.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from libby_manifest.errors import RelocationIntrospectionError

DEFAULT_RELOCATOR_KIND = "simple"

# Relocator shapes understood as simple prefix-to-prefix rewrites.
SIMPLE_RELOCATOR_KINDS = frozenset({"simple", "SimpleRelocator"})

_PATTERN_ATTRS = ("pattern", "_pattern")
_SHADED_PATTERN_ATTRS = ("shaded_pattern", "shadedPattern", "_shaded_pattern")


def _unwrap_provider(value: Any) -> Any:
    """Resolve lazily configured values (callables or objects with ``get()``)."""
    getter = getattr(value, "get", None)
    if callable(getter) and not isinstance(value, Mapping):
        return getter()
    if callable(value) and not isinstance(value, type):
        return value()
    return value


def find_task(tasks: Mapping[str, Any] | None, name: str) -> Any | None:
    """Look up a configured task by name, returning None when absent."""
    if not tasks:
        return None
    return tasks.get(name)


def read_relocators(task: Any) -> list[Any]:
    """Read the relocator objects configured on a repackaging task.

    Raises:
        RelocationIntrospectionError: If the task does not expose relocators.
    """
    try:
        raw = task.relocators
    except AttributeError:
        if isinstance(task, Mapping) and "relocators" in task:
            raw = task["relocators"]
        else:
            msg = f"{type(task).__name__} has no relocators"
            raise RelocationIntrospectionError(msg) from None

    try:
        relocators = _unwrap_provider(raw)
    except Exception as err:
        msg = f"could not resolve relocators of {type(task).__name__}: {err}"
        raise RelocationIntrospectionError(msg) from err

    if relocators is None:
        return []
    if isinstance(relocators, (str, bytes)) or not isinstance(relocators, Iterable):
        msg = f"relocators of {type(task).__name__} is not a collection"
        raise RelocationIntrospectionError(msg)
    return list(relocators)


def relocator_kind(relocator: Any) -> str:
    """Return the declared kind of a relocator, or its class name.

    Relocators given as mappings without a kind are simple relocators.
    """
    if isinstance(relocator, Mapping):
        kind = relocator.get("kind", DEFAULT_RELOCATOR_KIND)
    else:
        kind = getattr(relocator, "kind", None)
    return kind if isinstance(kind, str) else type(relocator).__name__


def is_simple_relocator(relocator: Any) -> bool:
    """Whether the relocator is a plain prefix-to-prefix rewrite."""
    return relocator_kind(relocator) in SIMPLE_RELOCATOR_KINDS


def _lookup(relocator: Any, name: str) -> Any:
    if isinstance(relocator, Mapping):
        return relocator[name]
    return getattr(relocator, name)


def _read_field(relocator: Any, names: tuple[str, ...]) -> str:
    for name in names:
        try:
            value = _lookup(relocator, name)
        except (AttributeError, KeyError):
            continue
        if isinstance(value, str):
            return value
        msg = f"{relocator_kind(relocator)}.{name} is {type(value).__name__}, expected str"
        raise RelocationIntrospectionError(msg)

    msg = f"{relocator_kind(relocator)} has none of the fields {', '.join(names)}"
    raise RelocationIntrospectionError(msg)


def read_simple_relocation(relocator: Any) -> tuple[str, str]:
    """Read the (pattern, shaded pattern) pair of a simple relocator.

    Raises:
        RelocationIntrospectionError: If either side cannot be read.
    """
    return (
        _read_field(relocator, _PATTERN_ATTRS),
        _read_field(relocator, _SHADED_PATTERN_ATTRS),
    )
