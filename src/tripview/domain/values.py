"""Value categories for data headed into markup.

External data enters as arbitrary Python objects. :func:`classify` resolves
it once into a closed sum type so downstream code matches on four variants
instead of inspecting runtime types:

- :class:`TextValue` — any ``str`` (subclasses included)
- :class:`SequenceValue` — ordered sequences other than text and bytes
- :class:`MappingValue` — key/value mappings
- :class:`ScalarValue` — everything else, carried by identity

INVARIANT: ``unwrap(classify(x))`` has the same shape as ``x``. Scalars come
back as the very same object.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from tripview.errors import CyclicValueError, ValueDepthError

_BINARY_TYPES = (bytes, bytearray, memoryview)

# Containers allowed on one descent path. Classification, escaping and
# unwrapping each recurse once per level, so this keeps them all well under
# the interpreter recursion limit.
MAX_DEPTH = 100


@dataclass(frozen=True)
class TextValue:
    """A string leaf."""

    text: str


@dataclass(frozen=True)
class SequenceValue:
    """An ordered run of values. Tuples round-trip as tuples, the rest as lists."""

    items: tuple[Value, ...]
    as_tuple: bool = False


@dataclass(frozen=True)
class MappingValue:
    """Key/value entries in insertion order. Keys are kept verbatim."""

    entries: tuple[tuple[Hashable, Value], ...]


@dataclass(frozen=True)
class ScalarValue:
    """Any non-text, non-container leaf (numbers, booleans, None, objects)."""

    value: Any


type Value = TextValue | SequenceValue | MappingValue | ScalarValue


def classify(data: Any) -> Value:
    """Resolve *data* into the value sum type.

    Raises:
        CyclicValueError: If a container contains itself, directly or
            through nested containers. Shared references that do not loop
            back are fine.
        ValueDepthError: If containers nest more than :data:`MAX_DEPTH`
            levels deep.
    """
    return _classify(data, set())


def _classify(data: Any, active: set[int]) -> Value:
    if isinstance(data, str):
        return TextValue(str(data))
    if isinstance(data, Mapping):
        with _visiting(data, active):
            return MappingValue(
                tuple((key, _classify(item, active)) for key, item in data.items())
            )
    if isinstance(data, Sequence) and not isinstance(data, _BINARY_TYPES):
        with _visiting(data, active):
            return SequenceValue(
                tuple(_classify(item, active) for item in data),
                as_tuple=isinstance(data, tuple),
            )
    return ScalarValue(data)


@contextmanager
def _visiting(container: Any, active: set[int]) -> Iterator[None]:
    """Track containers on the current descent path."""
    key = id(container)
    if key in active:
        msg = "Cannot process a container that contains itself"
        raise CyclicValueError(msg)
    if len(active) >= MAX_DEPTH:
        msg = f"Cannot process containers nested more than {MAX_DEPTH} levels deep"
        raise ValueDepthError(msg)
    active.add(key)
    try:
        yield
    finally:
        active.discard(key)


def unwrap(value: Value) -> Any:
    """Rebuild plain Python data from a classified value."""
    match value:
        case TextValue(text):
            return text
        case SequenceValue(items, as_tuple):
            rebuilt = [unwrap(item) for item in items]
            return tuple(rebuilt) if as_tuple else rebuilt
        case MappingValue(entries):
            return {key: unwrap(item) for key, item in entries}
        case ScalarValue(scalar):
            return scalar
    msg = f"Unknown value variant: {type(value).__name__}"
    raise TypeError(msg)
