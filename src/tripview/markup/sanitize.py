"""Recursive HTML escaping of structured data.

``sanitize`` returns a value of the same shape as its input with every
string leaf escaped for HTML text and attribute contexts. Numbers,
booleans, ``None`` and other leaves come back unchanged (the same object).

Mapping keys are NOT escaped, only their values. Keys are expected to be
static identifiers chosen by the calling code, never user data.

Escaping is not a fixpoint: sanitizing an already sanitized string escapes
its ampersands again.
"""

from __future__ import annotations

from typing import Any

from markupsafe import escape

from tripview.domain.values import (
    MappingValue,
    ScalarValue,
    SequenceValue,
    TextValue,
    Value,
    classify,
    unwrap,
)


def escape_text(text: str) -> str:
    """Escape ``& < > " ' ` `` in *text*.

    Always returns a plain ``str``. ``Markup`` input is escaped like any
    other string rather than trusted.

    Examples:
        >>> escape_text("<b>hi & bye</b>")
        '&lt;b&gt;hi &amp; bye&lt;/b&gt;'
    """
    escaped = str(escape(str(text)))
    return escaped.replace("`", "&#96;")


def sanitize_value(value: Value) -> Value:
    """Escape every text leaf of an already classified value."""
    match value:
        case TextValue(text):
            return TextValue(escape_text(text))
        case SequenceValue(items, as_tuple):
            return SequenceValue(tuple(sanitize_value(item) for item in items), as_tuple)
        case MappingValue(entries):
            return MappingValue(tuple((key, sanitize_value(item)) for key, item in entries))
        case ScalarValue():
            return value
    msg = f"Unknown value variant: {type(value).__name__}"
    raise TypeError(msg)


def sanitize(data: Any) -> Any:
    """Return *data* with every string escaped, preserving its structure.

    Lists, tuples and other sequences are rebuilt (tuples stay tuples,
    the rest become lists); mappings become dicts with the same keys.
    The input is never modified.

    Raises:
        CyclicValueError: If *data* contains a reference cycle.
        ValueDepthError: If *data* nests deeper than
            :data:`tripview.domain.values.MAX_DEPTH` containers.
    """
    return unwrap(sanitize_value(classify(data)))
