"""Number and list display rules."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

LIST_SEPARATOR = " — "
LIST_MAX_ITEMS = 3
LIST_PLACEHOLDER = "..."

_FRACTION_QUANTUM = Decimal("0.001")
_PRECISION = 400


def format_number(value: int | float | Decimal) -> str:
    """Group thousands with commas, English style.

    Non-integers keep at most three fraction digits, rounded half away from
    zero, with trailing zeros dropped.

    Examples:
        >>> format_number(1234)
        '1,234'
        >>> format_number(1234.5678)
        '1,234.568'
        >>> format_number(-0.5)
        '-0.5'
    """
    if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
        msg = f"Cannot format {type(value).__name__} as a number"
        raise TypeError(msg)
    if isinstance(value, int):
        return f"{value:,}"

    number = value if isinstance(value, Decimal) else Decimal(repr(value))
    if number.is_nan():
        return "NaN"
    if number.is_infinite():
        return "-∞" if number < 0 else "∞"

    # Enough precision for the full range of float magnitudes.
    with localcontext(prec=_PRECISION):
        rounded = number.quantize(_FRACTION_QUANTUM, rounding=ROUND_HALF_UP)
    text = f"{rounded:,f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_list(
    items: Sequence[Any],
    *,
    separator: str = LIST_SEPARATOR,
    max_items: int = LIST_MAX_ITEMS,
    placeholder: str = LIST_PLACEHOLDER,
) -> str:
    """Join items for display, eliding the middle of long lists.

    Lists longer than *max_items* show the first item, *placeholder* and the
    last item. The caller's sequence is left untouched.

    Examples:
        >>> format_list(["A", "B"])
        'A — B'
        >>> format_list(["A", "B", "C", "D", "E"])
        'A — ... — E'
    """
    labels = [str(item) for item in items]
    if len(labels) > max_items:
        labels = [labels[0], placeholder, labels[-1]]
    return separator.join(labels)
