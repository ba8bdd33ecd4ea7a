"""Instant coercion and calendar comparisons.

Callers hand over whatever their data layer produced. Accepted forms:

- ``datetime`` — used as-is
- ``date`` — midnight of that day
- ``str`` — ISO 8601 (``2024-06-05``, ``2024-06-05T10:00``, trailing ``Z``)
- ``int``/``float`` — epoch milliseconds, interpreted in UTC

Naive values stay naive: their wall-clock fields are displayed verbatim.
Anything else is a caller bug and fails fast with InvalidInstantError.
"""

from __future__ import annotations

import math
from datetime import UTC, date, datetime, time, tzinfo
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tripview.errors import InvalidInstantError, InvalidTimezoneError


def coerce_instant(value: Any, *, tz: tzinfo | None = None) -> datetime:
    """Convert *value* to a ``datetime``.

    Args:
        value: Any accepted instant form (see module docstring).
        tz: When given, timezone-aware results are converted into it.
            Naive results are left untouched.
    """
    moment = _to_datetime(value)
    if tz is not None and moment.tzinfo is not None:
        moment = moment.astimezone(tz)
    return moment


def _to_datetime(value: Any) -> datetime:
    # bool is an int subclass; True is not a point in time
    if isinstance(value, bool):
        msg = f"Cannot interpret {value!r} as an instant"
        raise InvalidInstantError(msg)
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, int | float):
        if not math.isfinite(value):
            msg = f"Cannot interpret {value!r} as an instant"
            raise InvalidInstantError(msg)
        try:
            return datetime.fromtimestamp(value / 1000, tz=UTC)
        except (OverflowError, OSError, ValueError) as exc:
            msg = f"Epoch milliseconds out of range: {value!r}"
            raise InvalidInstantError(msg) from exc
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError as exc:
            msg = f"Not an ISO 8601 instant: {value!r}"
            raise InvalidInstantError(msg) from exc
    msg = f"Cannot interpret {type(value).__name__} as an instant"
    raise InvalidInstantError(msg)


def coerce_span(start: Any, end: Any, *, tz: tzinfo | None = None) -> tuple[datetime, datetime]:
    """Coerce two instants so they can be compared field by field.

    An aware *end* is converted into the timezone of *start*, so calendar
    comparisons happen in one zone.

    Raises:
        InvalidInstantError: If either value is invalid, or one is naive and
            the other timezone-aware.
    """
    first = coerce_instant(start, tz=tz)
    second = coerce_instant(end, tz=tz)
    if (first.tzinfo is None) != (second.tzinfo is None):
        msg = "Cannot mix naive and timezone-aware instants"
        raise InvalidInstantError(msg)
    if first.tzinfo is not None and tz is None:
        second = second.astimezone(first.tzinfo)
    return first, second


def same_day(first: datetime, second: datetime) -> bool:
    """True when both instants fall on the same calendar date."""
    return first.date() == second.date()


def same_month(first: datetime, second: datetime) -> bool:
    """True when both instants fall in the same calendar month of the same year."""
    return (first.year, first.month) == (second.year, second.month)


def load_timezone(name: str | None) -> tzinfo | None:
    """Resolve an IANA timezone name; ``None`` or an empty name means no conversion."""
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        msg = f"Unknown timezone: {name!r}"
        raise InvalidTimezoneError(msg) from exc
