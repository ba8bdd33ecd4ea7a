"""Date, time and duration display rules.

Fixed English output regardless of the process locale:

- date: ``"5 Jun"``, or ``"5"`` when narrow
- time: ``"09:05"`` (24-hour)
- range: ``"5 Jun"``, ``"5 — 20 Jun"`` or ``"5 Jun — 20 Jul"``
- duration: ``"02d 03h 15m"``, ``"03h 15m"`` or ``"15m"``

Every function accepts any instant form understood by
:func:`tripview.domain.instants.coerce_instant`.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, tzinfo
from typing import Any

from tripview.domain.instants import coerce_instant, coerce_span, same_day, same_month
from tripview.errors import NegativeDurationError

MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

RANGE_SEPARATOR = " — "


def _date_label(moment: datetime, narrow: bool) -> str:
    if narrow:
        return str(moment.day)
    return f"{moment.day} {MONTH_ABBREVIATIONS[moment.month - 1]}"


def format_date(value: Any, narrow: bool = False, *, tz: tzinfo | None = None) -> str:
    """Format a day of the month with its abbreviated month (``"5 Jun"``).

    Args:
        value: The instant to format.
        narrow: Render the day of the month only (``"5"``).
        tz: Optional display timezone for aware instants.
    """
    return _date_label(coerce_instant(value, tz=tz), narrow)


def format_time(value: Any, *, tz: tzinfo | None = None) -> str:
    """Format the wall-clock time as 24-hour ``HH:mm``."""
    moment = coerce_instant(value, tz=tz)
    return f"{moment.hour:02d}:{moment.minute:02d}"


def format_date_range(
    start: Any,
    end: Any,
    *,
    separator: str = RANGE_SEPARATOR,
    tz: tzinfo | None = None,
) -> str:
    """Format two instants as a compact date range.

    Same calendar day collapses to one date. When both ends share a month,
    the month is printed once, after the end date. Only calendar fields are
    compared, so 23:00 and 01:00 the next morning are different days.
    An end before the start still renders as a range.

    Examples:
        >>> format_date_range("2024-06-05T10:00", "2024-06-05T18:00")
        '5 Jun'
        >>> format_date_range("2024-06-05T10:00", "2024-06-20T18:00")
        '5 — 20 Jun'
        >>> format_date_range("2024-06-05", "2024-07-20")
        '5 Jun — 20 Jul'
    """
    first, second = coerce_span(start, end, tz=tz)
    if same_day(first, second):
        return _date_label(first, narrow=False)
    return separator.join(
        [
            _date_label(first, narrow=same_month(first, second)),
            _date_label(second, narrow=False),
        ]
    )


def _elapsed(first: datetime, second: datetime) -> timedelta:
    # Same-tzinfo subtraction ignores DST shifts; go through UTC for real time.
    if first.tzinfo is not None:
        return second.astimezone(UTC) - first.astimezone(UTC)
    return second - first


def format_duration(start: Any, end: Any, *, tz: tzinfo | None = None) -> str:
    """Format the time elapsed between two instants.

    The largest non-zero unit decides which units are shown; all units are
    zero-padded to two digits and seconds are dropped. Days are whole
    elapsed days and are never folded into months.

    Raises:
        NegativeDurationError: If *end* is before *start*.

    Examples:
        >>> format_duration("2024-06-05T10:00", "2024-06-05T11:30")
        '01h 30m'
        >>> format_duration("2024-06-05T10:00", "2024-06-06T11:00")
        '01d 01h 00m'
        >>> format_duration("2024-06-05T10:00", "2024-06-05T10:05")
        '05m'
    """
    first, second = coerce_span(start, end, tz=tz)
    elapsed = _elapsed(first, second)
    if elapsed < timedelta(0):
        msg = f"Duration end {second.isoformat()} precedes start {first.isoformat()}"
        raise NegativeDurationError(msg)

    days = elapsed.days
    hours, remainder = divmod(elapsed.seconds, 3600)
    minutes = remainder // 60

    if days:
        return f"{days:02d}d {hours:02d}h {minutes:02d}m"
    if hours:
        return f"{hours:02d}h {minutes:02d}m"
    return f"{minutes:02d}m"
