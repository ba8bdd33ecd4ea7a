"""Trip classification enums shared by views and commands."""

from __future__ import annotations

from enum import StrEnum


class FilterType(StrEnum):
    """Point filters offered by the trip-filter bar, in display order."""

    EVERYTHING = "everything"
    FUTURE = "future"
    PRESENT = "present"
    PAST = "past"
