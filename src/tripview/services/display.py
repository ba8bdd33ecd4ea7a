"""DisplayService — date, duration, number and list formatting for the CLI."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from tripview.display.dates import format_date, format_date_range, format_duration, format_time
from tripview.display.text import format_list, format_number
from tripview.services.base import BaseService
from tripview.services.result import ServiceResult


class DisplayService(BaseService):
    """Apply the display formatters with the configured separators and timezone."""

    def format_date(self, value: str, *, narrow: bool = False) -> ServiceResult:
        return self._run(
            "format_date",
            lambda: {
                "text": format_date(value, narrow, tz=self._settings.display_timezone),
            },
        )

    def format_time(self, value: str) -> ServiceResult:
        return self._run(
            "format_time",
            lambda: {"text": format_time(value, tz=self._settings.display_timezone)},
        )

    def format_date_range(self, start: str, end: str) -> ServiceResult:
        display = self._settings.display
        return self._run(
            "format_date_range",
            lambda: {
                "text": format_date_range(
                    start,
                    end,
                    separator=display.range_separator,
                    tz=self._settings.display_timezone,
                ),
            },
        )

    def format_duration(self, start: str, end: str) -> ServiceResult:
        return self._run(
            "format_duration",
            lambda: {
                "text": format_duration(start, end, tz=self._settings.display_timezone),
            },
        )

    def format_number(self, value: int | float | Decimal) -> ServiceResult:
        return self._run("format_number", lambda: {"text": format_number(value)})

    def format_list(self, items: Sequence[str]) -> ServiceResult:
        display = self._settings.display
        return self._run(
            "format_list",
            lambda: {
                "text": format_list(
                    items,
                    separator=display.list_separator,
                    max_items=display.list_max_items,
                    placeholder=display.list_placeholder,
                ),
                "count": len(items),
            },
        )
