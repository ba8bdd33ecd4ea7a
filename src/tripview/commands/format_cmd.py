"""Command group: format display values (dates, durations, numbers, lists)."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

import click

from tripview.commands._base import TripviewGroup

if TYPE_CHECKING:
    from tripview.commands._context import AppContext

_FORMAT_EXAMPLES = """\
  tripview format date 2024-06-05T10:00
  tripview format range 2024-06-05 2024-07-20
  tripview format duration 2024-06-05T10:00 2024-06-06T11:00
  tripview format number 1234567
  tripview format list Amsterdam Geneva Chamonix Turin"""


def _parse_number(_ctx: click.Context, _param: click.Parameter, value: str) -> int | Decimal:
    """Parse an integer exactly, anything else as a decimal."""
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return Decimal(value)
    except InvalidOperation as exc:
        msg = f"{value!r} is not a number"
        raise click.BadParameter(msg) from exc


@click.group("format", cls=TripviewGroup, examples=_FORMAT_EXAMPLES)
def format_group() -> None:
    """Format dates, times, durations, numbers and lists for display."""


@format_group.command(
    examples="""\
  tripview format date 2024-06-05T10:00
  tripview format date --narrow 2024-06-05"""
)
@click.argument("value")
@click.option("--narrow", is_flag=True, help="Day of the month only.")
@click.pass_obj
def date(app: AppContext, value: str, narrow: bool) -> None:
    """Format an instant as a day and month ("5 Jun")."""
    app.emit(app.display.format_date(value, narrow=narrow))


@format_group.command(examples="  tripview format time 2024-06-05T09:05")
@click.argument("value")
@click.pass_obj
def time(app: AppContext, value: str) -> None:
    """Format an instant as 24-hour HH:mm."""
    app.emit(app.display.format_time(value))


@format_group.command(
    "range",
    examples="""\
  tripview format range 2024-06-05T10:00 2024-06-20T18:00
  tripview format range 2024-06-05 2024-07-20""",
)
@click.argument("start")
@click.argument("end")
@click.pass_obj
def date_range(app: AppContext, start: str, end: str) -> None:
    """Format two instants as a compact date range."""
    app.emit(app.display.format_date_range(start, end))


@format_group.command(examples="  tripview format duration 2024-06-05T10:00 2024-06-05T11:30")
@click.argument("start")
@click.argument("end")
@click.pass_obj
def duration(app: AppContext, start: str, end: str) -> None:
    """Format the time elapsed between two instants."""
    app.emit(app.display.format_duration(start, end))


@format_group.command(
    examples="""\
  tripview format number 1234.5678
  tripview format number -1234""",
    context_settings={"ignore_unknown_options": True},
)
@click.argument("value", callback=_parse_number)
@click.pass_obj
def number(app: AppContext, value: int | Decimal) -> None:
    """Format a number with thousands separators."""
    app.emit(app.display.format_number(value))


@format_group.command("list", examples="  tripview format list Amsterdam Geneva Chamonix")
@click.argument("items", nargs=-1)
@click.pass_obj
def item_list(app: AppContext, items: tuple[str, ...]) -> None:
    """Join items, eliding the middle of long lists."""
    app.emit(app.display.format_list(list(items)))
