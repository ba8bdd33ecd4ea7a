"""Standalone command: escape every string in a JSON document."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from tripview.commands._base import TripviewCommand

if TYPE_CHECKING:
    from tripview.commands._context import AppContext


@click.command(
    cls=TripviewCommand,
    examples="""\
  echo '{"title": "<b>Tour</b>"}' | tripview sanitize
  tripview sanitize trip.json""",
)
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.pass_obj
def sanitize(app: AppContext, source: IO[str]) -> None:
    """Read JSON from SOURCE (default: stdin) and print it HTML-escaped.

    Keys are kept verbatim; only string values are escaped.
    """
    app.emit(app.markup.sanitize_json(source.read()))
