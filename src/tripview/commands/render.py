"""Command group: render trip view fragments."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from tripview.commands._base import TripviewGroup
from tripview.domain.types import FilterType

if TYPE_CHECKING:
    from tripview.commands._context import AppContext


@click.group(cls=TripviewGroup, examples="  tripview render filters --selected future")
def render() -> None:
    """Render HTML fragments for trip views."""


@render.command(
    examples="""\
  tripview render filters
  tripview render filters --selected past --disabled present
  tripview render filters --template everything future"""
)
@click.argument("values", nargs=-1)
@click.option("--selected", default=None, help="Value of the checked filter.")
@click.option("--disabled", multiple=True, help="Value of a disabled filter (repeatable).")
@click.option("--template", "use_template", is_flag=True, help="Render via the Jinja2 template.")
@click.option(
    "--template-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory with template overrides.",
)
@click.pass_obj
def filters(
    app: AppContext,
    values: tuple[str, ...],
    selected: str | None,
    disabled: tuple[str, ...],
    use_template: bool,
    template_dir: Path | None,
) -> None:
    """Render the trip-filter bar for VALUES (default: all filter types)."""
    app.emit(
        app.markup.render_filters(
            list(values) or [str(member) for member in FilterType],
            selected=selected,
            disabled=list(disabled),
            use_template=use_template,
            template_dir=template_dir,
        )
    )
