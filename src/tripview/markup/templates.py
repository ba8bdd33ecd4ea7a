"""Jinja2 environment exposing the display formatters as filters.

Autoescaping stays off, the same contract as the fragment composer:
untrusted values go through the ``sanitize`` filter explicitly.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PackageLoader

from tripview.display.dates import format_date, format_date_range, format_duration, format_time
from tripview.display.text import format_list, format_number
from tripview.markup.sanitize import sanitize

TEMPLATE_FILTERS = {
    "format_date": format_date,
    "format_time": format_time,
    "format_date_range": format_date_range,
    "format_duration": format_duration,
    "format_number": format_number,
    "format_list": format_list,
    "sanitize": sanitize,
}


def build_template_environment(*, template_dir: Path | None = None) -> Environment:
    """Build a Jinja2 environment with user overrides before packaged templates.

    Templates found in *template_dir* shadow the packaged ones of the same
    name, so a host can restyle a view without forking the package.
    """
    loaders: list[BaseLoader] = []
    if template_dir is not None:
        loaders.append(FileSystemLoader(str(template_dir)))
    loaders.append(PackageLoader("tripview", "templates"))

    env = Environment(loader=ChoiceLoader(loaders), keep_trailing_newline=True)
    env.filters.update(TEMPLATE_FILTERS)
    return env


def render_template(name: str, *, template_dir: Path | None = None, **context: Any) -> str:
    """Render a template by name with *context*."""
    env = build_template_environment(template_dir=template_dir)
    return env.get_template(name).render(**context)
