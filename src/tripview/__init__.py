"""tripview — HTML fragments, sanitization and display formatting for trip UIs."""

from __future__ import annotations

from tripview.display.dates import format_date, format_date_range, format_duration, format_time
from tripview.display.text import format_list, format_number
from tripview.markup.fragments import FragmentBuilder, Template, compose_fragment, html
from tripview.markup.sanitize import escape_text, sanitize
from tripview.markup.views import FilterItem, render_filters

__version__ = "0.3.0"

__all__ = [
    "FilterItem",
    "FragmentBuilder",
    "Template",
    "__version__",
    "compose_fragment",
    "escape_text",
    "format_date",
    "format_date_range",
    "format_duration",
    "format_list",
    "format_number",
    "format_time",
    "html",
    "render_filters",
    "sanitize",
]
