"""Trip view fragments built with the fragment composer.

Each view takes plain state, sanitizes anything textual and composes the
markup. The output is a string for the rendering host to mount.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from tripview.markup.fragments import Template
from tripview.markup.sanitize import escape_text

_FILTER_BAR = Template.parse('<div class="trip-filters">{}</div>')

_FILTER_ITEM = Template.parse(
    '<div class="trip-filters__filter">'
    '<input id="filter-{}" class="trip-filters__filter-input visually-hidden"'
    ' type="radio" name="trip-filter" value="{}"{}{}>'
    '<label class="trip-filters__filter-label" for="filter-{}">{}</label>'
    "</div>"
)


@dataclass(frozen=True)
class FilterItem:
    """State of one filter option."""

    value: str
    is_selected: bool = False
    is_disabled: bool = False


def build_filter_items(
    values: Iterable[str],
    *,
    selected: str | None = None,
    disabled: Iterable[str] = (),
) -> list[FilterItem]:
    """Build filter state from raw values, marking the selected and disabled ones."""
    disabled_set = {str(value) for value in disabled}
    return [
        FilterItem(
            value=str(value),
            is_selected=selected is not None and str(value) == str(selected),
            is_disabled=str(value) in disabled_set,
        )
        for value in values
    ]


def render_filter_item(item: FilterItem) -> str:
    """Render a single radio option of the filter bar."""
    value = escape_text(item.value)
    return _FILTER_ITEM.render(
        value,
        value,
        " checked" if item.is_selected else None,
        " disabled" if item.is_disabled else None,
        value,
        escape_text(item.value.capitalize()),
    )


def render_filters(items: Sequence[FilterItem]) -> str:
    """Render the whole trip-filter bar.

    Examples:
        >>> render_filters([])
        '<div class="trip-filters"></div>'
    """
    return _FILTER_BAR.render([render_filter_item(item) for item in items])
