"""Tests for trip view fragments."""

from __future__ import annotations

from tripview.domain.types import FilterType
from tripview.markup.views import (
    FilterItem,
    build_filter_items,
    render_filter_item,
    render_filters,
)


class TestBuildFilterItems:
    def test_marks_selected_and_disabled(self) -> None:
        items = build_filter_items(
            [str(member) for member in FilterType],
            selected=FilterType.FUTURE,
            disabled=[FilterType.PAST],
        )
        assert items == [
            FilterItem("everything"),
            FilterItem("future", is_selected=True),
            FilterItem("present"),
            FilterItem("past", is_disabled=True),
        ]

    def test_nothing_selected(self) -> None:
        assert not any(item.is_selected for item in build_filter_items(["a", "b"]))


class TestRenderFilterItem:
    def test_plain_item(self) -> None:
        assert render_filter_item(FilterItem("everything")) == (
            '<div class="trip-filters__filter">'
            '<input id="filter-everything" class="trip-filters__filter-input visually-hidden"'
            ' type="radio" name="trip-filter" value="everything">'
            '<label class="trip-filters__filter-label" for="filter-everything">Everything</label>'
            "</div>"
        )

    def test_checked_and_disabled(self) -> None:
        fragment = render_filter_item(FilterItem("past", is_selected=True, is_disabled=True))
        assert 'value="past" checked disabled>' in fragment

    def test_value_is_escaped(self) -> None:
        fragment = render_filter_item(FilterItem('x"><script>'))
        assert "<script>" not in fragment
        assert 'value="x&#34;&gt;&lt;script&gt;"' in fragment


class TestRenderFilters:
    def test_wraps_all_items(self) -> None:
        items = build_filter_items(["future", "past"], selected="past")
        fragment = render_filters(items)
        assert fragment.startswith('<div class="trip-filters"><div class="trip-filters__filter">')
        assert fragment.endswith("</div></div>")
        assert fragment.count("trip-filters__filter-input") == 2
        assert fragment.count(" checked") == 1

    def test_empty(self) -> None:
        assert render_filters([]) == '<div class="trip-filters"></div>'
