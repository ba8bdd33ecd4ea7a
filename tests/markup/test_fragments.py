"""Tests for fragment composition."""

from __future__ import annotations

import pytest

from tripview.errors import TemplateArityError, TemplateError
from tripview.markup.fragments import FragmentBuilder, Template, compose_fragment, html, stringify


class TestStringify:
    def test_none_is_empty(self) -> None:
        assert stringify(None) == ""

    def test_scalars_use_str(self) -> None:
        assert stringify(42) == "42"
        assert stringify(False) == "False"

    def test_sequences_flatten_without_separator(self) -> None:
        assert stringify(["a", ("b", None), 3]) == "ab3"


class TestTemplate:
    def test_requires_a_segment(self) -> None:
        with pytest.raises(TemplateError):
            Template(())

    def test_slot_count(self) -> None:
        assert Template(("a", "b", "c")).slot_count == 2

    def test_parse_splits_on_placeholder(self) -> None:
        assert Template.parse("<b>{}</b>{}").segments == ("<b>", "</b>", "")

    def test_parse_custom_placeholder(self) -> None:
        assert Template.parse("<i>$</i>", placeholder="$").segments == ("<i>", "</i>")

    def test_parse_rejects_empty_placeholder(self) -> None:
        with pytest.raises(TemplateError):
            Template.parse("x", placeholder="")

    def test_segments_are_immutable(self) -> None:
        template = Template.of(["a", "b"])
        with pytest.raises(AttributeError):
            template.segments = ("c",)  # type: ignore[misc]

    def test_render_reuses_segments(self) -> None:
        template = Template.parse("<p>{}</p>")
        assert template.render("one") == "<p>one</p>"
        assert template.render("two") == "<p>two</p>"


class TestComposeFragment:
    def test_zero_slots_returns_literal(self) -> None:
        assert compose_fragment(["<hr>"]) == "<hr>"

    def test_bare_string_is_one_literal(self) -> None:
        assert compose_fragment("<p>hi</p>") == "<p>hi</p>"
        assert html("<hr>") == "<hr>"
        assert Template.of("<p>hi</p>").slot_count == 0

    def test_bare_string_with_values_is_arity_error(self) -> None:
        with pytest.raises(TemplateArityError) as info:
            compose_fragment("<p></p>", "x")
        assert (info.value.expected, info.value.received) == (0, 1)

    def test_interleaves_values(self) -> None:
        assert compose_fragment(["<a href=\"", "\">", "</a>"], "/trip", "Trip") == (
            '<a href="/trip">Trip</a>'
        )

    def test_none_renders_nothing(self) -> None:
        result = compose_fragment(["<p>", "</p>"], None)
        assert result == "<p></p>"
        assert "None" not in result

    def test_sequence_matches_prejoined_string(self) -> None:
        items = ["<li>a</li>", "<li>b</li>", "<li>c</li>"]
        assert compose_fragment(["<ul>", "</ul>"], items) == compose_fragment(
            ["<ul>", "</ul>"], "".join(items)
        )

    def test_no_implicit_escaping(self) -> None:
        assert compose_fragment(["", ""], "<b>&</b>") == "<b>&</b>"

    def test_accepts_template_instance(self) -> None:
        assert compose_fragment(Template.parse("{} km"), 12) == "12 km"

    def test_arity_mismatch_fails_fast(self) -> None:
        with pytest.raises(TemplateArityError) as info:
            compose_fragment(["<p>", "</p>"])
        assert (info.value.expected, info.value.received) == (1, 0)

    def test_nested_fragments(self) -> None:
        rows = [html(["<li>", "</li>"], name) for name in ("Oslo", "Bergen")]
        assert html(["<ul>", "</ul>"], rows) == "<ul><li>Oslo</li><li>Bergen</li></ul>"


class TestFragmentBuilder:
    def test_build_matches_compose(self) -> None:
        built = FragmentBuilder().text("<span>").value("Rome").text("</span>").build()
        assert built == compose_fragment(["<span>", "</span>"], "Rome")

    def test_adjacent_values(self) -> None:
        builder = FragmentBuilder().value("a").value(["b", "c"])
        assert builder.template().segments == ("", "", "")
        assert builder.build() == "abc"

    def test_adjacent_literals_merge(self) -> None:
        builder = FragmentBuilder().text("<p>").text("hi").text("</p>")
        assert builder.template().segments == ("<p>hi</p>",)

    def test_empty_builder(self) -> None:
        assert FragmentBuilder().build() == ""
