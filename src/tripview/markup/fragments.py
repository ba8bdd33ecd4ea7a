"""Fragment composition: literal segments interleaved with values.

A :class:`Template` holds N literal segments and therefore N-1 slots.
Rendering walks the segments and inserts each slot value's string form:

- ``None`` renders as nothing
- lists and tuples are flattened and concatenated without a separator
- anything else goes through ``str()``

Nothing is escaped here. Values derived from untrusted input must pass
through :func:`tripview.markup.sanitize.sanitize` first.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from tripview.errors import TemplateArityError, TemplateError

DEFAULT_PLACEHOLDER = "{}"


def stringify(value: Any) -> str:
    """Return the string a slot value contributes to a fragment."""
    if value is None:
        return ""
    if isinstance(value, list | tuple):
        return "".join(stringify(item) for item in value)
    return str(value)


@dataclass(frozen=True)
class Template:
    """Immutable literal segments with slots between them."""

    segments: tuple[str, ...]

    def __post_init__(self) -> None:
        segments = self.segments
        if isinstance(segments, str):
            segments = (segments,)
        object.__setattr__(self, "segments", tuple(segments))
        if not self.segments:
            msg = "A template needs at least one literal segment"
            raise TemplateError(msg)

    @classmethod
    def of(cls, segments: str | Iterable[str]) -> Template:
        """Build a template from literal segments.

        A bare string is one literal with no slots, never a run of
        one-character segments.
        """
        if isinstance(segments, str):
            return cls((segments,))
        return cls(tuple(segments))

    @classmethod
    def parse(cls, source: str, *, placeholder: str = DEFAULT_PLACEHOLDER) -> Template:
        """Split *source* at every *placeholder* occurrence.

        Examples:
            >>> Template.parse("<b>{}</b>").segments
            ('<b>', '</b>')
            >>> Template.parse("plain").slot_count
            0
        """
        if not placeholder:
            msg = "Placeholder must be a non-empty string"
            raise TemplateError(msg)
        return cls(tuple(source.split(placeholder)))

    @property
    def slot_count(self) -> int:
        return len(self.segments) - 1

    def render(self, *values: Any) -> str:
        """Fill the slots with *values* and return the fragment."""
        if len(values) != self.slot_count:
            raise TemplateArityError(self.slot_count, len(values))
        parts = [self.segments[0]]
        for value, segment in zip(values, self.segments[1:], strict=True):
            parts.append(stringify(value))
            parts.append(segment)
        return "".join(parts)


def compose_fragment(template: Template | str | Sequence[str], *values: Any) -> str:
    """Compose a fragment from a template and one value per slot.

    *template* may be a :class:`Template`, a plain sequence of literal
    segments, or a single string (a literal with no slots).

    Raises:
        TemplateArityError: If ``len(values)`` differs from the slot count.
    """
    if not isinstance(template, Template):
        template = Template.of(template)
    return template.render(*values)


def html(segments: str | Sequence[str], *values: Any) -> str:
    """Shorthand for :func:`compose_fragment` over raw segments.

    Examples:
        >>> html(["<ul>", "</ul>"], [html(["<li>", "</li>"], x) for x in "ab"])
        '<ul><li>a</li><li>b</li></ul>'
    """
    return compose_fragment(segments, *values)


@dataclass
class FragmentBuilder:
    """Accumulate literal text and slot values, then render once.

    Consecutive literals merge into one segment and consecutive values get
    an empty literal between them, so the result is always a well-formed
    template.

    Usage::

        fragment = (
            FragmentBuilder()
            .text('<span class="event__title">')
            .value(title)
            .text("</span>")
            .build()
        )
    """

    _segments: list[str] = field(default_factory=lambda: [""], init=False)
    _values: list[Any] = field(default_factory=list, init=False)

    def text(self, literal: str) -> FragmentBuilder:
        """Append literal markup."""
        self._segments[-1] += literal
        return self

    def value(self, value: Any) -> FragmentBuilder:
        """Append a slot value."""
        self._values.append(value)
        self._segments.append("")
        return self

    def template(self) -> Template:
        """Snapshot the accumulated literals as a template."""
        return Template.of(self._segments)

    def build(self) -> str:
        """Render the accumulated template with the accumulated values."""
        return self.template().render(*self._values)
