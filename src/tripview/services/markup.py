"""MarkupService — sanitization and view rendering for the CLI."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from tripview.errors import InvalidPayloadError
from tripview.markup.sanitize import sanitize
from tripview.markup.templates import render_template
from tripview.markup.views import build_filter_items, render_filters
from tripview.services.base import BaseService
from tripview.services.result import ServiceResult

FILTERS_TEMPLATE = "filters.html.j2"


def _decode(payload: str) -> Any:
    try:
        return json.loads(payload)
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})"
        raise InvalidPayloadError(msg) from exc


def _unknown_filter_warnings(
    values: Sequence[str], selected: str | None, disabled: Sequence[str]
) -> list[str]:
    known = set(values)
    warnings: list[str] = []
    if selected is not None and selected not in known:
        warnings.append(f"Selected filter {selected!r} is not among the rendered values")
    warnings.extend(
        f"Disabled filter {value!r} is not among the rendered values"
        for value in disabled
        if value not in known
    )
    return warnings


class MarkupService(BaseService):
    """Escape structured data and render trip views."""

    def sanitize_json(self, payload: str) -> ServiceResult:
        """Decode a JSON document and escape every string value in it."""
        return self._run("sanitize", lambda: {"value": sanitize(_decode(payload))})

    def render_filters(
        self,
        values: Sequence[str],
        *,
        selected: str | None = None,
        disabled: Sequence[str] = (),
        use_template: bool = False,
        template_dir: Path | None = None,
    ) -> ServiceResult:
        """Render the trip-filter bar, directly or through the Jinja2 template.

        A *selected* or *disabled* value that is not in *values* has no effect
        on the markup and is reported as a warning.
        """

        def action() -> dict[str, Any]:
            items = build_filter_items(values, selected=selected, disabled=disabled)
            if use_template:
                text = render_template(FILTERS_TEMPLATE, template_dir=template_dir, items=items)
                return {"text": text.rstrip("\n"), "count": len(items)}
            return {"text": render_filters(items), "count": len(items)}

        warnings = _unknown_filter_warnings(values, selected, disabled)
        return self._run("render_filters", action, warnings=warnings)
