"""Format ServiceResult for humans or machines.

- default: the bare output (``text`` payload, or pretty JSON for data)
  so commands compose in shell pipelines
- ``--verbose``: Rich-rendered status line plus every payload field
- ``--json``: the full ServiceResult as JSON
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from rich.text import Text

from tripview.output.console import create_console, get_output

if TYPE_CHECKING:
    from tripview.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _dump(value: Any) -> str:
    return _json.dumps(value, ensure_ascii=False, indent=2)


def _render_plain(result: ServiceResult) -> str:
    if "text" in result.data:
        return str(result.data["text"])
    if "value" in result.data:
        return _dump(result.data["value"])
    return f"OK: {result.op}"


def _render_verbose(result: ServiceResult) -> str:
    console = create_console()
    console.print(
        Text.assemble(("OK", "tv.ok"), (f"  {result.op}", "tv.op")),
        soft_wrap=True,
    )
    for key, value in result.data.items():
        rendered = value if isinstance(value, str) else _dump(value)
        style = "tv.text" if key == "text" else ""
        console.print(
            Text.assemble((f"  {key}: ", "tv.key"), (rendered, style)),
            soft_wrap=True,
        )
    for warning in result.warnings:
        console.print(Text(f"  warning: {warning}", style="tv.warning"), soft_wrap=True)
    return get_output(console).rstrip("\n")


def format_error(result: ServiceResult) -> str:
    """One-line error summary for stderr."""
    error_msg = result.error.message if result.error else "Unknown error"
    return f"ERROR: {result.op} — {error_msg}"


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode; defaults to plain human output.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if not result.ok:
        return format_error(result)
    if settings.verbose and not settings.quiet:
        return _render_verbose(result)
    return _render_plain(result)
