"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy service construction and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tripview.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from tripview.config.settings import TripviewSettings
    from tripview.services.display import DisplayService
    from tripview.services.markup import MarkupService
    from tripview.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: TripviewSettings) -> None:
        self.settings = settings
        self._display: DisplayService | None = None
        self._markup: MarkupService | None = None

        from tripview.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose, quiet=settings.quiet, log_json=settings.log_json
        )

    @property
    def display(self) -> DisplayService:
        """The display formatting service (created lazily on first access)."""
        if self._display is None:
            from tripview.services.display import DisplayService

            self._display = DisplayService(self.settings)
        return self._display

    @property
    def markup(self) -> MarkupService:
        """The sanitize/render service (created lazily on first access)."""
        if self._markup is None:
            from tripview.services.markup import MarkupService

            self._markup = MarkupService(self.settings)
        return self._markup

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
