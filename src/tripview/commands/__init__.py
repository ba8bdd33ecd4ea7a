"""Subcommand modules for tripview.

Provides register_commands() which uses deferred imports to keep
``tripview --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from tripview.commands.format_cmd import format_group
    from tripview.commands.render import render

    cli.add_command(format_group)
    cli.add_command(render)

    # --- Standalone commands ---
    from tripview.commands.sanitize import sanitize

    cli.add_command(sanitize)
