"""Click classes shared by tripview commands.

Commands and groups take an ``examples`` keyword. When given, an eager
``--examples`` flag prints it and exits, so ``--help`` stays short.
"""

from __future__ import annotations

from typing import Any

import click


def _show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(ctx.command.examples)  # type: ignore[attr-defined]
    ctx.exit(0)


_EXAMPLES_OPTION = click.Option(
    ["--examples"],
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_show_examples,
    help="Show usage examples.",
)


class _ExamplesMixin:
    examples: str | None

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_EXAMPLES_OPTION)  # type: ignore[attr-defined]


class TripviewCommand(_ExamplesMixin, click.Command):
    """Command that accepts an ``examples`` keyword."""


class TripviewGroup(_ExamplesMixin, click.Group):
    """Group whose subcommands default to :class:`TripviewCommand`."""

    command_class = TripviewCommand
