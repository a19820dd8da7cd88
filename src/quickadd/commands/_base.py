"""Click base classes that add an ``--examples`` flag.

``--help`` stays short and ends with a one-line hint; ``--examples``
prints the command's usage examples and exits.
"""

from __future__ import annotations

import inspect
from typing import Any

import click


class ExamplesMixin:
    """Mixin for Click commands constructed with ``examples="..."``."""

    examples: str | None

    def _init_examples(self, examples: str | None) -> None:
        self.examples = inspect.cleandoc(examples) if examples else None
        if not self.examples:
            return
        assert isinstance(self, click.Command)
        self.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=self._show_examples,
                help="Show usage examples.",
            )
        )
        if not self.epilog:
            self.epilog = "Run with --examples for usage examples."

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        for line in (self.examples or "").splitlines():
            click.echo(f"  {line}")
        ctx.exit(0)


class QuickCommand(ExamplesMixin, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class QuickGroup(ExamplesMixin, click.Group):
    """Root group; ``@group.command()`` subcommands default to :class:`QuickCommand`."""

    command_class = QuickCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
