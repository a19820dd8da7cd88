"""Subcommand modules for quickadd.

Provides register_commands() with deferred imports so ``quickadd --help``
stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from quickadd.commands.add import add
    from quickadd.commands.today import today
    from quickadd.commands.vaults import vaults

    cli.add_command(add)
    cli.add_command(vaults)
    cli.add_command(today)
