"""Command: list Obsidian vaults."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from quickadd.commands._base import QuickCommand

if TYPE_CHECKING:
    from quickadd.commands._context import AppContext


@click.command(
    cls=QuickCommand,
    examples="""\
  quickadd vaults
  quickadd --json vaults
  quickadd -q vaults""",
)
@click.pass_obj
def vaults(app: AppContext) -> None:
    """List Obsidian vaults that exist on disk."""
    app.emit(app.vault_service().list_vaults())
