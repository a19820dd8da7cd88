"""Command: show today's daily note path."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from quickadd.commands._base import QuickCommand

if TYPE_CHECKING:
    from quickadd.commands._context import AppContext


@click.command(
    cls=QuickCommand,
    examples="""\
  quickadd today
  quickadd today --vault Work
  quickadd -q today --vault ~/Notes""",
)
@click.option("--vault", "vault_selector", default=None, help="Vault name, id, or path.")
@click.pass_obj
def today(app: AppContext, vault_selector: str | None) -> None:
    """Show where today's daily note lives."""
    vault_path = app.resolve_vault_path(vault_selector)
    app.emit(app.daily_note_service().locate(vault_path))
