"""Command: add a task to today's daily note."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from quickadd.commands._base import QuickCommand
from quickadd.domain.duedates import parse_natural_date
from quickadd.infrastructure.environment import today

if TYPE_CHECKING:
    from quickadd.commands._context import AppContext


def _split_due_date(app: AppContext, text: str) -> tuple[str, str | None]:
    """Pull a natural-language due date out of *text*.

    Text that is nothing but a date phrase is left alone.
    """
    parsed = parse_natural_date(text, today(app.env))
    if parsed.primary_date is None or not parsed.cleaned_text:
        return text, None
    return parsed.cleaned_text, parsed.primary_date.date_string


@click.command(
    cls=QuickCommand,
    examples="""\
  quickadd add "Buy milk"
  quickadd add "Buy milk" --due 2024-01-18
  quickadd add Call the dentist tom
  quickadd add "Review PR friday" --vault Work
  quickadd add "Meet Tom" --no-parse-dates""",
)
@click.argument("text", nargs=-1, required=True)
@click.option("--due", default=None, help="Due date, written verbatim (e.g. 2024-01-18).")
@click.option("--vault", "vault_selector", default=None, help="Vault name, id, or path.")
@click.option(
    "--parse-dates/--no-parse-dates",
    default=None,
    help="Detect due dates like 'tomorrow' or 'fri' in the text.",
)
@click.pass_obj
def add(
    app: AppContext,
    text: tuple[str, ...],
    due: str | None,
    vault_selector: str | None,
    parse_dates: bool | None,
) -> None:
    """Add a task to today's daily note."""
    content = " ".join(text)
    if parse_dates is None:
        parse_dates = app.settings.tasks.parse_dates
    if due is None and parse_dates:
        content, due = _split_due_date(app, content)

    vault_path = app.resolve_vault_path(vault_selector)
    app.emit(app.daily_note_service().add_task(vault_path, content, due))
