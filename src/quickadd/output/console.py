"""Rich Console factory and theme for quickadd output.

Consoles render into a StringIO buffer so renderers keep a plain
``-> str`` contract. Rich drops color codes when not attached to a TTY
(tests, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

QUICKADD_THEME = Theme(
    {
        "qa.ok": "bold green",
        "qa.error": "bold red",
        "qa.warning": "bold yellow",
        "qa.op": "bold cyan",
        "qa.key": "dim",
        "qa.id": "dim",
        "qa.name": "bold",
        "qa.path": "blue",
        "qa.task": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for stable test output).
    """
    return Console(
        file=StringIO(),
        theme=QUICKADD_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
