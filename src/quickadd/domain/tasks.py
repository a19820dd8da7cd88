"""Task line rendering (Obsidian Tasks plugin syntax)."""

from __future__ import annotations

CHECKBOX = "- [ ] "
DUE_MARKER = "⏳"


def format_task(description: str, due_date: str | None = None) -> str:
    """Render an unchecked task line.

    The due date is appended verbatim after the hourglass marker.

    Examples:
        >>> format_task("  Buy milk ")
        '- [ ] Buy milk'
        >>> format_task("Buy milk", "2024-01-18")
        '- [ ] Buy milk ⏳ 2024-01-18'
    """
    line = f"{CHECKBOX}{description.strip()}"
    if due_date is not None:
        line = f"{line} {DUE_MARKER} {due_date}"
    return line
