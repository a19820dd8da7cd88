"""Daily note location and task insertion.

Both functions are pure: :func:`locate` maps settings and a date to a
path, :func:`insert_task` maps the current note text to the new text.
The caller owns directory creation and the write.

Insertion policy depends on the document shape, computed once by
:func:`analyze_document`:

- ``NO_FILE`` / ``EMPTY_FILE``: a fresh note with a date heading and a
  ``## Tasks`` section.
- ``HAS_TASKS_SECTION``: the task goes after the last non-blank line of
  the section, before any padding that precedes the next ``## `` heading.
  All other lines, trailing blank lines included, are kept as they are.
- ``NO_TASKS_SECTION``: a ``## Tasks`` section is appended to the note.

INVARIANT: lines outside the Tasks section are never modified.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum
from pathlib import Path

from quickadd.domain.dates import DEFAULT_FORMAT, has_folder_date_marker, render_template
from quickadd.domain.models import DailyNotesConfig

TASKS_HEADING = "## Tasks"
SECTION_PREFIX = "## "


class DocumentShape(StrEnum):
    """Mutually exclusive shapes of an existing daily note."""

    NO_FILE = "no_file"
    EMPTY_FILE = "empty_file"
    HAS_TASKS_SECTION = "has_tasks_section"
    NO_TASKS_SECTION = "no_tasks_section"


# ---------------------------------------------------------------------------
# Location
# ---------------------------------------------------------------------------


def locate(vault_path: Path, config: DailyNotesConfig, today: date) -> Path:
    """Return the absolute path of the daily note for *today*.

    - Filename: ``config.format`` (default ``YYYY-MM-DD``) rendered + ``.md``
    - Folder: rendered only if it contains ``YYYY``, ``MM`` or ``DD``;
      otherwise used literally. Empty means the vault root.
    """
    fmt = config.format or DEFAULT_FORMAT
    folder = (config.folder or "").strip("/")

    path = vault_path
    if folder:
        if has_folder_date_marker(folder):
            folder = render_template(folder, today)
        path = path / folder
    return path / f"{render_template(fmt, today)}.md"


# ---------------------------------------------------------------------------
# Insertion
# ---------------------------------------------------------------------------


def split_lines(content: str) -> list[str]:
    """Split on ``\\n`` only, dropping the final terminator and any ``\\r``."""
    if content.endswith("\n"):
        content = content[:-1]
    return [line.removesuffix("\r") for line in content.split("\n")]


def is_tasks_heading(line: str) -> bool:
    """Any line starting with ``## Tasks`` (``## Tasks``, ``## Tasks:``, ``## Tasks ✅``)."""
    return line.startswith(TASKS_HEADING)


def find_tasks_heading(lines: list[str]) -> int | None:
    """Index of the first Tasks heading line, or None."""
    for index, line in enumerate(lines):
        if is_tasks_heading(line):
            return index
    return None


@dataclass(frozen=True)
class NoteLayout:
    """A note split into lines, with its shape and Tasks heading found once."""

    shape: DocumentShape
    lines: list[str] = field(default_factory=list)
    heading: int | None = None


def analyze_document(content: str | None) -> NoteLayout:
    if content is None:
        return NoteLayout(DocumentShape.NO_FILE)
    if not content.strip():
        return NoteLayout(DocumentShape.EMPTY_FILE)
    lines = split_lines(content)
    heading = find_tasks_heading(lines)
    if heading is None:
        return NoteLayout(DocumentShape.NO_TASKS_SECTION, lines)
    return NoteLayout(DocumentShape.HAS_TASKS_SECTION, lines, heading)


def classify_document(content: str | None) -> DocumentShape:
    """Decide which insertion policy applies to *content*."""
    return analyze_document(content).shape


def new_document(task_line: str, today: date) -> str:
    return f"# {today.isoformat()}\n\n{TASKS_HEADING}\n\n{task_line}\n"


def section_insert_index(lines: list[str], heading: int) -> int:
    """Position right after the last non-blank line of the section at *heading*."""
    end = len(lines)
    for index in range(heading + 1, len(lines)):
        if lines[index].startswith(SECTION_PREFIX):
            end = index
            break

    while end > heading + 1 and not lines[end - 1].strip():
        end -= 1
    return end


def render_insertion(layout: NoteLayout, task_line: str, today: date) -> str:
    """Return the note text for *layout* with *task_line* added.

    Every existing line, blank or not, is written back unchanged.
    """
    match layout:
        case NoteLayout(shape=DocumentShape.HAS_TASKS_SECTION, heading=int(heading)):
            lines = list(layout.lines)
            lines.insert(section_insert_index(lines, heading), task_line)
            return "\n".join(lines) + "\n"
        case NoteLayout(shape=DocumentShape.NO_TASKS_SECTION):
            body = "\n".join(layout.lines).rstrip()
            return f"{body}\n\n{TASKS_HEADING}\n\n{task_line}\n"
        case _:
            return new_document(task_line, today)


def insert_task(content: str | None, task_line: str, today: date) -> str:
    """Return the full note text with *task_line* added to its Tasks section.

    Repeated calls with the same line append it again; no de-duplication.
    """
    return render_insertion(analyze_document(content), task_line, today)
