"""DailyNoteService — append a task to today's daily note.

Pipeline: SETTINGS → LOCATE → READ → INSERT → WRITE → RESPOND

The new note text is fully computed before anything touches the disk.
A malformed ``daily-notes.json`` downgrades to defaults with a warning;
every other failure is returned as an error result.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from quickadd.domain.daily_note import analyze_document, locate, render_insertion
from quickadd.domain.duedates import relative_date_label
from quickadd.domain.errors import ErrorCode, QuickAddError
from quickadd.domain.tasks import format_task
from quickadd.infrastructure.environment import today
from quickadd.infrastructure.filesystem import read_note, write_note
from quickadd.infrastructure.registry import read_daily_notes_config
from quickadd.services.base import BaseService
from quickadd.services.result import ServiceResult
from quickadd.services.telemetry import get_current_span, trace_span, traced

logger = logging.getLogger(__name__)


def _due_label(due_date: str | None, day: date) -> str | None:
    """Human label for an ISO due date; None for free-form or absent dates."""
    if not due_date:
        return None
    try:
        return relative_date_label(date.fromisoformat(due_date), day)
    except ValueError:
        return None


class DailyNoteService(BaseService):
    """Locates daily notes and inserts tasks into them."""

    def _locate(self, vault_path: Path, warnings: list[str]) -> Path:
        config, warning = read_daily_notes_config(vault_path)
        if warning:
            warnings.append(warning)
        return locate(vault_path, config, today(self._env))

    @traced
    def locate(self, vault_path: str | Path) -> ServiceResult:
        """Report where today's daily note lives (without creating it)."""
        warnings: list[str] = []
        path = self._locate(Path(vault_path), warnings)
        return ServiceResult(
            ok=True,
            op="locate_daily_note",
            data={
                "path": str(path),
                "date": today(self._env).isoformat(),
                "exists": path.is_file(),
            },
            warnings=warnings,
        )

    @traced
    def add_task(
        self,
        vault_path: str | Path,
        task_content: str,
        due_date: str | None = None,
    ) -> ServiceResult:
        """Insert ``task_content`` into the Tasks section of today's note.

        Returns the note path in ``data["path"]``.
        """
        op = "add_task"
        if not task_content.strip():
            return ServiceResult.failure(op, ErrorCode.INVALID_INPUT, "Task text is empty")

        warnings: list[str] = []
        day = today(self._env)
        task_line = format_task(task_content, due_date)

        try:
            with trace_span("locate"):
                path = self._locate(Path(vault_path), warnings)

            with trace_span("read"):
                existing = read_note(path)

            layout = analyze_document(existing)
            shape = layout.shape
            content = render_insertion(layout, task_line, day)

            with trace_span("write"):
                write_note(path, content)
        except QuickAddError as exc:
            return self._failure(op, exc, warnings)

        span = get_current_span()
        if span:
            span.annotate("shape", str(shape))
        logger.debug("Added task to %s (%s)", path, shape)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "path": str(path),
                "task": task_line,
                "shape": str(shape),
                "created": existing is None,
                "due": due_date,
                "due_label": _due_label(due_date, day),
            },
            warnings=warnings,
        )
