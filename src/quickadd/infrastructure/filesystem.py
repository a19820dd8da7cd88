"""Daily note file I/O.

Notes are read whole and rewritten whole: the new content is computed
before :func:`write_note` is called, so a failure never leaves a partially
updated note behind.
"""

from __future__ import annotations

from pathlib import Path

from quickadd.domain.errors import DirectoryCreateError, FileReadError, FileWriteError


def read_note(path: Path) -> str | None:
    """Return the note text, or None when the file does not exist."""
    try:
        return path.read_text(encoding="utf-8")
    except (FileNotFoundError, NotADirectoryError):
        return None
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Failed to read daily note: {exc}"
        raise FileReadError(msg, detail={"path": str(path)}) from exc


def ensure_parent(path: Path) -> None:
    """Create the parent directories of *path* (no-op if present)."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        msg = f"Failed to create directory: {exc}"
        raise DirectoryCreateError(msg, detail={"path": str(path.parent)}) from exc


def write_note(path: Path, content: str) -> None:
    """Overwrite the note at *path* with *content*, creating parents first."""
    ensure_parent(path)
    try:
        with path.open("w", encoding="utf-8", newline="\n") as fh:
            fh.write(content)
    except OSError as exc:
        msg = f"Failed to write to daily note: {exc}"
        raise FileWriteError(msg, detail={"path": str(path)}) from exc
