"""Tests for daily note file I/O."""

from pathlib import Path

import pytest

from quickadd.domain.errors import DirectoryCreateError, FileWriteError
from quickadd.infrastructure.filesystem import ensure_parent, read_note, write_note


class TestReadNote:
    def test_missing_returns_none(self, tmp_path: Path) -> None:
        assert read_note(tmp_path / "2024-01-17.md") is None

    def test_reads_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "note.md"
        path.write_text("- [ ] Tea ⏳ 2024-01-18\n", encoding="utf-8")
        assert read_note(path) == "- [ ] Tea ⏳ 2024-01-18\n"


class TestWriteNote:
    def test_creates_parents(self, tmp_path: Path) -> None:
        path = tmp_path / "Daily" / "2024" / "2024-01-17.md"
        write_note(path, "# 2024-01-17\n")
        assert path.read_text(encoding="utf-8") == "# 2024-01-17\n"

    def test_overwrites(self, tmp_path: Path) -> None:
        path = tmp_path / "note.md"
        path.write_text("old", encoding="utf-8")
        write_note(path, "new\n")
        assert path.read_text(encoding="utf-8") == "new\n"

    def test_newlines_not_translated(self, tmp_path: Path) -> None:
        path = tmp_path / "note.md"
        write_note(path, "a\nb\n")
        assert path.read_bytes() == b"a\nb\n"

    def test_existing_parent_is_fine(self, tmp_path: Path) -> None:
        path = tmp_path / "note.md"
        ensure_parent(path)
        ensure_parent(path)
        assert tmp_path.is_dir()

    def test_directory_error_is_distinct(self, tmp_path: Path) -> None:
        blocker = tmp_path / "Daily"
        blocker.write_text("a file, not a folder", encoding="utf-8")
        with pytest.raises(DirectoryCreateError, match="Failed to create directory"):
            write_note(blocker / "2024" / "note.md", "x")

    def test_write_error(self, tmp_path: Path) -> None:
        target = tmp_path / "note.md"
        target.mkdir()
        with pytest.raises(FileWriteError, match="Failed to write to daily note"):
            write_note(target, "x")
