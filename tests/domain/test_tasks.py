"""Tests for task line formatting."""

import pytest

from quickadd.domain.tasks import DUE_MARKER, format_task


class TestFormatTask:
    def test_with_date(self) -> None:
        assert format_task("Buy groceries", "2024-01-17") == "- [ ] Buy groceries ⏳ 2024-01-17"

    def test_without_date(self) -> None:
        assert format_task("Buy groceries") == "- [ ] Buy groceries"

    def test_trims_description(self) -> None:
        assert format_task("  Buy groceries \n") == "- [ ] Buy groceries"

    def test_due_date_passed_verbatim(self) -> None:
        assert format_task("Plan", "next week-ish").endswith(" ⏳ next week-ish")

    @pytest.mark.parametrize("description", ["a", "  padded  ", "with ⏳ inside", ""])
    def test_prefix_and_body(self, description: str) -> None:
        line = format_task(description)
        assert line.startswith("- [ ] ")
        assert line[len("- [ ] ") :] == description.strip()

    def test_no_marker_without_date(self) -> None:
        assert DUE_MARKER not in format_task("Buy milk")
