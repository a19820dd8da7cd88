"""Tests for the format_result dispatcher and OutputSettings."""

import json

from quickadd.output.formatters import OutputSettings, format_result
from quickadd.services.result import ServiceResult


def _ok() -> ServiceResult:
    return ServiceResult(
        ok=True, op="add_task", data={"path": "/n/2024-01-17.md", "task": "- [ ] a"}
    )


class TestFormatResult:
    def test_default_is_human(self) -> None:
        assert format_result(_ok()).startswith("OK")

    def test_json(self) -> None:
        output = format_result(_ok(), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["data"]["path"] == "/n/2024-01-17.md"

    def test_quiet(self) -> None:
        assert format_result(_ok(), settings=OutputSettings(quiet=True)) == "/n/2024-01-17.md"

    def test_json_wins_over_quiet(self) -> None:
        output = format_result(_ok(), settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["op"] == "add_task"
