"""Tests for Rich renderers and quiet output."""

from __future__ import annotations

from quickadd.output.renderers import render_quiet, render_result
from quickadd.services.result import ServiceError, ServiceResult

VAULTS = [
    {"id": "b2", "path": "/notes/Work", "name": "Work"},
    {"id": "a1", "path": "/notes/Home", "name": "Home"},
]


def _err(code: str = "CONFIG_NOT_FOUND", msg: str = "Obsidian config not found") -> ServiceResult:
    return ServiceResult(ok=False, op="list_vaults", error=ServiceError(code=code, message=msg))


class TestRenderResult:
    def test_vault_table_sorted_by_name(self) -> None:
        result = ServiceResult(ok=True, op="list_vaults", data={"vaults": VAULTS, "count": 2})
        output = render_result(result)
        assert "Name" in output
        assert output.index("Home") < output.index("Work")
        assert "/notes/Work" in output

    def test_no_vaults(self) -> None:
        result = ServiceResult(ok=True, op="list_vaults", data={"vaults": [], "count": 0})
        assert "No vaults found" in render_result(result)

    def test_add_task(self) -> None:
        result = ServiceResult(
            ok=True,
            op="add_task",
            data={"path": "/notes/Home/2024-01-17.md", "task": "- [ ] Tea", "created": True},
        )
        output = render_result(result)
        assert output.startswith("OK")
        assert "task: - [ ] Tea" in output
        assert "path: /notes/Home/2024-01-17.md" in output
        assert "new daily note" in output

    def test_add_task_due_label(self) -> None:
        result = ServiceResult(
            ok=True,
            op="add_task",
            data={"path": "/n.md", "task": "- [ ] a", "due": "2024-01-18", "due_label": "Tomorrow"},
        )
        assert "due: Tomorrow (2024-01-18)" in render_result(result)

    def test_locate(self) -> None:
        result = ServiceResult(
            ok=True,
            op="locate_daily_note",
            data={"path": "/n/2024-01-17.md", "date": "2024-01-17", "exists": False},
        )
        output = render_result(result)
        assert "date: 2024-01-17" in output
        assert "exists: no" in output

    def test_generic(self) -> None:
        result = ServiceResult(ok=True, op="resolve_vault", data={"name": "Home"})
        assert "name: Home" in render_result(result)

    def test_error(self) -> None:
        output = render_result(_err())
        assert output.startswith("ERROR")
        assert "Obsidian config not found" in output

    def test_error_candidates(self) -> None:
        result = ServiceResult(
            ok=False,
            op="resolve_vault",
            error=ServiceError(
                code="VAULT_AMBIGUOUS",
                message="Several vaults found",
                detail={"candidates": ["Home", "Work"]},
            ),
        )
        assert "Home, Work" in render_result(result)

    def test_verbose_renders_telemetry(self) -> None:
        result = ServiceResult(
            ok=True,
            op="add_task",
            data={"path": "/n.md", "task": "- [ ] a"},
            meta={
                "telemetry": {
                    "name": "DailyNoteService.add_task",
                    "duration_ms": 1.5,
                    "children": [{"name": "write", "duration_ms": 0.4}],
                }
            },
        )
        output = render_result(result, verbose=True)
        assert "DailyNoteService.add_task" in output
        assert "write" in output
        assert "meta" not in render_result(result)


class TestRenderQuiet:
    def test_vault_paths(self) -> None:
        result = ServiceResult(ok=True, op="list_vaults", data={"vaults": VAULTS, "count": 2})
        assert render_quiet(result) == "/notes/Work\n/notes/Home"

    def test_path(self) -> None:
        result = ServiceResult(ok=True, op="add_task", data={"path": "/n/2024-01-17.md"})
        assert render_quiet(result) == "/n/2024-01-17.md"

    def test_fallback(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="noop")) == "OK: noop"

    def test_error(self) -> None:
        assert render_quiet(_err()) == "ERROR: list_vaults — Obsidian config not found"
