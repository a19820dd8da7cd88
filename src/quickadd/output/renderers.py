"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from quickadd.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from quickadd.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console)

    if verbose:
        _render_meta(console, result)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet``: paths only, one per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "list_vaults":
        return "\n".join(v["path"] for v in result.data.get("vaults", []))
    if "path" in result.data:
        return str(result.data["path"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="qa.ok"), Text(f"  {result.op}", style="qa.op"))


def _field(console: Console, key: str, value: Any) -> None:
    style = {"path": "qa.path", "task": "qa.task", "name": "qa.name", "id": "qa.id"}.get(key, "")
    console.print(Text(f"  {key}:", style="qa.key"), Text(str(value), style=style))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the telemetry span tree, if any."""
    if not result.meta or "telemetry" not in result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    _render_span(console, result.meta["telemetry"], indent=4)


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    duration = span.get("duration_ms", 0.0)
    line = f"{' ' * indent}{duration:>8.2f}ms  {span.get('name', '?')}"
    annotations = span.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(Text(line, style="dim"))
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


# ── Op renderers ──────────────────────────────────────────────────────


def _render_list_vaults(result: ServiceResult, console: Console) -> None:
    vaults = sorted(result.data.get("vaults", []), key=lambda v: v["name"].casefold())
    if not vaults:
        _status_line(console, result)
        console.print(Text("  No vaults found.", style="qa.warning"))
        return

    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Name", style="qa.name")
    table.add_column("Path", style="qa.path")
    table.add_column("ID", style="qa.id", no_wrap=True)
    for vault in vaults:
        table.add_row(vault["name"], vault["path"], vault["id"])
    console.print(table)


def _render_add_task(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    data = result.data
    _field(console, "task", data.get("task", ""))
    if data.get("due"):
        due, label = data["due"], data.get("due_label")
        _field(console, "due", f"{label} ({due})" if label and label != due else due)
    _field(console, "path", data.get("path", ""))
    if data.get("created"):
        console.print(Text("  (new daily note)", style="dim"))


def _render_locate(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    data = result.data
    _field(console, "date", data.get("date", ""))
    _field(console, "path", data.get("path", ""))
    _field(console, "exists", "yes" if data.get("exists") else "no")


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_error(result: ServiceResult, console: Console) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="qa.error"),
        Text(f"  {result.op}", style="qa.op"),
        Text(f"— {msg}"),
    )
    candidates = err.detail.get("candidates") if err else None
    if candidates:
        console.print(Text("  candidates:", style="qa.key"), Text(", ".join(candidates)))


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "list_vaults": _render_list_vaults,
    "add_task": _render_add_task,
    "locate_daily_note": _render_locate,
}
