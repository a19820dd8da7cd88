"""Fixtures for CLI command tests: an isolated registry with two vaults."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture
def registry_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the CLI at a temporary registry and an absent config file."""
    path = tmp_path / "obsidian.json"
    monkeypatch.setenv("QUICKADD_REGISTRY__PATH", str(path))
    monkeypatch.setenv("QUICKADD_CONFIG", str(tmp_path / "absent.toml"))
    return path


@pytest.fixture
def vaults(tmp_path: Path, registry_file: Path) -> dict[str, Path]:
    """Register the vaults ``Personal`` and ``Work``."""
    found: dict[str, Path] = {}
    entries: dict[str, dict[str, object]] = {}
    for vault_id, name in [("a1b2c3", "Personal"), ("d4e5f6", "Work")]:
        path = tmp_path / "vaults" / name
        (path / ".obsidian").mkdir(parents=True)
        found[name] = path
        entries[vault_id] = {"path": str(path), "ts": 1705480000000}
    registry_file.write_text(json.dumps({"vaults": entries}), encoding="utf-8")
    return found
