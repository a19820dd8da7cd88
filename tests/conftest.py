"""Shared pytest fixtures for quickadd tests."""

from __future__ import annotations

import json
from collections.abc import Callable, Generator
from datetime import date, datetime
from pathlib import Path

import pytest
from click.testing import CliRunner

from quickadd.infrastructure.environment import registry_path
from quickadd.services.telemetry import disable_telemetry

TODAY = date(2024, 1, 17)


class FixedEnvironment:
    """Environment with a pinned clock and a temporary home directory."""

    def __init__(
        self,
        home: Path,
        *,
        now: datetime | None = None,
        platform: str = "linux",
        environ: dict[str, str] | None = None,
    ) -> None:
        self.home = home
        self.platform = platform
        self.environ = environ or {}
        self._now = now or datetime(TODAY.year, TODAY.month, TODAY.day, 9, 30)

    def home_dir(self) -> Path:
        return self.home

    def now(self) -> datetime:
        return self._now


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def home(tmp_path: Path) -> Path:
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def env(home: Path) -> FixedEnvironment:
    """Linux environment pinned to 2024-01-17."""
    return FixedEnvironment(home)


@pytest.fixture
def vault_dir(tmp_path: Path) -> Path:
    """An empty vault directory with an ``.obsidian`` folder."""
    path = tmp_path / "vaults" / "Personal"
    (path / ".obsidian").mkdir(parents=True)
    return path


@pytest.fixture
def write_registry(env: FixedEnvironment) -> Callable[[dict[str, str]], Path]:
    """Write ``obsidian.json`` for *env* from ``{vault_id: path}``."""

    def _write(entries: dict[str, str]) -> Path:
        path = registry_path(env)
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            "vaults": {
                vault_id: {"path": vault_path, "ts": 1705480000000, "open": True}
                for vault_id, vault_path in entries.items()
            }
        }
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_daily_settings() -> Callable[..., Path]:
    """Write ``.obsidian/daily-notes.json`` into a vault."""

    def _write(vault: Path, **settings: str) -> Path:
        path = vault / ".obsidian" / "daily-notes.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(settings), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """Telemetry is a context variable; keep it off between tests."""
    yield
    disable_telemetry()
