"""Obsidian registry and per-vault settings readers.

The registry (``obsidian.json``) maps opaque vault ids to
``{"path": ...}``. Entries for vaults deleted from disk accumulate over
time, so missing paths are dropped rather than reported.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from quickadd.domain.errors import ConfigNotFound, ConfigParseError, FileReadError
from quickadd.domain.models import DailyNotesConfig, Vault

logger = logging.getLogger(__name__)

DAILY_NOTES_SETTINGS = Path(".obsidian") / "daily-notes.json"


class _RegistryEntry(BaseModel):
    model_config = {"extra": "ignore"}

    path: str


class _Registry(BaseModel):
    model_config = {"extra": "ignore"}

    vaults: dict[str, _RegistryEntry] = Field(default_factory=dict)


def load_registry(path: Path) -> dict[str, str]:
    """Read the registry at *path* and return ``{vault_id: vault_path}``.

    Raises:
        ConfigNotFound: The registry file does not exist.
        FileReadError: The file exists but cannot be read.
        ConfigParseError: The file is not valid JSON of the expected shape.
    """
    if not path.is_file():
        msg = "Obsidian config not found. Is Obsidian installed?"
        raise ConfigNotFound(msg, detail={"path": str(path)})

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Failed to read {path.name}: {exc}"
        raise FileReadError(msg, detail={"path": str(path)}) from exc

    try:
        registry = _Registry.model_validate_json(raw)
    except ValidationError as exc:
        msg = f"Failed to parse {path.name}: {exc}"
        raise ConfigParseError(msg, detail={"path": str(path), "cause": str(exc)}) from exc

    return {vault_id: entry.path for vault_id, entry in registry.vaults.items()}


def discover_vaults(path: Path) -> list[Vault]:
    """Vaults listed in the registry at *path* whose directory still exists."""
    vaults: list[Vault] = []
    for vault_id, vault_path in load_registry(path).items():
        if not Path(vault_path).exists():
            logger.debug("Skipping stale registry entry %s: %s", vault_id, vault_path)
            continue
        vaults.append(Vault.from_registry(vault_id, vault_path))
    return vaults


def read_daily_notes_config(vault_path: Path) -> tuple[DailyNotesConfig, str | None]:
    """Read ``.obsidian/daily-notes.json`` for *vault_path*.

    Returns ``(config, warning)``. A missing file yields defaults silently;
    an unreadable or malformed one yields defaults plus a warning message.
    """
    settings_path = vault_path / DAILY_NOTES_SETTINGS
    try:
        raw = settings_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return DailyNotesConfig(), None
    except OSError as exc:
        logger.debug("Could not read %s: %s", settings_path, exc)
        return DailyNotesConfig(), f"Could not read {DAILY_NOTES_SETTINGS}; using defaults"

    try:
        data: Any = json.loads(raw)
        return DailyNotesConfig.model_validate(data), None
    except (ValueError, ValidationError) as exc:
        logger.debug("Ignoring malformed %s: %s", settings_path, exc)
        return DailyNotesConfig(), f"Malformed {DAILY_NOTES_SETTINGS}; using defaults"
