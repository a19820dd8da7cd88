"""Vault and per-vault settings models."""

from __future__ import annotations

from pathlib import PurePath

from pydantic import BaseModel


class Vault(BaseModel):
    """A vault listed in the Obsidian registry that exists on disk.

    Attributes:
        id: Opaque registry key.
        path: Absolute vault directory, as written in the registry.
        name: Final path segment (the raw path if there is none).
    """

    model_config = {"frozen": True}

    id: str
    path: str
    name: str

    @classmethod
    def from_registry(cls, vault_id: str, path: str) -> Vault:
        return cls(id=vault_id, path=path, name=vault_name(path))


def vault_name(path: str) -> str:
    """Derive a display name from the final segment of *path*.

    Falls back to *path* itself for degenerate paths such as ``/``.
    """
    name = PurePath(path).name
    return name or path


class DailyNotesConfig(BaseModel):
    """``.obsidian/daily-notes.json`` — every key optional, extras ignored.

    ``template`` is read for completeness but not used when inserting tasks.
    """

    model_config = {"frozen": True, "extra": "ignore"}

    folder: str | None = None
    format: str | None = None
    template: str | None = None
