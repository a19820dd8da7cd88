"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, ``quickadd.toml`` only holds
overrides. Most users need no config file at all.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class RegistryConfig(BaseModel):
    """[registry] section."""

    model_config = {"frozen": True}

    path: Path | None = None


class VaultConfig(BaseModel):
    """[vault] section."""

    model_config = {"frozen": True}

    default: str | None = None


class TasksConfig(BaseModel):
    """[tasks] section."""

    model_config = {"frozen": True}

    parse_dates: bool = True
