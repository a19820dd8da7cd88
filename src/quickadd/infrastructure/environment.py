"""Process environment capability.

Home directory, clock, platform, and environment variables are the only
ambient inputs the services need. They are bundled behind
:class:`Environment` so registry discovery and note location take them
as explicit arguments and tests can pin them.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from datetime import date, datetime
from pathlib import Path
from typing import Protocol

from quickadd.domain.errors import HomeDirectoryUnresolvable

REGISTRY_DIRNAME = "obsidian"
REGISTRY_FILENAME = "obsidian.json"


class Environment(Protocol):
    """What the services need from the outside world."""

    platform: str
    environ: Mapping[str, str]

    def home_dir(self) -> Path: ...

    def now(self) -> datetime: ...


class SystemEnvironment:
    """The real process environment."""

    def __init__(self) -> None:
        self.platform = sys.platform
        self.environ = os.environ

    def home_dir(self) -> Path:
        try:
            return Path.home()
        except RuntimeError as exc:
            msg = f"Could not find home directory: {exc}"
            raise HomeDirectoryUnresolvable(msg) from exc

    def now(self) -> datetime:
        return datetime.now()


def today(env: Environment) -> date:
    """The local calendar date according to *env*."""
    return env.now().date()


def app_data_dir(env: Environment) -> Path:
    """Per-user application data directory for the current platform.

    - macOS: ``~/Library/Application Support``
    - Windows: ``%APPDATA%`` (``~/AppData/Roaming`` if unset)
    - Other: ``$XDG_CONFIG_HOME`` (``~/.config`` if unset)
    """
    if env.platform == "darwin":
        return env.home_dir() / "Library" / "Application Support"
    if env.platform.startswith("win"):
        appdata = env.environ.get("APPDATA")
        return Path(appdata) if appdata else env.home_dir() / "AppData" / "Roaming"
    xdg = env.environ.get("XDG_CONFIG_HOME")
    return Path(xdg) if xdg else env.home_dir() / ".config"


def registry_path(env: Environment) -> Path:
    """Location of Obsidian's global vault registry (``obsidian.json``)."""
    return app_data_dir(env) / REGISTRY_DIRNAME / REGISTRY_FILENAME
