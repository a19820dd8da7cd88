"""Config file discovery.

``quickadd.toml`` lives in the per-user config directory
(``~/.config/quickadd`` on Linux). ``QUICKADD_CONFIG`` and ``--config``
override the location.
"""

from __future__ import annotations

from pathlib import Path

from quickadd.domain.errors import QuickAddError
from quickadd.infrastructure.environment import Environment, SystemEnvironment, app_data_dir

CONFIG_DIRNAME = "quickadd"
CONFIG_FILENAME = "quickadd.toml"
CONFIG_ENV_VAR = "QUICKADD_CONFIG"


def default_config_path(env: Environment | None = None) -> Path | None:
    """Per-user config file location, or None if no home is available."""
    try:
        return app_data_dir(env or SystemEnvironment()) / CONFIG_DIRNAME / CONFIG_FILENAME
    except QuickAddError:
        return None


def find_config(env: Environment | None = None) -> Path | None:
    """Return the config file to load, or None if there is none.

    Checks ``QUICKADD_CONFIG`` first; when set, no other location is tried.
    """
    env = env or SystemEnvironment()
    env_path = env.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    candidate = default_config_path(env)
    if candidate is not None and candidate.is_file():
        return candidate
    return None
