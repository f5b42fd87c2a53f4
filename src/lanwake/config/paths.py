from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "lanwake"
CONFIG_FILENAME = "config.toml"


def _xdg_dir(variable: str, fallback: Path) -> Path:
    return Path(os.environ.get(variable) or fallback)


def default_config_path() -> Path:
    config_home = _xdg_dir("XDG_CONFIG_HOME", Path.home() / ".config")
    return config_home / APP_NAME / CONFIG_FILENAME


def default_data_dir() -> Path:
    return _xdg_dir("XDG_DATA_HOME", Path.home() / ".local" / "share") / APP_NAME


def expand_path(value: str) -> Path:
    return Path(os.path.expandvars(os.path.expanduser(value)))
