from __future__ import annotations

import json
import os
import tomllib
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from .paths import default_config_path, default_data_dir, expand_path

CONFIG_ENV_VAR = "LANWAKE_CONFIG"


class DatabaseConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    path: str = Field(default_factory=lambda: str(default_data_dir()))


class ScanningConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    # empty means "detect the local /24"
    default_prefix: str = ""
    timeout: float = Field(default=0.5, gt=0)
    lanes: int = Field(default=25, ge=1, le=254)


class WakeConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    port: int = Field(default=9, ge=0, le=65535)
    repeat: int = Field(default=3, ge=1)
    broadcast_delay: float = Field(default=1.0, ge=0)
    max_ping_tries: int = Field(default=25, ge=1)
    ping_timeout: float = Field(default=5.0, gt=0)


class StatusConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    timeout: float = Field(default=3.0, gt=0)


class Settings(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    scanning: ScanningConfig = Field(default_factory=ScanningConfig)
    wake: WakeConfig = Field(default_factory=WakeConfig)
    status: StatusConfig = Field(default_factory=StatusConfig)


def resolve_config_path(allow_missing: bool = False) -> tuple[Path, bool]:
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = expand_path(env_path)
        if not allow_missing and not path.exists():
            raise FileNotFoundError(f"{CONFIG_ENV_VAR} points to missing file: {path}")
        return path, path.exists()

    path = default_config_path()
    return path, path.exists()


def load_settings(path: Path) -> Settings:
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"Invalid TOML in config file: {path}\n{exc}") from exc

    try:
        return Settings.model_validate(data or {})
    except ValidationError as exc:
        raise ValueError(f"Invalid config file: {path}\n{exc}") from exc


@lru_cache
def get_settings() -> Settings:
    path, exists = resolve_config_path(allow_missing=False)
    if exists:
        return load_settings(path)
    return Settings()


def data_dir_from_settings(settings: Settings) -> Path:
    return expand_path(settings.database.path)


def _toml_string(value: str) -> str:
    return json.dumps(value)


def render_settings_toml(settings: Settings) -> str:
    scanning = settings.scanning
    wake = settings.wake
    lines = [
        "# lanwake configuration",
        "",
        "[database]",
        f"path = {_toml_string(settings.database.path)}",
        "",
        "[scanning]",
        f"default_prefix = {_toml_string(scanning.default_prefix)}",
        f"timeout = {scanning.timeout}",
        f"lanes = {scanning.lanes}",
        "",
        "[wake]",
        f"port = {wake.port}",
        f"repeat = {wake.repeat}",
        f"broadcast_delay = {wake.broadcast_delay}",
        f"max_ping_tries = {wake.max_ping_tries}",
        f"ping_timeout = {wake.ping_timeout}",
        "",
        "[status]",
        f"timeout = {settings.status.timeout}",
        "",
    ]
    return "\n".join(lines)


def write_settings(settings: Settings, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_settings_toml(settings))
