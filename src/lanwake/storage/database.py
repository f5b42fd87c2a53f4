from __future__ import annotations

import json
import tomllib
from pathlib import Path

from pydantic import ValidationError

from lanwake.models import Device, TargetRegistry

TARGETS_FILE = "targets.toml"


def _toml_string(value: str) -> str:
    return json.dumps(value)


def _render_targets_toml(registry: TargetRegistry) -> str:
    lines = [
        "# lanwake saved wake targets",
        "",
        "[targets]",
    ]

    for name, device in sorted(registry.targets.items()):
        fields = [
            f"ip_address = {_toml_string(device.ip_address)}",
            f"mac_address = {_toml_string(device.mac_address)}",
        ]
        if device.host_name:
            fields.append(f"host_name = {_toml_string(device.host_name)}")
        if device.wol_port is not None:
            fields.append(f"wol_port = {device.wol_port}")
        lines.append(f"{_toml_string(name)} = {{ {', '.join(fields)} }}")

    lines.append("")
    return "\n".join(lines)


class Database:
    def __init__(self, data_dir: Path) -> None:
        self._data_dir = data_dir
        self._targets_path = data_dir / TARGETS_FILE

    @property
    def path(self) -> Path:
        return self._data_dir

    @property
    def targets_path(self) -> Path:
        return self._targets_path

    def ensure_dirs(self) -> None:
        self._data_dir.mkdir(parents=True, exist_ok=True)

    def load_targets(self) -> TargetRegistry:
        if not self._targets_path.exists():
            return TargetRegistry()

        try:
            with self._targets_path.open("rb") as handle:
                data = tomllib.load(handle) or {}
        except tomllib.TOMLDecodeError as exc:
            raise ValueError(
                f"Invalid TOML in targets file: {self._targets_path}\n{exc}"
            ) from exc

        try:
            return TargetRegistry.model_validate({"targets": data.get("targets", {})})
        except ValidationError as exc:
            raise ValueError(
                f"Invalid targets file: {self._targets_path}\n{exc}"
            ) from exc

    def save_targets(self, registry: TargetRegistry) -> None:
        self.ensure_dirs()
        self._targets_path.write_text(_render_targets_toml(registry))

    def get_target(self, name: str) -> Device | None:
        return self.load_targets().targets.get(name)

    def add_target(self, name: str, device: Device) -> None:
        registry = self.load_targets()
        registry.targets[name] = device
        self.save_targets(registry)

    def remove_target(self, name: str) -> bool:
        registry = self.load_targets()
        if name in registry.targets:
            del registry.targets[name]
            self.save_targets(registry)
            return True
        return False

    def init(self, force: bool = False) -> bool:
        """Create the data directory and an empty targets file.

        Returns True if anything was written.
        """
        if self._targets_path.exists() and not force:
            return False
        self.save_targets(TargetRegistry())
        return True
