from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ValidationResult:
    ip_address: str
    host_resolved: bool
    ip_valid: bool
    mac_valid: bool
    port_valid: bool

    @property
    def ok(self) -> bool:
        return (
            self.host_resolved and self.ip_valid and self.mac_valid and self.port_valid
        )
