"""lanwake - find hosts on the local subnet and wake them with Wake-on-LAN."""

from __future__ import annotations

from importlib.metadata import version

from .config import ScanningConfig, Settings, WakeConfig, get_settings
from .core import CancellationToken, check_status, coalesce, scan_network, wake
from .models import Device, Message, MessageKey, MessageKind, TargetRegistry
from .storage import Database

__all__ = [
    "CancellationToken",
    "Database",
    "Device",
    "Message",
    "MessageKey",
    "MessageKind",
    "ScanningConfig",
    "Settings",
    "TargetRegistry",
    "WakeConfig",
    "__version__",
    "check_status",
    "coalesce",
    "get_settings",
    "scan_network",
    "wake",
]

__version__ = version("lanwake")
