from __future__ import annotations

from .addresses import (
    broadcast_address,
    detect_local_prefix,
    is_valid_ipv4,
    is_valid_mac,
    looks_like_hostname,
    resolve_host,
    reverse_lookup,
)
from .cancel import CancellationToken
from .messages import append_message, coalesce
from .ping import probe
from .scanner import scan_network
from .status import check_status
from .wol import send_magic_packets, validate_target, wake, wake_with_log

__all__ = [
    "CancellationToken",
    "append_message",
    "broadcast_address",
    "check_status",
    "coalesce",
    "detect_local_prefix",
    "is_valid_ipv4",
    "is_valid_mac",
    "looks_like_hostname",
    "probe",
    "resolve_host",
    "reverse_lookup",
    "scan_network",
    "send_magic_packets",
    "validate_target",
    "wake",
    "wake_with_log",
]
