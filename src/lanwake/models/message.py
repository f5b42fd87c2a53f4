"""Status events produced by the wake pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MessageKind(str, Enum):
    INFO = "info"
    ERROR = "error"
    CHECK = "check"
    PING = "ping"
    ONLINE = "online"


class MessageKey(str, Enum):
    HOST_UNRESOLVABLE = "host_unresolvable"
    INVALID_IP = "invalid_ip"
    INVALID_MAC = "invalid_mac"
    INVALID_PORT = "invalid_port"
    INVALID_TARGET = "invalid_target"
    TARGET_VALID = "target_valid"
    SENDING_WOL = "sending_wol"
    SEND_SUCCEEDED = "send_succeeded"
    SEND_FAILED = "send_failed"
    PINGING_INFO = "pinging_info"
    PING_ATTEMPT = "ping_attempt"
    PING_SUCCESS = "ping_success"
    PING_FAIL = "ping_fail"


@dataclass(frozen=True)
class Message:
    text: str
    kind: MessageKind = MessageKind.INFO
    key: MessageKey | None = None
    args: tuple[object, ...] = ()
