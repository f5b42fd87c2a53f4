"""English text for wake pipeline messages."""

from __future__ import annotations

from lanwake.models import MessageKey

TEMPLATES: dict[MessageKey, str] = {
    MessageKey.HOST_UNRESOLVABLE: "Could not resolve host '{0}'",
    MessageKey.INVALID_IP: "Invalid IP address '{0}'",
    MessageKey.INVALID_MAC: "Invalid MAC address '{0}'",
    MessageKey.INVALID_PORT: "Invalid port '{0}'",
    MessageKey.INVALID_TARGET: "Target is invalid, nothing was sent",
    MessageKey.TARGET_VALID: "Target is valid",
    MessageKey.SENDING_WOL: "Sending Wake-on-LAN packet...",
    MessageKey.SEND_SUCCEEDED: "Magic packet sent to {0}",
    MessageKey.SEND_FAILED: "Failed to send magic packet to {0}",
    MessageKey.PINGING_INFO: "Waiting for the device to come online...",
    MessageKey.PING_ATTEMPT: "Ping attempt {0}",
    MessageKey.PING_SUCCESS: "Device is online",
    MessageKey.PING_FAIL: "Device did not respond",
}


def format_message(key: MessageKey, *args: object) -> str:
    return TEMPLATES[key].format(*args)
