"""Data models for lanwake."""

from lanwake.models.device import Device, TargetRegistry
from lanwake.models.message import Message, MessageKey, MessageKind
from lanwake.models.validation import ValidationResult

__all__ = [
    "Device",
    "Message",
    "MessageKey",
    "MessageKind",
    "TargetRegistry",
    "ValidationResult",
]
