"""Display projection of the wake message stream."""

from __future__ import annotations

from collections.abc import Iterable

from lanwake.models import Message, MessageKind


def append_message(log: list[Message], message: Message) -> list[Message]:
    """Return ``log`` plus ``message``, replacing a trailing ping with a new one."""
    if log and log[-1].kind is MessageKind.PING and message.kind is MessageKind.PING:
        return [*log[:-1], message]
    return [*log, message]


def coalesce(messages: Iterable[Message]) -> list[Message]:
    log: list[Message] = []
    for message in messages:
        log = append_message(log, message)
    return log
