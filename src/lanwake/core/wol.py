"""Wake-on-LAN: validate a target, send the magic packet, wait for it to come up."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Callable

from wakeonlan import send_magic_packet

from lanwake.config import WakeConfig
from lanwake.models import Device, Message, MessageKey, MessageKind, ValidationResult
from lanwake.text import format_message

from .addresses import (
    broadcast_address,
    is_valid_ipv4,
    is_valid_mac,
    looks_like_hostname,
    resolve_host,
)
from .cancel import CancellationToken
from .messages import append_message
from .ping import probe

logger = logging.getLogger(__name__)

Formatter = Callable[..., str]


def is_valid_port(port: object) -> bool:
    return (
        isinstance(port, int) and not isinstance(port, bool) and 0 <= port <= 65535
    )


def validate_target(
    ip: str, mac: str, port: int | None, host_resolved: bool = True
) -> ValidationResult:
    """Check every field of a wake target; never stops at the first problem."""
    return ValidationResult(
        ip_address=ip,
        host_resolved=host_resolved,
        ip_valid=is_valid_ipv4(ip),
        mac_valid=is_valid_mac(mac),
        port_valid=is_valid_port(port),
    )


async def _send_burst(mac: str, address: str, port: int, repeat: int) -> None:
    for _ in range(repeat):
        await asyncio.to_thread(send_magic_packet, mac, ip_address=address, port=port)


async def send_magic_packets(
    ip: str,
    mac: str,
    port: int,
    config: WakeConfig | None = None,
    token: CancellationToken | None = None,
) -> None:
    """Send the magic packet to ``ip`` and then to its subnet broadcast address.

    Raises OSError or ValueError if a packet cannot be sent.
    """
    config = config or WakeConfig()
    logger.debug(
        "Sending %d magic packets for %s to %s:%d", config.repeat, mac, ip, port
    )
    await _send_burst(mac, ip, port, config.repeat)

    await asyncio.sleep(config.broadcast_delay)
    if token is not None and token.cancelled:
        return

    # some hosts only wake from a broadcast
    broadcast = broadcast_address(ip)
    logger.debug(
        "Sending %d magic packets for %s to %s:%d",
        config.repeat,
        mac,
        broadcast,
        port,
    )
    await _send_burst(mac, broadcast, port, config.repeat)


async def wake(
    target: Device,
    config: WakeConfig | None = None,
    *,
    formatter: Formatter = format_message,
    token: CancellationToken | None = None,
) -> AsyncIterator[Message]:
    """Wake ``target`` and yield status messages in the order they happen.

    Validation problems are all reported before the run ends without any
    network traffic. Otherwise the packet is sent, then the host is pinged up
    to ``config.max_ping_tries`` times. Setting ``token`` stops the run at the
    next checkpoint without further messages.
    """
    config = config or WakeConfig()
    token = token or CancellationToken()

    def message(
        key: MessageKey, kind: MessageKind = MessageKind.INFO, *args: object
    ) -> Message:
        return Message(text=formatter(key, *args), kind=kind, key=key, args=args)

    ip = target.ip_address
    mac = target.mac_address
    port = target.wol_port

    host_resolved = True
    if looks_like_hostname(ip):
        resolved = await resolve_host(ip)
        if token.cancelled:
            return
        if resolved is None:
            host_resolved = False
            yield message(MessageKey.HOST_UNRESOLVABLE, MessageKind.ERROR, ip)
        else:
            ip = resolved

    result = validate_target(ip, mac, port, host_resolved=host_resolved)
    if not result.ip_valid:
        yield message(MessageKey.INVALID_IP, MessageKind.ERROR, ip)
    if not result.mac_valid:
        yield message(MessageKey.INVALID_MAC, MessageKind.ERROR, mac)
    if not result.port_valid:
        yield message(
            MessageKey.INVALID_PORT, MessageKind.ERROR, "" if port is None else port
        )
    if not result.ok or port is None:
        logger.info("Not waking %s: invalid target", target.ip_address)
        yield message(MessageKey.INVALID_TARGET, MessageKind.ERROR)
        return

    yield message(MessageKey.TARGET_VALID)
    if token.cancelled:
        return
    yield message(MessageKey.SENDING_WOL)
    if token.cancelled:
        return

    try:
        await send_magic_packets(ip, mac, port, config, token)
        sent = True
    except (OSError, ValueError) as exc:
        logger.warning("Failed to send magic packet to %s: %s", ip, exc)
        sent = False
    if token.cancelled:
        return

    if sent:
        yield message(MessageKey.SEND_SUCCEEDED, MessageKind.CHECK, ip)
    else:
        yield message(MessageKey.SEND_FAILED, MessageKind.ERROR, ip)
    if token.cancelled:
        return

    yield message(MessageKey.PINGING_INFO)
    online = False
    for attempt in range(1, config.max_ping_tries + 1):
        if token.cancelled:
            return
        yield message(MessageKey.PING_ATTEMPT, MessageKind.PING, attempt)
        online = await probe(ip, config.ping_timeout)
        if token.cancelled:
            return
        if online:
            break

    if online:
        logger.info("%s is online after %d ping(s)", ip, attempt)
        yield message(MessageKey.PING_SUCCESS, MessageKind.ONLINE)
    else:
        logger.info("%s did not respond to %d pings", ip, config.max_ping_tries)
        yield message(MessageKey.PING_FAIL, MessageKind.ERROR)


async def wake_with_log(
    target: Device,
    config: WakeConfig | None = None,
    *,
    formatter: Formatter = format_message,
    token: CancellationToken | None = None,
) -> AsyncIterator[list[Message]]:
    """Like ``wake`` but yields the coalesced log after every message."""
    log: list[Message] = []
    async for item in wake(target, config, formatter=formatter, token=token):
        log = append_message(log, item)
        yield log
