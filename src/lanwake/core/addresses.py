"""IPv4/MAC address helpers and name lookups."""

from __future__ import annotations

import asyncio
import ipaddress
import logging
import re
import socket

logger = logging.getLogger(__name__)

_MAC_PATTERN = re.compile(r"^[0-9A-Fa-f]{2}(:[0-9A-Fa-f]{2}){5}$")


def is_valid_ipv4(value: str) -> bool:
    try:
        ipaddress.IPv4Address(value)
    except ValueError:
        return False
    return True


def is_valid_mac(value: str) -> bool:
    return bool(_MAC_PATTERN.match(value))


def looks_like_hostname(value: str) -> bool:
    """True unless ``value`` is made only of digits and dots."""
    return bool(value) and not all(ch.isdigit() or ch == "." for ch in value)


def broadcast_address(ip: str) -> str:
    prefix, _, _ = ip.rpartition(".")
    return f"{prefix}.255"


async def resolve_host(name: str) -> str | None:
    """Resolve ``name`` to an IPv4 address, or None if it cannot be resolved."""
    if is_valid_ipv4(name):
        return name

    loop = asyncio.get_running_loop()
    try:
        infos = await loop.getaddrinfo(
            name, None, family=socket.AF_INET, type=socket.SOCK_STREAM
        )
    except (OSError, UnicodeError) as exc:
        logger.debug("Could not resolve %s: %s", name, exc)
        return None

    if not infos:
        return None
    address = infos[0][4][0]
    logger.debug("Resolved %s to %s", name, address)
    return str(address)


async def reverse_lookup(ip: str) -> str:
    """Best-effort reverse DNS; an empty string when there is no name."""
    try:
        host, _aliases, _addresses = await asyncio.to_thread(socket.gethostbyaddr, ip)
    except (OSError, UnicodeError) as exc:
        logger.debug("No reverse name for %s: %s", ip, exc)
        return ""
    return host


def detect_local_prefix() -> str:
    """Detect the first three octets of the local /24 (e.g. '192.168.1')."""
    try:
        # no packet is sent; connect() only picks the outgoing interface
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect(("8.8.8.8", 80))
            local_ip = sock.getsockname()[0]
    except OSError as exc:
        raise RuntimeError("Could not detect local network") from exc

    network = ipaddress.ip_network(f"{local_ip}/24", strict=False)
    prefix = str(network.network_address).rpartition(".")[0]
    logger.debug("Detected local network: %s", network)
    return prefix
