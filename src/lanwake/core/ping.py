from __future__ import annotations

import logging

from icmplib import ICMPLibError, async_ping

logger = logging.getLogger(__name__)


async def probe(address: str, timeout: float) -> bool:
    """Send one ICMP echo to ``address`` and report whether it answered.

    Timeouts, unreachable hosts, bad addresses and socket permission problems
    all come back as False.
    """
    try:
        host = await async_ping(address, count=1, timeout=timeout, privileged=False)
    except (ICMPLibError, OSError) as exc:
        logger.debug("Probe of %s failed: %s", address, exc)
        return False

    logger.debug("Probe of %s: alive=%s", address, host.is_alive)
    return bool(host.is_alive)
