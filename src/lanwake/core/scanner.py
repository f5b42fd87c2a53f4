"""Ping sweep of a /24 subnet."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import AsyncIterator, Callable

from lanwake.config import ScanningConfig
from lanwake.models import Device

from .addresses import reverse_lookup
from .ping import probe

logger = logging.getLogger(__name__)

FIRST_HOST = 1
LAST_HOST = 254
HOST_COUNT = LAST_HOST - FIRST_HOST + 1

ProgressCallback = Callable[[float], None]


def lane_indices(lane: int, lanes: int) -> range:
    """Host indices owned by ``lane`` (1-based): lane, lane + lanes, ..."""
    return range(lane, LAST_HOST + 1, lanes)


class ScanProgress:
    """Counts handled addresses and reports the fraction done."""

    def __init__(self, callback: ProgressCallback | None = None) -> None:
        self._callback = callback
        self.count = 0

    def advance(self) -> None:
        # no await between increment and report, so lanes cannot interleave here
        self.count += 1
        if self._callback is not None:
            self._callback(self.count / HOST_COUNT)


async def scan_network(
    prefix: str,
    config: ScanningConfig | None = None,
    progress: ProgressCallback | None = None,
) -> AsyncIterator[Device]:
    """Yield a Device for every address in ``prefix``.1-254 that answers a ping.

    Devices arrive as they are found, so their order across lanes is not
    fixed. The iterator finishes once every lane has probed all of its
    addresses. Closing it early cancels the remaining probes.
    """
    config = config or ScanningConfig()
    queue: asyncio.Queue[Device | None] = asyncio.Queue()
    tracker = ScanProgress(progress)

    async def run_lane(lane: int) -> None:
        for index in lane_indices(lane, config.lanes):
            address = f"{prefix}.{index}"
            if await probe(address, config.timeout):
                host_name = await reverse_lookup(address)
                logger.debug("Found %s (%s)", address, host_name or "no name")
                queue.put_nowait(Device(ip_address=address, host_name=host_name))
            tracker.advance()

    async def run_lanes() -> None:
        try:
            # a failing lane cancels the others
            async with asyncio.TaskGroup() as group:
                for lane in range(1, config.lanes + 1):
                    group.create_task(run_lane(lane))
        finally:
            queue.put_nowait(None)

    logger.debug(
        "Scanning %s.%d-%d (lanes=%d, timeout=%.2fs)",
        prefix,
        FIRST_HOST,
        LAST_HOST,
        config.lanes,
        config.timeout,
    )
    runner = asyncio.create_task(run_lanes())
    found = 0
    try:
        while True:
            device = await queue.get()
            if device is None:
                break
            found += 1
            yield device
        await runner
        logger.info("Scan of %s.0/24 complete: found %d devices", prefix, found)
    finally:
        if not runner.done():
            runner.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await runner
