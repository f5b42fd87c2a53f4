from __future__ import annotations

import asyncio
from collections.abc import Iterable

from .ping import probe

DEFAULT_STATUS_TIMEOUT = 3.0


async def check_status(
    addresses: Iterable[str], timeout: float = DEFAULT_STATUS_TIMEOUT
) -> dict[str, bool]:
    """Probe every address once, concurrently."""
    unique = list(dict.fromkeys(addresses))
    results = await asyncio.gather(*(probe(address, timeout) for address in unique))
    return dict(zip(unique, results))
