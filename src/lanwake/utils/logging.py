from __future__ import annotations

import logging
import os

import coloredlogs  # type: ignore[import]

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
DATE_FORMAT = "%H:%M:%S"

# libraries that log every packet at DEBUG
NOISY_LOGGERS = ("icmplib", "asyncio")


def setup_logging(level: str | None = None) -> None:
    """Install coloredlogs; the level comes from ``level`` or $LOGLEVEL."""
    resolved = (level or os.environ.get("LOGLEVEL", "INFO")).upper()

    coloredlogs.install(level=resolved, fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
