from __future__ import annotations


class CancellationToken:
    """Lets the caller of a wake run ask it to stop at its next checkpoint."""

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled
