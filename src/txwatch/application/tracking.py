from __future__ import annotations
import threading

class BlockTracker:
    """Last block height seen by a successful fetch. Overwritten, not monotonic."""

    def __init__(self, initial: int = 0) -> None:
        self._block = initial
        self._lock = threading.Lock()

    def current_block(self) -> int:
        with self._lock:
            return self._block

    def set_block(self, n: int) -> None:
        with self._lock:
            self._block = n
