"""Background sweeper that evicts expired entries.

Runs a daemon thread that wakes every `interval_seconds`, scans a
snapshot of the store and removes the entries it finds expired, whether
or not anyone ever reads them again. A failing tick is logged and the
loop carries on with the next one.
"""

from __future__ import annotations

import logging
import math
import threading
from typing import Optional

from core.errors import ConfigError
from core.store import Store

logger = logging.getLogger(__name__)


class ExpirySweeper:
    def __init__(self, store: Store, *, interval_seconds: float = 1.0) -> None:
        interval = float(interval_seconds)
        if not math.isfinite(interval) or interval <= 0:
            raise ConfigError(f"Sweep interval must be a positive finite number, got {interval_seconds}")
        self._store = store
        self._interval = interval
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def interval_seconds(self) -> float:
        return self._interval

    @property
    def running(self) -> bool:
        return bool(self._thread and self._thread.is_alive())

    def start(self) -> None:
        if self._thread and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="minikv-sweeper", daemon=True)
        self._thread.start()
        logger.debug("Expiry sweeper started (interval=%.3fs)", self._interval)

    def stop(self, timeout: float = 3.0) -> None:
        self._stop.set()
        if self._thread:
            self._thread.join(timeout=timeout)
            if self._thread.is_alive():
                logger.warning("Expiry sweeper did not stop within %.1fs", timeout)
            else:
                self._thread = None
                logger.debug("Expiry sweeper stopped")

    def sweep_once(self) -> int:
        """Remove every entry currently expired and return how many were removed."""
        removed = 0
        for key, entry in self._store.items():
            # Conditional removal: a key refreshed by a concurrent set survives
            if entry.is_expired() and self._store.remove_if_same(key, entry):
                removed += 1
        return removed

    def _run(self) -> None:
        # First tick fires one interval after start
        while not self._stop.wait(self._interval):
            try:
                removed = self.sweep_once()
            except Exception:
                logger.exception("Expiry sweep failed; retrying on next tick")
                continue
            if removed:
                logger.debug("Expiry sweep removed %d entries", removed)
