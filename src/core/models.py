"""Immutable cache entry model.

An Entry pairs the encoded payload with an absolute expiry instant on
the process monotonic clock, or None when the entry never expires.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional


def now_ms() -> int:
    # Monotonic so expiry isn't affected by wall-clock adjustments
    return time.monotonic_ns() // 1_000_000


@dataclass(frozen=True, slots=True)
class Entry:
    value: bytes
    expires_at: Optional[int] = None  # ms on the monotonic clock

    @classmethod
    def create(cls, value: bytes, ttl_ms: int) -> "Entry":
        """Build an entry that expires ttl_ms from now; ttl_ms <= 0 never expires."""
        ttl = int(ttl_ms)
        if ttl <= 0:
            return cls(value=value, expires_at=None)
        return cls(value=value, expires_at=now_ms() + ttl)

    def is_expired(self) -> bool:
        return self.expires_at is not None and now_ms() > self.expires_at

    def remaining_ttl(self) -> Optional[int]:
        # Negative once expired; callers treat that as "expired", nothing more
        if self.expires_at is None:
            return None
        return self.expires_at - now_ms()
