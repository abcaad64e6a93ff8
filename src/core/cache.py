"""In-memory key-value cache with per-entry TTL.

Values are encoded through a pluggable Serializer and stored as
immutable entries in a sharded Store. Every read path checks expiry;
`get` also lazily removes an expired entry it runs into, and an
ExpirySweeper thread reclaims the ones nobody reads.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from core.errors import DecodingError
from core.interfaces import Serializer
from core.models import Entry
from core.store import Store
from core.sweeper import ExpirySweeper

logger = logging.getLogger(__name__)

# ttl() results for keys without a remaining lifetime
TTL_MISSING = -2
TTL_PERSISTENT = -1


class Cache:
    def __init__(
        self,
        *,
        serializer: Serializer,
        sweep_interval: float = 1.0,
        shards: int = 16,
        start_sweeper: bool = True,
    ) -> None:
        self._serializer = serializer
        self._store = Store(shards=shards)
        # The sweeper only ever sees the store, never the cache
        self._sweeper = ExpirySweeper(self._store, interval_seconds=sweep_interval)
        if start_sweeper:
            self._sweeper.start()

    @property
    def store(self) -> Store:
        return self._store

    @property
    def sweeper(self) -> ExpirySweeper:
        return self._sweeper

    def set(self, key: str, value: Any, ttl_ms: int = -1) -> None:
        """Store value under key, replacing any previous entry and its TTL.

        ttl_ms <= 0 means the entry never expires. Raises EncodingError if
        the serializer rejects the value; the store is left untouched.
        """
        data = self._serializer.encode(value)
        self._store.put(key, Entry.create(data, ttl_ms))

    def get(self, key: str, shape: Optional[Any] = None) -> Any:
        """Return the value for key, or None when missing or expired.

        Raises DecodingError when the stored bytes don't decode as `shape`;
        the entry is kept as is in that case.
        """
        entry = self._store.get(key)
        if entry is None:
            return None

        if entry.is_expired():
            # Lazy eviction, skipped if a concurrent set already replaced it
            if self._store.remove_if_same(key, entry):
                logger.debug("Evicted expired key %r on read", key)
            return None

        return self._serializer.decode(entry.value, shape)

    def exists(self, key: str) -> bool:
        # Read-only: expired entries are left for get() or the sweeper
        entry = self._store.get(key)
        return entry is not None and not entry.is_expired()

    def delete(self, key: str) -> None:
        self._store.remove(key)

    def ttl(self, key: str) -> int:
        """Remaining lifetime of key in milliseconds.

        Returns -2 when the key is missing (or already expired but not yet
        reclaimed) and -1 when it never expires.
        """
        entry = self._store.get(key)
        if entry is None or entry.is_expired():
            return TTL_MISSING

        remaining = entry.remaining_ttl()
        if remaining is None:
            return TTL_PERSISTENT
        return max(0, remaining)

    def incr(self, key: str, amount: int = 1) -> int:
        """Add amount to the integer at key and return the new value.

        A missing or expired key counts as 0. The result is stored with no
        expiry. The read-modify-write is atomic for this key.
        """
        result = 0

        def _apply(current: Optional[Entry]) -> Entry:
            nonlocal result
            base = 0
            if current is not None and not current.is_expired():
                base = self._decode_int(key, current.value)
            result = base + int(amount)
            return Entry.create(self._serializer.encode(result), -1)

        self._store.compute(key, _apply)
        return result

    def decr(self, key: str, amount: int = 1) -> int:
        return self.incr(key, -int(amount))

    def sweep(self) -> int:
        """Run one expiry pass now and return the number of evicted keys."""
        return self._sweeper.sweep_once()

    def close(self) -> None:
        self._sweeper.stop()

    def __enter__(self) -> "Cache":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __len__(self) -> int:
        return len(self._store)

    def _decode_int(self, key: str, data: bytes) -> int:
        value = self._serializer.decode(data, int)
        # bool passes an int check but isn't a counter
        if isinstance(value, bool):
            raise DecodingError(f"Value at {key!r} is not an integer")
        return value
