"""Sharded thread-safe mapping from string keys to cache entries.

Keys are spread over a fixed number of shards, each a plain dict guarded
by its own lock. Per-key operations take exactly one shard lock for the
duration of the dict operation; a full scan copies one shard at a time,
so it sees a weakly-consistent snapshot and never blocks the whole table.
"""

from __future__ import annotations

import threading
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from core.errors import ConfigError
from core.models import Entry


class _Shard:
    __slots__ = ("lock", "data")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.data: Dict[str, Entry] = {}


class Store:
    def __init__(self, *, shards: int = 16) -> None:
        count = int(shards)
        if count < 1:
            raise ConfigError(f"Shard count must be at least 1, got {shards}")
        self._shards: List[_Shard] = [_Shard() for _ in range(count)]

    def _shard_for(self, key: str) -> _Shard:
        return self._shards[hash(key) % len(self._shards)]

    def get(self, key: str) -> Optional[Entry]:
        shard = self._shard_for(key)
        with shard.lock:
            return shard.data.get(key)

    def put(self, key: str, entry: Entry) -> None:
        shard = self._shard_for(key)
        with shard.lock:
            shard.data[key] = entry

    def remove(self, key: str) -> Optional[Entry]:
        shard = self._shard_for(key)
        with shard.lock:
            return shard.data.pop(key, None)

    def remove_if_same(self, key: str, entry: Entry) -> bool:
        """Remove key only if it still maps to this exact entry object.

        Returns True when the entry was removed. A concurrent set that
        replaced the entry makes this a no-op.
        """
        shard = self._shard_for(key)
        with shard.lock:
            if shard.data.get(key) is not entry:
                return False
            del shard.data[key]
            return True

    def compute(self, key: str, fn: Callable[[Optional[Entry]], Optional[Entry]]) -> Optional[Entry]:
        """Atomically replace the entry for key with fn(current).

        fn runs while the shard lock is held, so it must not touch the
        store itself. Returning None removes the key.
        """
        shard = self._shard_for(key)
        with shard.lock:
            new = fn(shard.data.get(key))
            if new is None:
                shard.data.pop(key, None)
            else:
                shard.data[key] = new
            return new

    def items(self) -> Iterator[Tuple[str, Entry]]:
        # Copy each shard under its lock, yield outside it
        for shard in self._shards:
            with shard.lock:
                snapshot = list(shard.data.items())
            yield from snapshot

    def clear(self) -> None:
        for shard in self._shards:
            with shard.lock:
                shard.data.clear()

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self.get(key) is not None

    def __len__(self) -> int:
        total = 0
        for shard in self._shards:
            with shard.lock:
                total += len(shard.data)
        return total
