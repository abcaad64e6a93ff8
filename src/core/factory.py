"""Construction helpers for Cache instances.

create_cache wires a Cache from explicit arguments with config.py
defaults; get_default_cache keeps one lazily built instance for callers
that want a single process-wide cache.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from config import SERIALIZER, STORE_SHARDS, SWEEP_INTERVAL_SECONDS
from core.cache import Cache
from core.interfaces import Serializer
from serializers.serializer_factory import get_serializer


def create_cache(
    *,
    serializer: Optional[Serializer] = None,
    serializer_name: Optional[str] = None,
    sweep_interval: Optional[float] = None,
    shards: Optional[int] = None,
    start_sweeper: bool = True,
) -> Cache:
    """
    Build a Cache, filling unset arguments from config.

    An injected serializer wins over serializer_name.
    """
    return Cache(
        serializer=serializer if serializer is not None else get_serializer(serializer_name or SERIALIZER),
        sweep_interval=SWEEP_INTERVAL_SECONDS if sweep_interval is None else sweep_interval,
        shards=STORE_SHARDS if shards is None else shards,
        start_sweeper=start_sweeper,
    )


@lru_cache(maxsize=1)
def get_default_cache() -> Cache:
    # Built on first access, sweeper included; lives until the process exits
    return create_cache()
