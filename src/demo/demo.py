"""Demo entry point for the cache.

Sets a key with a short TTL, reads it back, waits past its expiry and
reads it again; then shows that a key stored without a TTL survives.
"""

from __future__ import annotations

import argparse
import logging
import time
from typing import Callable, Optional, Sequence, Tuple

from config import LOG_LEVEL
from core.cache import Cache
from core.factory import create_cache
from observability import setup_logging

logger = logging.getLogger(__name__)


def run_expiry_demo(
    cache: Cache,
    *,
    sleep: Optional[Callable[[float], None]] = None,
) -> Tuple[Optional[str], Optional[str]]:
    logger.info("Setting key 'name' with TTL 3 seconds...")
    cache.set("name", "Mini Redis Demo", 3000)
    before = cache.get("name", str)
    logger.info("Getting key: %s", before)

    (sleep or time.sleep)(4.0)  # past the TTL

    after = cache.get("name", str)
    logger.info("After expiry, value: %s", after)
    return before, after


def run_persistent_demo(
    cache: Cache,
    *,
    wait_seconds: float = 10.0,
    sleep: Optional[Callable[[float], None]] = None,
) -> Optional[int]:
    logger.info("Setting key 'x' with no expiry...")
    cache.set("x", 42, 0)

    (sleep or time.sleep)(wait_seconds)

    value = cache.get("x", int)
    logger.info("After %.0fs, value: %s (ttl=%d)", wait_seconds, value, cache.ttl("x"))
    return value


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Run the TTL cache demo scenarios.")
    parser.add_argument("--serializer", default=None, help='"pickle" or "json" (default from config)')
    parser.add_argument("--wait", type=float, default=10.0, help="seconds to wait in the no-expiry demo")
    parser.add_argument("--log-level", default=LOG_LEVEL)
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    with create_cache(serializer_name=args.serializer) as cache:
        run_expiry_demo(cache)
        run_persistent_demo(cache, wait_seconds=args.wait)


if __name__ == "__main__":
    main()
