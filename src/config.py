"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants used across the codebase (sweep
interval, shard count, default serializer and log level).
"""

from __future__ import annotations

import os


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


# Expiry sweeper
SWEEP_INTERVAL_SECONDS = _env_float("MINIKV_SWEEP_INTERVAL", 1.0)

# Store
STORE_SHARDS = _env_int("MINIKV_SHARDS", 16)

# Encoding: "pickle" or "json"
SERIALIZER = _env_str("MINIKV_SERIALIZER", "pickle")

# Logging
LOG_LEVEL = _env_str("MINIKV_LOG_LEVEL", "INFO")
