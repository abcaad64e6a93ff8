"""Factory for selecting the Serializer implementation by name."""

from __future__ import annotations

from typing import Optional

from core.errors import ConfigError
from core.interfaces import Serializer
from serializers.json_serializer import JsonSerializer
from serializers.pickle_serializer import PickleSerializer


def get_serializer(name: Optional[str] = None) -> Serializer:
    """
    Return the serializer registered under `name`.

    - "pickle" (default, also used when name is empty) -> PickleSerializer
    - "json" -> JsonSerializer (pydantic)
    """
    key = (name or "pickle").strip().lower()
    if key == "pickle":
        return PickleSerializer()
    if key == "json":
        return JsonSerializer()
    raise ConfigError(f"Unknown serializer: {name}")
