"""Core protocol and interface definitions.

Defines the Serializer protocol the cache uses to turn values into
opaque bytes and back, so encodings can be swapped without touching
the Cache or the Store.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol


class Serializer(Protocol):
    """Contract for any value encoding (pickle, JSON, etc.)."""
    def encode(self, value: Any) -> bytes:
        ...

    def decode(self, data: bytes, shape: Optional[Any] = None) -> Any:
        ...
