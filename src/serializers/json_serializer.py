"""JSON serializer backed by pydantic TypeAdapter.

Encodes any value pydantic can dump to JSON (builtins, dataclasses,
BaseModel instances, datetimes, ...) and decodes by validating the JSON
against the requested shape in strict mode, so a type mismatch between
what was stored and what is asked for surfaces as DecodingError.

Non-finite floats are written as the Infinity/NaN constants so they read
back as floats. JSON has no tuples, bytes or non-string keys: without a
shape, (1, 2) decodes as [1, 2], b"abc" as "abc" and {1: "a"} as
{"1": "a"}. Pass the shape to get the original types back.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Optional

from pydantic import ConfigDict, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from core.errors import DecodingError, EncodingError

# Default "null" would turn inf/nan into something indistinguishable from None
_ENCODER: TypeAdapter = TypeAdapter(Any, config=ConfigDict(ser_json_inf_nan="constants"))


@lru_cache(maxsize=256)
def _adapter(shape: Any) -> TypeAdapter:
    # Building an adapter compiles a schema; reuse them per shape
    return TypeAdapter(shape)


class JsonSerializer:
    def __init__(self, *, strict: bool = True) -> None:
        self._strict = bool(strict)

    def encode(self, value: Any) -> bytes:
        try:
            return _ENCODER.dump_json(value)
        except (PydanticSerializationError, ValueError, TypeError) as e:
            raise EncodingError(f"Cannot encode value of type {type(value).__name__} as JSON") from e

    def decode(self, data: bytes, shape: Optional[Any] = None) -> Any:
        target = Any if shape is None else shape
        try:
            adapter = _adapter(target)
        except TypeError:
            # Unhashable shapes can't go through the lru_cache
            adapter = TypeAdapter(target)
        try:
            return adapter.validate_json(data, strict=self._strict)
        except ValidationError as e:
            raise DecodingError(f"Stored JSON does not match {target!r}") from e
