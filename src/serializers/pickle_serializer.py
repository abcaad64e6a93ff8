"""Default serializer backed by pickle.

Handles arbitrary Python object graphs (cycles included). Decoding
checks the result against the requested shape with isinstance, using
the generic origin for parametrized types such as list[int].
"""

from __future__ import annotations

import pickle
from typing import Any, Optional, get_origin

from core.errors import DecodingError, EncodingError


def _shape_type(shape: Any) -> Optional[type]:
    if shape is None or shape is Any:
        return None
    origin = get_origin(shape)
    target = origin if origin is not None else shape
    return target if isinstance(target, type) else None


class PickleSerializer:
    # Only ever reads bytes this process wrote itself
    def __init__(self, *, protocol: int = pickle.HIGHEST_PROTOCOL) -> None:
        self._protocol = int(protocol)

    def encode(self, value: Any) -> bytes:
        try:
            return pickle.dumps(value, protocol=self._protocol)
        except (pickle.PicklingError, TypeError, AttributeError, RecursionError) as e:
            raise EncodingError(f"Cannot encode value of type {type(value).__name__}") from e

    def decode(self, data: bytes, shape: Optional[Any] = None) -> Any:
        try:
            value = pickle.loads(data)
        except (
            pickle.UnpicklingError,
            EOFError,
            AttributeError,
            ImportError,
            IndexError,
            KeyError,
            TypeError,
            ValueError,
        ) as e:
            raise DecodingError("Stored bytes are not a valid pickle payload") from e

        expected = _shape_type(shape)
        if expected is not None and not isinstance(value, expected):
            raise DecodingError(
                f"Expected {expected.__name__}, found {type(value).__name__}"
            )
        return value
