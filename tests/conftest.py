import pytest

import core.models as models_mod
from core.cache import Cache
from serializers.pickle_serializer import PickleSerializer


class FakeClock:
    """Controllable stand-in for time.monotonic_ns, in milliseconds."""

    def __init__(self, start_ms: int = 1_000_000) -> None:
        self.now_ms = start_ms

    def monotonic_ns(self) -> int:
        return self.now_ms * 1_000_000

    def advance(self, ms: int) -> None:
        self.now_ms += ms


@pytest.fixture
def clock(monkeypatch):
    c = FakeClock()
    monkeypatch.setattr(models_mod.time, "monotonic_ns", c.monotonic_ns)
    return c


@pytest.fixture
def cache():
    c = Cache(serializer=PickleSerializer(), start_sweeper=False)
    yield c
    c.close()
