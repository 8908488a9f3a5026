import pytest

from thirstee_cache.services.cache import TTLCache
from thirstee_cache.services.invalidation import CacheInvalidator


class FakeClock:
    def __init__(self, start: float = 1_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return TTLCache(default_ttl=300, clock=clock)


@pytest.fixture
def invalidator(cache):
    return CacheInvalidator(cache)
