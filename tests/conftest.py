"""Shared fixtures for the xkcd proxy tests."""

import sys
from pathlib import Path

import pytest

# Add the backend directory to the Python path
backend_dir = Path(__file__).parent.parent / "backend"
sys.path.insert(0, str(backend_dir))

from errors import UpstreamTransportError  # noqa: E402
from services.cache import TTLCache  # noqa: E402


class FakeClock:
    """Manually advanced clock for expiry tests."""

    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeXkcdClient:
    """Stands in for XkcdClient; serves comics from a dict and records calls."""

    base_url = "https://xkcd.test"

    def __init__(self, latest_num: int = 500):
        self.latest_num = latest_num
        self.calls: list[int | None] = []
        self.fail_with: Exception | None = None

    def comic(self, number: int) -> dict:
        return {"num": number, "title": f"Comic {number}", "img": f"https://imgs.xkcd.test/{number}.png"}

    async def fetch(self, number: int | None = None):
        self.calls.append(number)
        if self.fail_with is not None:
            raise self.fail_with
        if number is None:
            return self.comic(self.latest_num)
        if number < 1 or number > self.latest_num:
            raise UpstreamTransportError(404, "Not Found")
        return self.comic(number)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return TTLCache(clock=clock)


@pytest.fixture
def fake_client():
    return FakeXkcdClient()
