"""Comic lookups backed by the TTL cache."""

import logging
import random
from typing import Any, NamedTuple

from errors import UpstreamParseError
from services.cache import TTLCache
from services.xkcd import XkcdClient

logger = logging.getLogger(__name__)

LATEST_KEY = "latest"

_MISSING = object()


class FetchResult(NamedTuple):
    data: Any
    cached: bool


def cache_key_for(number: int | None = None) -> str:
    if number is None:
        return LATEST_KEY
    return f"comic-{number}"


def pick_random_number(latest_num: int, rng: random.Random | None = None) -> int:
    """Uniform pick in [1, latest_num]."""
    return (rng or random).randint(1, latest_num)


class ComicService:
    def __init__(self, cache: TTLCache, client: XkcdClient, rng: random.Random | None = None):
        self.cache = cache
        self.client = client
        self._rng = rng

    async def fetch_with_cache(self, cache_key: str, number: int | None = None) -> FetchResult:
        cached = self.cache.get(cache_key, _MISSING)
        if cached is not _MISSING:
            return FetchResult(cached, True)

        # Nothing is stored if the fetch raises
        data = await self.client.fetch(number)
        self.cache.set(cache_key, data)
        return FetchResult(data, False)

    async def get_latest(self) -> FetchResult:
        return await self.fetch_with_cache(LATEST_KEY)

    async def get_comic(self, number: int) -> FetchResult:
        return await self.fetch_with_cache(cache_key_for(number), number)

    async def get_random(self) -> FetchResult:
        latest = await self.get_latest()
        latest_num = latest.data.get("num") if isinstance(latest.data, dict) else None
        if isinstance(latest_num, bool) or not isinstance(latest_num, int) or latest_num < 1:
            raise UpstreamParseError(f"latest comic has no usable 'num': {latest_num!r}")

        number = pick_random_number(latest_num, self._rng)
        logger.debug("Random comic %d of %d", number, latest_num)
        return await self.get_comic(number)

    def stats(self) -> dict:
        return {
            "size": self.cache.size(),
            "keys": self.cache.keys(),
            "maxAge": self.cache.ttl_ms,
        }

    def clear(self) -> dict:
        previous = self.cache.clear()
        logger.info("Cache cleared (%d entries)", previous)
        return {"message": "Cache cleared", "previousSize": previous}
