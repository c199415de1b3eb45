"""Simple in-memory TTL cache. No Redis needed.

Entries expire lazily: staleness is only checked when a key is read, so an
expired entry stays in memory until it is looked up again or the cache is
cleared. There is no size bound.

Note: Each uvicorn worker has its own cache instance. With --workers 2,
a comic may be fetched twice (once per worker).
"""

import threading
import time
from typing import Any, Callable

CACHE_TTL_SECONDS = 3600


class TTLCache:
    def __init__(self, ttl_seconds: float = CACHE_TTL_SECONDS, clock: Callable[[], float] = time.time):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._store: dict[str, tuple[float, Any]] = {}

    @property
    def ttl_ms(self) -> int:
        return int(self.ttl_seconds * 1000)

    def get(self, key: str, default: Any = None) -> Any:
        """Value for `key` if fresh, else `default`. A stale entry is dropped."""
        with self._lock:
            if key in self._store:
                inserted_at, value = self._store[key]
                if self._clock() - inserted_at < self.ttl_seconds:
                    return value
                del self._store[key]
            return default

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._store[key] = (self._clock(), value)

    def clear(self) -> int:
        """Drop every entry and return how many there were."""
        with self._lock:
            previous = len(self._store)
            self._store.clear()
            return previous

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._store)

    def size(self) -> int:
        with self._lock:
            return len(self._store)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: str) -> bool:
        # Presence only; does not evict
        with self._lock:
            return key in self._store
