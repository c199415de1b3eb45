"""Map a request path to one of the proxy's logical operations.

Matchers are tried in table order and the first match wins; a path that
matches nothing resolves to NOT_FOUND.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable


class Operation(str, Enum):
    LATEST = "latest"
    RANDOM = "random"
    COMIC = "comic"
    CACHE_STATS = "cache_stats"
    CACHE_CLEAR = "cache_clear"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ResolvedOperation:
    operation: Operation
    endpoint: str
    number: int | None = None


def _exact(*paths: str, operation: Operation, endpoint: str) -> Callable[[str], ResolvedOperation | None]:
    def match(path: str) -> ResolvedOperation | None:
        if path in paths:
            return ResolvedOperation(operation, endpoint)
        return None

    return match


_COMIC_PATH = re.compile(r"/([0-9]+)")


def _comic_number(path: str) -> ResolvedOperation | None:
    # /0 is passed through; the upstream decides whether it exists
    m = _COMIC_PATH.fullmatch(path)
    if not m:
        return None
    number = int(m.group(1))
    return ResolvedOperation(Operation.COMIC, f"comic-{number}", number)


ROUTES: list[Callable[[str], ResolvedOperation | None]] = [
    _exact("/", "/latest", operation=Operation.LATEST, endpoint="latest"),
    _exact("/random", operation=Operation.RANDOM, endpoint="random"),
    _comic_number,
    _exact("/cache/stats", operation=Operation.CACHE_STATS, endpoint="/cache/stats"),
    _exact("/cache/clear", operation=Operation.CACHE_CLEAR, endpoint="/cache/clear"),
]


def resolve(path: str) -> ResolvedOperation:
    for matcher in ROUTES:
        resolved = matcher(path)
        if resolved is not None:
            return resolved
    return ResolvedOperation(Operation.NOT_FOUND, path)
