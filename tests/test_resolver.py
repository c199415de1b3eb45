"""
Unit tests for path resolution.
"""

import pytest

from routes.resolver import Operation, ResolvedOperation, resolve


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/", ResolvedOperation(Operation.LATEST, "latest")),
        ("/latest", ResolvedOperation(Operation.LATEST, "latest")),
        ("/random", ResolvedOperation(Operation.RANDOM, "random")),
        ("/42", ResolvedOperation(Operation.COMIC, "comic-42", 42)),
        ("/007", ResolvedOperation(Operation.COMIC, "comic-7", 7)),
        ("/cache/stats", ResolvedOperation(Operation.CACHE_STATS, "/cache/stats")),
        ("/cache/clear", ResolvedOperation(Operation.CACHE_CLEAR, "/cache/clear")),
    ],
)
def test_known_paths(path, expected):
    assert resolve(path) == expected


def test_zero_is_passed_through():
    assert resolve("/0") == ResolvedOperation(Operation.COMIC, "comic-0", 0)


@pytest.mark.parametrize(
    "path",
    ["/nonexistent/path", "/-1", "/42/", "/42abc", "/latest/", "/cache", "/random/1", "/٤٢"],
)
def test_unknown_paths(path):
    resolved = resolve(path)
    assert resolved.operation is Operation.NOT_FOUND
    assert resolved.endpoint == path
