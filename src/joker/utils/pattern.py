"""One-shot wildcard helpers backed by a cache of compiled wildcards."""

from __future__ import annotations

import functools
from collections.abc import Iterable

from joker.errors import InvalidInputError
from joker.wildcard import Wildcard

__all__ = ["match_pattern", "filter_names", "clear_cache"]


@functools.lru_cache(maxsize=256)
def _cached(pattern: str, casefold: bool) -> Wildcard:
    return Wildcard(pattern, casefold)


def _lookup(pattern: str, casefold: bool) -> Wildcard:
    if not isinstance(pattern, str):
        raise InvalidInputError("pattern", "a string", pattern)
    return _cached(pattern, bool(casefold))


def match_pattern(pattern: str, value: str, casefold: bool = False) -> bool:
    """Match a value against a wildcard pattern without keeping the Wildcard.

    Args:
        pattern: The wildcard source. Compiled forms are cached.
        value: The string to test.
        casefold: Ignore case for literal characters and group members.

    Returns:
        True if the whole value matches the pattern, False otherwise.
    """
    return _lookup(pattern, casefold).matches(value)


def filter_names(names: Iterable[str], pattern: str, casefold: bool = False) -> list[str]:
    """Return the subset of ``names`` that match ``pattern``, in order."""
    return _lookup(pattern, casefold).filter(names)


def clear_cache() -> None:
    """Drop every cached compiled wildcard."""
    _cached.cache_clear()
