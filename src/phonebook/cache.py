"""Bounded cache of the K best-ranked entries of a larger collection.

The cache sees inserts and updates as they happen and keeps the K best of
everything it was shown. It cannot recover from a removal of one of its own
members, because the next-best candidate lives only in the backing
collection. Instead of a partial fix it is invalidated and rebuilt from a
full scan on the next read.

Ranking and identity are separate:

- ``key`` orders entries like ``sorted(key=...)``; the smallest key ranks first.
- membership uses the entries' own ``==``.

Not thread safe. The owner must serialize access to the cache together with
the collection it mirrors.
"""

from __future__ import annotations

import bisect
from typing import TYPE_CHECKING, Any, Generic, TypeVar

import structlog

from phonebook.errors import CacheInvalidatedError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

log = structlog.get_logger()

T = TypeVar("T")


class TopCache(Generic[T]):
    def __init__(self, key: Callable[[T], Any], size: int) -> None:
        if size < 1:
            raise ValueError(f"cache size must be >= 1, got {size}")
        self._key = key
        self._size = size
        # Best first; holds at most size + 1 entries between insert and evict.
        self._entries: list[T] = []
        self._invalidated = False

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def size(self) -> int:
        return self._size

    def insert_if_room(self, entry: T) -> None:
        """Insert ``entry`` and evict the worst-ranked one if over capacity."""
        bisect.insort(self._entries, entry, key=self._key)
        if len(self._entries) > self._size:
            self._entries.pop()

    def get_ordered(self) -> list[T]:
        """Return the cached entries best first.

        Raises:
            CacheInvalidatedError: if the cache needs a rebuild.
        """
        if self._invalidated:
            raise CacheInvalidatedError()
        return list(self._entries)

    def contains(self, entry: T) -> bool:
        return entry in self._entries

    __contains__ = contains

    def invalidate(self) -> None:
        """Drop every cached entry. Only ``rebuild`` makes the cache valid again."""
        self._entries.clear()
        self._invalidated = True
        log.debug("cache_invalidated", size=self._size)

    def is_valid(self) -> bool:
        return not self._invalidated

    def rebuild(self, entries: Iterable[T]) -> list[T]:
        """Recompute the cache from the complete collection and return it."""
        self._entries.clear()
        scanned = 0
        for entry in entries:
            self.insert_if_room(entry)
            scanned += 1
        self._invalidated = False
        log.debug("cache_rebuilt", scanned=scanned, cached=len(self._entries))
        return list(self._entries)

    def update_if_present(self, entry: T) -> None:
        """Replace the cached copy equal to ``entry`` and re-rank it.

        Does nothing when no equal entry is cached. Validity is not checked.
        """
        try:
            index = self._entries.index(entry)
        except ValueError:
            return
        del self._entries[index]
        bisect.insort(self._entries, entry, key=self._key)

    def try_update_if_valid(self, entries: Iterable[T]) -> None:
        """Feed ``entries`` through ``insert_if_room`` if the cache is valid.

        Validity is checked once, before the first entry; an invalidated
        cache drops the whole batch.
        """
        if self._invalidated:
            return
        for entry in entries:
            self.insert_if_room(entry)
