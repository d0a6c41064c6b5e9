"""Thread-safe cache of ranked search membership keyed by normalized query.

Entries map a normalized query to the identities of the items a fresh
computation returned, in rank order. Entries are immutable once written.

By default the cache is unbounded and entries never expire: the corpus is
assumed append-mostly for the process lifetime and stale membership is an
accepted trade-off. ``max_entries`` and ``ttl_seconds`` bound growth and
staleness when that assumption does not hold.
"""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Callable, Hashable, Iterable
import logging
import threading
import time
from typing import Generic, NamedTuple, TypeVar

from catalog_search.observability.metrics import SEARCH_CACHE_ENTRIES


logger = logging.getLogger(__name__)

IdT = TypeVar("IdT", bound=Hashable)


class _Entry(NamedTuple):
    identities: tuple[Hashable, ...]
    stored_at: float


class QueryResultCache(Generic[IdT]):
    """Map of normalized query -> ranked identity tuple guarded by one lock.

    Args:
        max_entries: Maximum number of keys kept; the oldest written entry is
            evicted first. ``0`` means unbounded.
        ttl_seconds: Entry lifetime; expired entries read as misses. ``0``
            means entries never expire.
        clock: Monotonic time source, injectable for tests.
    """

    def __init__(
        self,
        max_entries: int = 0,
        ttl_seconds: float = 0.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_entries < 0:
            raise ValueError("max_entries must be >= 0")
        if ttl_seconds < 0:
            raise ValueError("ttl_seconds must be >= 0")
        self.max_entries = max_entries
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: OrderedDict[str, _Entry] = OrderedDict()

    def get(self, key: str) -> tuple[IdT, ...] | None:
        """Return the cached identities for ``key`` or ``None`` on a miss."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._is_expired(entry):
                self._discard(key)
                logger.debug("Cache entry expired for %r", key)
                return None
            return entry.identities

    def put(self, key: str, identities: Iterable[IdT]) -> None:
        """Store ``identities`` under ``key``; a concurrent writer may overwrite it."""
        entry = _Entry(tuple(identities), self._clock())
        with self._lock:
            if key not in self._entries:
                SEARCH_CACHE_ENTRIES.inc()
            self._entries[key] = entry
            self._entries.move_to_end(key)
            if self.max_entries:
                while len(self._entries) > self.max_entries:
                    evicted = next(iter(self._entries))
                    self._discard(evicted)
                    logger.debug("Evicted cache entry %r", evicted)

    def snapshot(self) -> dict[str, tuple[IdT, ...]]:
        """Copy of the live (non-expired) entries."""
        with self._lock:
            self._purge_expired()
            return {key: entry.identities for key, entry in self._entries.items()}

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self.get(key) is not None

    def __len__(self) -> int:
        """Number of live entries; expired ones are dropped first."""
        with self._lock:
            self._purge_expired()
            return len(self._entries)

    def _is_expired(self, entry: _Entry) -> bool:
        return bool(self.ttl_seconds) and self._clock() - entry.stored_at >= self.ttl_seconds

    # Callers hold self._lock
    def _discard(self, key: str) -> None:
        del self._entries[key]
        SEARCH_CACHE_ENTRIES.dec()

    def _purge_expired(self) -> None:
        if not self.ttl_seconds:
            return
        for key in [key for key, entry in self._entries.items() if self._is_expired(entry)]:
            self._discard(key)
