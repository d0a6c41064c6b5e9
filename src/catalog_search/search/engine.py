"""In-process fuzzy, weighted, multi-field search with a result cache.

The engine is generic over the item type. Each call receives the full
candidate collection plus two pure functions: one yielding the item's
weighted text fields for this call, one yielding its stable, totally
ordered identity.

Execution paths:

- ``passthrough``: blank query, first ``max_results`` items in input order;
- ``hit``: the normalized query is cached; the current items are filtered
  to the cached identity set, keeping *input* order rather than the cached
  rank order (the cache stores membership for replay);
- ``miss``: every item is scored, matches are ranked by score descending
  then identity ascending, and the ranked identities are cached.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
import itertools
import logging
from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar

from catalog_search.observability.metrics import (
    SEARCH_CACHE_LOOKUPS,
    SEARCH_LATENCY,
    SEARCH_RESULTS,
    track_latency,
)
from catalog_search.observability.tracing import create_span
from catalog_search.search.analyzers import is_blank, normalize
from catalog_search.search.cache import QueryResultCache
from catalog_search.search.scoring import score_fields


if TYPE_CHECKING:
    from catalog_search.config import Settings


logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT")
ItemT_contra = TypeVar("ItemT_contra", contravariant=True)

FieldExtractor = Callable[[ItemT], Iterable[tuple[str | None, int]]]
IdentityExtractor = Callable[[ItemT], Any]


class Searchable(Protocol[ItemT_contra]):
    """Capability interface bundling both extractors for one item type."""

    def fields(self, item: ItemT_contra) -> Iterable[tuple[str | None, int]]:  # pragma: no cover - interface
        ...

    def identity(self, item: ItemT_contra) -> Any:  # pragma: no cover - interface
        ...


class SearchEngine(Generic[ItemT]):
    """Rank items against a free-text query.

    Safe to share between threads. Scoring runs without holding the cache
    lock, so two concurrent misses on one query may both compute and both
    store; the last write wins.
    """

    def __init__(self, cache: QueryResultCache | None = None) -> None:
        self._cache: QueryResultCache = cache if cache is not None else QueryResultCache()

    @classmethod
    def from_settings(cls, settings: Settings) -> SearchEngine:
        """Build an engine whose cache honours the ``search_cache_*`` settings."""
        return cls(
            QueryResultCache(
                max_entries=settings.search_cache_max_entries,
                ttl_seconds=settings.search_cache_ttl_seconds,
            )
        )

    @property
    def cache(self) -> QueryResultCache:
        return self._cache

    def search(
        self,
        items: Iterable[ItemT],
        query: str | None,
        max_results: int,
        fields: FieldExtractor,
        identity: IdentityExtractor,
    ) -> list[ItemT]:
        """Return at most ``max_results`` items matching ``query``.

        Args:
            items: Full candidate collection for this call.
            query: Free-text query; blank queries return items unranked.
            max_results: Result cap; ``0`` or less yields an empty list.
            fields: Item -> iterable of ``(text, weight)`` pairs.
            identity: Item -> stable identity; identities must be orderable.

        Returns:
            Matching items without duplicates. Never raises for an empty
            corpus or a query with no matches; extractor errors propagate.
        """
        if max_results <= 0:
            return []

        if is_blank(query):
            with track_latency(SEARCH_LATENCY, path="passthrough"):
                results = list(itertools.islice(items, max_results))
            SEARCH_RESULTS.observe(len(results))
            return results

        normalized = normalize(query)

        with create_span("catalog_search.search", attributes={"search.query": normalized}) as span:
            cached = self._cache.get(normalized)
            if cached is not None:
                SEARCH_CACHE_LOOKUPS.labels(result="hit").inc()
                span.set_attribute("search.cache_hit", True)
                with track_latency(SEARCH_LATENCY, path="hit"):
                    results = self._replay(items, cached, max_results, identity)
                logger.debug("Cache hit for %r: %d results", normalized, len(results))
            else:
                SEARCH_CACHE_LOOKUPS.labels(result="miss").inc()
                span.set_attribute("search.cache_hit", False)
                with track_latency(SEARCH_LATENCY, path="miss"):
                    results = self._rank(items, normalized, max_results, fields, identity)
                logger.debug("Cache miss for %r: %d results", normalized, len(results))

            span.set_attribute("search.result_count", len(results))

        SEARCH_RESULTS.observe(len(results))
        return results

    def search_with(
        self,
        items: Iterable[ItemT],
        query: str | None,
        max_results: int,
        adapter: Searchable[ItemT],
    ) -> list[ItemT]:
        """``search`` using a ``Searchable`` adapter for both extractors."""
        return self.search(items, query, max_results, adapter.fields, adapter.identity)

    def _replay(
        self,
        items: Iterable[ItemT],
        cached: tuple[Hashable, ...],
        max_results: int,
        identity: IdentityExtractor,
    ) -> list[ItemT]:
        members = set(cached)
        matches = (item for item in items if identity(item) in members)
        return list(itertools.islice(matches, max_results))

    def _rank(
        self,
        items: Iterable[ItemT],
        normalized_query: str,
        max_results: int,
        fields: FieldExtractor,
        identity: IdentityExtractor,
    ) -> list[ItemT]:
        scored: list[tuple[int, Any, ItemT]] = []
        for item in items:
            score = score_fields(normalized_query, fields(item))
            if score > 0:
                scored.append((score, identity(item), item))

        # Stable two-pass sort: identity ascending, then score descending.
        scored.sort(key=lambda entry: entry[1])
        scored.sort(key=lambda entry: entry[0], reverse=True)
        top = scored[:max_results]

        self._cache.put(normalized_query, (entry[1] for entry in top))
        return [entry[2] for entry in top]
