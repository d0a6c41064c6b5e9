"""Prometheus metrics for the search engine."""

from __future__ import annotations

from contextlib import contextmanager
import time
from typing import TYPE_CHECKING

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest


if TYPE_CHECKING:
    from collections.abc import Generator


SEARCH_LATENCY = Histogram(
    "catalog_search_latency_seconds",
    "Search call latency by execution path",
    ["path"],
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
)

SEARCH_CACHE_LOOKUPS = Counter(
    "catalog_search_cache_lookups_total",
    "Search cache lookups by result",
    ["result"],
)

SEARCH_CACHE_ENTRIES = Gauge(
    "catalog_search_cache_entries",
    "Entries currently held by all search caches in the process",
)

SEARCH_RESULTS = Histogram(
    "catalog_search_results",
    "Number of items returned per search",
    buckets=(0, 1, 5, 10, 20, 50, 100, 200),
)


@contextmanager
def track_latency(histogram: Histogram, **labels: str) -> Generator[None, None, None]:
    """Observe the wall time of the wrapped block."""
    start = time.perf_counter()
    try:
        yield
    finally:
        metric = histogram.labels(**labels) if labels else histogram
        metric.observe(time.perf_counter() - start)


def get_metrics() -> bytes:
    """Prometheus text exposition of the default registry."""
    return generate_latest()


def get_metrics_content_type() -> str:
    return CONTENT_TYPE_LATEST
