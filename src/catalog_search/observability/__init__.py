"""Logging, tracing and metrics for catalog search."""

from catalog_search.observability.context import get_trace_context, set_trace_context, trace_context
from catalog_search.observability.logging import JsonFormatter, configure_from_settings, configure_logging
from catalog_search.observability.metrics import (
    SEARCH_CACHE_ENTRIES,
    SEARCH_CACHE_LOOKUPS,
    SEARCH_LATENCY,
    SEARCH_RESULTS,
    get_metrics,
    get_metrics_content_type,
    track_latency,
)
from catalog_search.observability.tracing import create_span, get_tracer, init_tracing


__all__ = [
    "SEARCH_CACHE_ENTRIES",
    "SEARCH_CACHE_LOOKUPS",
    "SEARCH_LATENCY",
    "SEARCH_RESULTS",
    "JsonFormatter",
    "configure_from_settings",
    "configure_logging",
    "create_span",
    "get_metrics",
    "get_metrics_content_type",
    "get_trace_context",
    "get_tracer",
    "init_tracing",
    "set_trace_context",
    "trace_context",
    "track_latency",
]
