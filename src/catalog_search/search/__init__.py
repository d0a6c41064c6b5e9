"""
Fuzzy, weighted, multi-field search engine.

- analyzers: normalization and letter/digit tokenization
- fuzzy: Levenshtein distance and similarity
- scoring: per-field scoring constants and rules
- cache: thread-safe normalized-query result cache
- engine: SearchEngine tying the pieces together
"""

from catalog_search.search.cache import QueryResultCache
from catalog_search.search.engine import SearchEngine, Searchable
from catalog_search.search.scoring import WeightedField


__all__ = ["QueryResultCache", "SearchEngine", "Searchable", "WeightedField"]
