"""Weighted multi-field scoring.

Each field contributes independently:

- substring hit (normalized field text contains the normalized query):
  ``SUBSTRING_MULTIPLIER * weight``, no fuzzy pass for that field;
- otherwise the best similarity between the query and the whole field text
  or any of its tokens; at or above ``FUZZY_THRESHOLD`` it contributes
  ``floor(similarity * FUZZY_MULTIPLIER * weight)``.

The item score is the sum over fields. The constants are part of the ranking
contract and must not be tuned per call.
"""

from __future__ import annotations

from collections.abc import Iterable
import itertools
import math
from typing import NamedTuple

from catalog_search.search.analyzers import is_blank, normalize, tokenize
from catalog_search.search.fuzzy import best_similarity


SUBSTRING_MULTIPLIER = 100
FUZZY_MULTIPLIER = 80
FUZZY_THRESHOLD = 0.6


class WeightedField(NamedTuple):
    """A piece of item text and its relative importance for one search call."""

    text: str | None
    weight: int


def score_field(normalized_query: str, text: str | None, weight: int) -> int:
    """Score a single field against an already normalized query."""
    if is_blank(text):
        return 0

    normalized_text = normalize(text)
    if normalized_query in normalized_text:
        return SUBSTRING_MULTIPLIER * weight

    candidates = itertools.chain((normalized_text,), tokenize(normalized_text))
    best = best_similarity(normalized_query, candidates, FUZZY_THRESHOLD)
    if best >= FUZZY_THRESHOLD:
        return math.floor(best * FUZZY_MULTIPLIER * weight)
    return 0


def score_fields(normalized_query: str, fields: Iterable[tuple[str | None, int]]) -> int:
    """Sum the field scores of one item."""
    total = 0
    for text, weight in fields:
        total += score_field(normalized_query, text, weight)
    return total
