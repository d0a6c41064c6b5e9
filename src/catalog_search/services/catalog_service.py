"""Product listing on top of the search engine."""

from __future__ import annotations

from collections.abc import Sequence
import logging
from uuid import UUID

from pydantic import Field
from pydantic.dataclasses import dataclass

from catalog_search.catalog import (
    ProductSearchable,
    catalog_sort_key,
    filter_by_category,
    filter_name_contains,
)
from catalog_search.config import Settings
from catalog_search.domain.model import Product
from catalog_search.search.analyzers import is_blank
from catalog_search.search.engine import SearchEngine


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProductSearchPage:
    """One page of a product listing."""

    items: list[Product]
    total: int = Field(ge=0)
    page: int = Field(ge=1)
    page_size: int = Field(ge=1)


class CatalogSearchService:
    """Search, filter, sort and page products.

    A non-blank ``search`` term narrows the catalog to the engine's ranked
    matches (capped at ``settings.search_max_results``) before the category
    and name filters run. The page is always in catalog order, so relevance
    only decides membership.
    """

    def __init__(self, settings: Settings, engine: SearchEngine[Product] | None = None):
        self.settings = settings
        self.engine = engine if engine is not None else SearchEngine.from_settings(settings)
        self._searchable = ProductSearchable()

    def clamp_paging(self, page: int, page_size: int) -> tuple[int, int]:
        """Page below 1 becomes 1; a page size outside 1..max becomes the default."""
        page = max(page, 1)
        if page_size < 1 or page_size > self.settings.max_page_size:
            page_size = self.settings.default_page_size
        return page, page_size

    def list_products(
        self,
        products: Sequence[Product],
        *,
        page: int = 1,
        page_size: int | None = None,
        category_id: UUID | None = None,
        name: str | None = None,
        search: str | None = None,
    ) -> ProductSearchPage:
        """Return one page of ``products`` after search and filters.

        Args:
            products: The full catalog snapshot.
            page: 1-based page number.
            page_size: Items per page, defaults to ``settings.default_page_size``.
            category_id: Restrict to one category.
            name: Case-insensitive substring filter on the product name.
            search: Free-text fuzzy search term.
        """
        page, page_size = self.clamp_paging(page, page_size or self.settings.default_page_size)

        candidates: Sequence[Product] = products
        if not is_blank(search):
            candidates = self.engine.search_with(products, search, self.settings.search_max_results, self._searchable)
            logger.debug("Search %r matched %d of %d products", search, len(candidates), len(products))

        filtered = sorted(filter_name_contains(filter_by_category(candidates, category_id), name), key=catalog_sort_key)

        start = (page - 1) * page_size
        return ProductSearchPage(
            items=filtered[start : start + page_size],
            total=len(filtered),
            page=page,
            page_size=page_size,
        )
