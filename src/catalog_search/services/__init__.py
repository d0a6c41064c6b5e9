"""Services composing the search engine with catalog behaviour."""

from catalog_search.services.catalog_service import CatalogSearchService, ProductSearchPage


__all__ = ["CatalogSearchService", "ProductSearchPage"]
