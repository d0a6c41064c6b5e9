"""Unit tests for CatalogSearchService."""

from decimal import Decimal
from uuid import UUID

import pytest

from catalog_search.config import Settings
from catalog_search.domain.model import Product
from catalog_search.search.engine import SearchEngine
from catalog_search.services.catalog_service import CatalogSearchService, ProductSearchPage


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def service(settings):
    return CatalogSearchService(settings=settings)


@pytest.mark.unit
class TestListing:
    def test_unfiltered_listing_sorted_by_name(self, service, seeded_products):
        page = service.list_products(seeded_products)

        assert isinstance(page, ProductSearchPage)
        assert [p.name for p in page.items] == ["Laptop Pro 14", "USB-C Hub", "Wireless Mouse"]
        assert (page.total, page.page, page.page_size) == (3, 1, 20)

    def test_category_filter(self, service, seeded_products, accessories):
        page = service.list_products(seeded_products, category_id=accessories.id)
        assert [p.name for p in page.items] == ["USB-C Hub", "Wireless Mouse"]

    def test_name_filter(self, service, seeded_products):
        page = service.list_products(seeded_products, name="pro")
        assert [p.name for p in page.items] == ["Laptop Pro 14"]

    def test_paging(self, service, seeded_products):
        page = service.list_products(seeded_products, page=2, page_size=1)
        assert [p.name for p in page.items] == ["USB-C Hub"]
        assert page.total == 3

    def test_page_past_end(self, service, seeded_products):
        page = service.list_products(seeded_products, page=5, page_size=2)
        assert page.items == []
        assert page.total == 3


@pytest.mark.unit
class TestSearch:
    def test_fuzzy_search(self, service, seeded_products):
        page = service.list_products(seeded_products, search="lptop")
        assert [p.name for p in page.items] == ["Laptop Pro 14"]
        assert page.total == 1

    def test_search_then_category(self, service, seeded_products, electronics):
        page = service.list_products(seeded_products, search="hub", category_id=electronics.id)
        assert page.items == []
        assert page.total == 0

    def test_search_name_filter_is_trimmed(self, service, seeded_products):
        page = service.list_products(seeded_products, search="laptop", name="  14  ")
        assert [p.name for p in page.items] == ["Laptop Pro 14"]

    def test_search_results_in_catalog_order(self, service):
        products = [
            Product(id=UUID(int=n), name=name, sku=f"SKU-{n}", price=Decimal("1.00"), quantity=1, category_id=UUID(int=9))
            for n, name in [(1, "Zebra Lamp"), (2, "Lamp"), (3, "Desk Lamp")]
        ]

        page = service.list_products(products, search="lamp")

        assert [p.name for p in page.items] == ["Desk Lamp", "Lamp", "Zebra Lamp"]

    def test_blank_search_lists_everything(self, service, seeded_products):
        assert service.list_products(seeded_products, search="   ").total == 3

    def test_search_uses_shared_engine_cache(self, settings, seeded_products):
        engine = SearchEngine()
        service = CatalogSearchService(settings=settings, engine=engine)

        service.list_products(seeded_products, search="  Mouse ")

        assert engine.cache.get("mouse") == (UUID(int=2),)

    def test_search_capped_by_settings(self, seeded_products):
        engine = SearchEngine()
        service = CatalogSearchService(settings=Settings(search_max_results=1), engine=engine)

        service.list_products(seeded_products, search="e")

        assert len(engine.cache.get("e")) == 1


@pytest.mark.unit
class TestClampPaging:
    @pytest.mark.parametrize(
        ("page", "page_size", "expected"),
        [
            (1, 20, (1, 20)),
            (0, 10, (1, 10)),
            (-3, 10, (1, 10)),
            (2, 0, (2, 20)),
            (2, 201, (2, 20)),
            (2, 200, (2, 200)),
        ],
    )
    def test_clamps(self, service, page, page_size, expected):
        assert service.clamp_paging(page, page_size) == expected
