"""Shared test fixtures and configuration."""

from decimal import Decimal
import os
from uuid import UUID

import pytest

from catalog_search.domain.model import Category, Product


# Pin every setting so a developer's environment or .env never leaks in
TEST_ENV = {
    "SEARCH_MAX_RESULTS": "200",
    "SEARCH_CACHE_MAX_ENTRIES": "0",
    "SEARCH_CACHE_TTL_SECONDS": "0",
    "DEFAULT_PAGE_SIZE": "20",
    "MAX_PAGE_SIZE": "200",
    "LOG_LEVEL": "info",
    "LOG_JSON": "true",
}

for key, value in TEST_ENV.items():
    os.environ[key] = value


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Reset configuration environment variables before each test."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)


@pytest.fixture
def electronics():
    return Category(name="Electronics", id=UUID(int=100))


@pytest.fixture
def accessories():
    return Category(name="Accessories", id=UUID(int=200))


@pytest.fixture
def seeded_products(electronics, accessories):
    """The three products the catalog ships with."""
    return [
        Product(
            id=UUID(int=1),
            name="Laptop Pro 14",
            description="High performance laptop",
            sku="LTP-014-PRO",
            price=Decimal("1999.99"),
            quantity=12,
            category_id=electronics.id,
        ),
        Product(
            id=UUID(int=2),
            name="Wireless Mouse",
            description="Ergonomic wireless mouse",
            sku="MSE-WRL-001",
            price=Decimal("29.99"),
            quantity=80,
            category_id=accessories.id,
        ),
        Product(
            id=UUID(int=3),
            name="USB-C Hub",
            description="6-in-1 adapter",
            sku="HUB-USBC-006",
            price=Decimal("49.50"),
            quantity=0,
            category_id=accessories.id,
        ),
    ]
