"""Catalog-side collaborators of the search engine.

Field/identity extractors for products, and the post-processing the listing
endpoint applies to engine output: category and name filters, the catalog
sort order, and the category tree.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Iterator
from decimal import Decimal
from uuid import UUID

from catalog_search.domain.model import Category, CategoryNode, Product
from catalog_search.search.analyzers import is_blank
from catalog_search.search.scoring import WeightedField


NAME_WEIGHT = 5
SKU_WEIGHT = 4
DESCRIPTION_WEIGHT = 1


def product_fields(product: Product) -> list[WeightedField]:
    return [
        WeightedField(product.name, NAME_WEIGHT),
        WeightedField(product.sku, SKU_WEIGHT),
        WeightedField(product.description or "", DESCRIPTION_WEIGHT),
    ]


def product_identity(product: Product) -> UUID:
    return product.id


class ProductSearchable:
    """``Searchable`` adapter for products."""

    def fields(self, item: Product) -> list[WeightedField]:
        return product_fields(item)

    def identity(self, item: Product) -> UUID:
        return product_identity(item)


def filter_by_category(products: Iterable[Product], category_id: UUID | None) -> Iterator[Product]:
    """Keep products in ``category_id``; ``None`` keeps everything."""
    for product in products:
        if category_id is None or product.category_id == category_id:
            yield product


def filter_name_contains(products: Iterable[Product], name: str | None) -> Iterator[Product]:
    """Case-insensitive name substring filter; a blank term keeps everything."""
    if is_blank(name):
        yield from products
        return

    term = name.strip().lower()
    for product in products:
        if term in product.name.lower():
            yield product


def filter_in_stock(products: Iterable[Product]) -> Iterator[Product]:
    return (product for product in products if product.in_stock())


def catalog_sort_key(product: Product) -> tuple[str, Decimal]:
    """Catalog listing order: name ignoring case (upper-case fold), then price."""
    return (product.name.upper(), product.price)


def category_sort_key(category: Category) -> tuple[str, str]:
    """Case-insensitive name order; lower case first among otherwise equal names."""
    return (category.name.casefold(), category.name.swapcase())


def build_category_tree(categories: Iterable[Category]) -> list[CategoryNode]:
    """Nest categories under their parents, roots and siblings sorted by name.

    Categories whose parent is missing from ``categories`` are dropped, as are
    their descendants.
    """
    roots: list[Category] = []
    by_parent: dict[UUID, list[Category]] = defaultdict(list)
    for category in categories:
        if category.parent_category_id is None:
            roots.append(category)
        else:
            by_parent[category.parent_category_id].append(category)

    def build(parent_id: UUID) -> list[CategoryNode]:
        children = sorted(by_parent.get(parent_id, ()), key=category_sort_key)
        return [CategoryNode(category=child, children=build(child.id)) for child in children]

    return [CategoryNode(category=root, children=build(root.id)) for root in sorted(roots, key=category_sort_key)]
