"""Catalog domain model.

Pydantic dataclasses validate invariants at construction; the search engine
never sees these types directly, only the extractors in ``catalog_search.catalog``.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated
from uuid import UUID, uuid4

from pydantic import Field
from pydantic.dataclasses import dataclass


NonEmptyStr = Annotated[str, Field(min_length=1)]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Category:
    """Node of the category hierarchy; roots have no parent."""

    name: NonEmptyStr
    description: str | None = None
    parent_category_id: UUID | None = None
    id: UUID = Field(default_factory=uuid4)

    @property
    def is_root(self) -> bool:
        return self.parent_category_id is None


@dataclass
class Product:
    """Sellable catalog item."""

    name: NonEmptyStr
    sku: NonEmptyStr
    price: Annotated[Decimal, Field(gt=0)]
    quantity: Annotated[int, Field(ge=0)]
    category_id: UUID
    description: str | None = None
    id: UUID = Field(default_factory=uuid4)
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    def in_stock(self) -> bool:
        return self.quantity > 0


@dataclass
class CategoryNode:
    """A category with its children, each sorted by name."""

    category: Category
    children: list["CategoryNode"] = Field(default_factory=list)
