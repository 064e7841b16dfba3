"""Catalog records.

Products are immutable once built; the store swaps whole records
when it applies an update.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Product:
    """A catalog product as held by the store."""

    id: int
    name: str
    price: float
    category: str
    description: str
    in_stock: bool
    created_at: datetime
    updated_at: datetime | None = None


@dataclass(frozen=True)
class ProductDraft:
    """Validated write payload for create and update.

    ``None`` for ``description`` or ``in_stock`` means the field was
    omitted by the caller.
    """

    name: str
    price: float
    category: str
    description: str | None = None
    in_stock: bool | None = None
