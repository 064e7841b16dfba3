"""Sort comparator over product fields.

Field names resolve through an explicit accessor table; an unknown
name sorts nothing. Values of different kinds compare equal, and
``list.sort`` is stable, so ties keep their filtered order.
"""

import functools
from collections.abc import Callable
from datetime import datetime
from typing import Any

from catalog_api.catalog.models import Product

Comparator = Callable[[Product, Product], int]

FIELD_ACCESSORS: dict[str, Callable[[Product], Any]] = {
    "id": lambda p: p.id,
    "name": lambda p: p.name,
    "price": lambda p: p.price,
    "category": lambda p: p.category,
    "description": lambda p: p.description,
    "inStock": lambda p: p.in_stock,
    "createdAt": lambda p: p.created_at,
    "updatedAt": lambda p: p.updated_at,
}


def _kind(value: Any) -> str | None:
    # bool is an int subclass; keep it apart from numbers
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "text"
    if isinstance(value, datetime):
        return "timestamp"
    return None


def compare_values(left: Any, right: Any) -> int:
    """Three-way comparison of two field values.

    Returns 0 when either value is missing or the kinds differ.
    """
    kind = _kind(left)
    if kind is None or kind != _kind(right):
        return 0
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def build_comparator(field: str | None, order: str | None = None) -> Comparator | None:
    """Build a comparator for a sort field and direction.

    Args:
        field: Public field name (e.g. "price", "createdAt").
        order: "desc" for descending; anything else is ascending.

    Returns:
        Comparator, or None when no sort field was given.
    """
    if not field:
        return None

    accessor = FIELD_ACCESSORS.get(field)
    direction = -1 if order == "desc" else 1

    def comparator(left: Product, right: Product) -> int:
        if accessor is None:
            return 0
        return direction * compare_values(accessor(left), accessor(right))

    return comparator


def sort_products(
    products: list[Product], field: str | None, order: str | None = None
) -> list[Product]:
    """Return a stably sorted copy of the products."""
    ordered = list(products)
    comparator = build_comparator(field, order)
    if comparator is not None:
        ordered.sort(key=functools.cmp_to_key(comparator))
    return ordered
