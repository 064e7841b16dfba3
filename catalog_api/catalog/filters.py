"""Predicate filters for product queries.

Each builder returns a predicate, or None when its parameter is absent
or invalid. Present predicates are applied conjunctively.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from catalog_api.catalog.models import Product
from catalog_api.catalog.params import parse_bool, parse_float, parse_text

Predicate = Callable[[Product], bool]


@dataclass(frozen=True)
class FilterParams:
    """Raw filter parameters as received from the query string.

    Attributes:
        search: Text search in name/description (``q``).
        category: Category name, case-insensitive.
        in_stock: ``"true"``/``"false"`` availability flag.
        min_price: Lower price bound, inclusive.
        max_price: Upper price bound, inclusive.
    """

    search: str | None = None
    category: str | None = None
    in_stock: str | None = None
    min_price: str | None = None
    max_price: str | None = None

    def echo(self) -> dict[str, str | None]:
        """Recognised filters keyed by their public names."""
        return {
            "search": parse_text(self.search),
            "category": parse_text(self.category),
            "inStock": parse_text(self.in_stock),
            "minPrice": parse_text(self.min_price),
            "maxPrice": parse_text(self.max_price),
        }


def search_filter(raw: str | None) -> Predicate | None:
    term = parse_text(raw)
    if term is None:
        return None
    needle = term.lower()

    def predicate(product: Product) -> bool:
        if needle in product.name.lower():
            return True
        return bool(product.description) and needle in product.description.lower()

    return predicate


def category_filter(raw: str | None) -> Predicate | None:
    category = parse_text(raw)
    if category is None:
        return None
    wanted = category.lower()
    return lambda product: product.category.lower() == wanted


def stock_filter(raw: str | None) -> Predicate | None:
    in_stock = parse_bool(raw)
    if in_stock is None:
        return None
    return lambda product: product.in_stock is in_stock


def min_price_filter(raw: str | None) -> Predicate | None:
    bound = parse_float(raw)
    if bound is None:
        return None
    return lambda product: product.price >= bound


def max_price_filter(raw: str | None) -> Predicate | None:
    bound = parse_float(raw)
    if bound is None:
        return None
    return lambda product: product.price <= bound


def build_filters(params: FilterParams) -> list[Predicate]:
    """Build the present predicates in their fixed application order.

    Order is search, category, stock, min price, max price.
    """
    candidates = (
        search_filter(params.search),
        category_filter(params.category),
        stock_filter(params.in_stock),
        min_price_filter(params.min_price),
        max_price_filter(params.max_price),
    )
    return [predicate for predicate in candidates if predicate is not None]


def apply_filters(
    products: Iterable[Product], predicates: Iterable[Predicate]
) -> list[Product]:
    """Apply predicates one after another, preserving input order."""
    filtered = list(products)
    for predicate in predicates:
        filtered = [p for p in filtered if predicate(p)]
    return filtered
