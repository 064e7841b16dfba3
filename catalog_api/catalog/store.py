"""In-memory catalog store.

Owns the product sequence and the identity counter. Insertion order
is the canonical iteration order.
"""

import threading
from collections.abc import Callable, Iterable
from dataclasses import replace
from datetime import datetime, timezone

from catalog_api.catalog.models import Product, ProductDraft
from catalog_api.domain.exceptions import ProductNotFoundError


# ============================================================================
# Seed Data
# ============================================================================


SEED_PRODUCTS: tuple[Product, ...] = (
    Product(
        id=1,
        name="Laptop",
        price=999.99,
        category="Electronics",
        description="High-performance laptop",
        in_stock=True,
        created_at=datetime(2023, 1, 15, tzinfo=timezone.utc),
    ),
    Product(
        id=2,
        name="Smartphone",
        price=699.99,
        category="Electronics",
        description="Latest smartphone model",
        in_stock=True,
        created_at=datetime(2023, 2, 20, tzinfo=timezone.utc),
    ),
    Product(
        id=3,
        name="Desk Chair",
        price=199.99,
        category="Furniture",
        description="Ergonomic office chair",
        in_stock=False,
        created_at=datetime(2023, 3, 10, tzinfo=timezone.utc),
    ),
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ============================================================================
# Catalog Store
# ============================================================================


class CatalogStore:
    """Thread-safe in-memory product store.

    Every mutation, the counter increment and every snapshot run under
    a single lock, so readers never observe a half-applied write and
    concurrent writers never share an ID.
    """

    def __init__(
        self,
        products: Iterable[Product] = (),
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Initialize the store.

        Args:
            products: Records to preload, in iteration order.
            clock: Source of timestamps for created_at/updated_at.
        """
        self._clock = clock
        self._lock = threading.RLock()
        self._products: list[Product] = []
        self._next_id = 1
        self.reset(products)

    def reset(self, products: Iterable[Product] = ()) -> None:
        """Replace the contents and reseed the counter past the highest ID."""
        with self._lock:
            self._products = list(products)
            self._next_id = max((p.id for p in self._products), default=0) + 1

    @property
    def next_id(self) -> int:
        """ID that the next insert will receive."""
        with self._lock:
            return self._next_id

    def count(self) -> int:
        with self._lock:
            return len(self._products)

    def list(self) -> tuple[Product, ...]:
        """Return a snapshot of all products in insertion order."""
        with self._lock:
            return tuple(self._products)

    def get(self, product_id: int) -> Product:
        """Get a product by ID.

        Raises:
            ProductNotFoundError: If no product has this ID.
        """
        with self._lock:
            return self._products[self._index_of(product_id)]

    def insert(self, draft: ProductDraft) -> Product:
        """Allocate an ID, stamp created_at and append a new product.

        Args:
            draft: Validated payload. Omitted description becomes an
                empty string, omitted in_stock becomes True.

        Returns:
            The stored product.
        """
        with self._lock:
            product = Product(
                id=self._next_id,
                name=draft.name,
                price=draft.price,
                category=draft.category,
                description=draft.description if draft.description is not None else "",
                in_stock=draft.in_stock if draft.in_stock is not None else True,
                created_at=self._clock(),
            )
            self._next_id += 1
            self._products.append(product)
            return product

    def replace(self, product_id: int, draft: ProductDraft) -> Product:
        """Merge a draft into an existing product, keeping its position.

        name, price and category are always overwritten; description and
        in_stock carry over from the stored record when omitted.

        Raises:
            ProductNotFoundError: If no product has this ID.
        """
        with self._lock:
            index = self._index_of(product_id)
            current = self._products[index]
            updated = replace(
                current,
                name=draft.name,
                price=draft.price,
                category=draft.category,
                description=(
                    draft.description
                    if draft.description is not None
                    else current.description
                ),
                in_stock=draft.in_stock if draft.in_stock is not None else current.in_stock,
                updated_at=self._clock(),
            )
            self._products[index] = updated
            return updated

    def remove(self, product_id: int) -> Product:
        """Remove a product and return it. Its ID is never reissued.

        Raises:
            ProductNotFoundError: If no product has this ID.
        """
        with self._lock:
            return self._products.pop(self._index_of(product_id))

    def _index_of(self, product_id: int) -> int:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        raise ProductNotFoundError(product_id)


# Global catalog store instance
_catalog_store: CatalogStore | None = None
_catalog_store_lock = threading.Lock()


def get_catalog_store(seed: bool = True) -> CatalogStore:
    """Get or create the process-wide catalog store.

    Args:
        seed: Preload the default products when the store is created.

    Returns:
        CatalogStore instance.
    """
    global _catalog_store
    with _catalog_store_lock:
        if _catalog_store is None:
            _catalog_store = CatalogStore(SEED_PRODUCTS if seed else ())
        return _catalog_store


def reset_catalog_store() -> None:
    """Drop the process-wide store; the next access recreates it."""
    global _catalog_store
    with _catalog_store_lock:
        _catalog_store = None
