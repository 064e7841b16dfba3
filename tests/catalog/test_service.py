"""Tests for the catalog service."""

import pytest

from catalog_api.catalog.filters import FilterParams
from catalog_api.catalog.models import ProductDraft
from catalog_api.catalog.service import CatalogService, ProductQuery
from catalog_api.catalog.store import CatalogStore
from catalog_api.domain.exceptions import ProductNotFoundError


@pytest.fixture
def service(catalog_store: CatalogStore) -> CatalogService:
    """Create service over a seeded store."""
    return CatalogService(catalog_store)


def ids(result) -> list[int]:
    return [p.id for p in result.page.items]


class TestListProducts:
    """Tests for the query pipeline."""

    def test_category_sorted_by_price(self, service: CatalogService) -> None:
        """category=Electronics&sort=price&order=asc yields [2, 1]."""
        result = service.list_products(
            ProductQuery(filters=FilterParams(category="Electronics"), sort="price", order="asc")
        )
        assert ids(result) == [2, 1]

    def test_second_page_of_two(self, service: CatalogService) -> None:
        """limit=2&page=2 over three items returns the third item."""
        result = service.list_products(ProductQuery(page="2", limit="2"))

        assert ids(result) == [3]
        assert result.page.total == 3
        assert result.page.total_pages == 2

    def test_unparsable_min_price(self, service: CatalogService) -> None:
        """minPrice=abc returns all three items."""
        result = service.list_products(ProductQuery(filters=FilterParams(min_price="abc")))
        assert ids(result) == [1, 2, 3]

    def test_total_counts_filtered_set(self, service: CatalogService) -> None:
        """total reflects the filtered set before pagination."""
        result = service.list_products(
            ProductQuery(filters=FilterParams(in_stock="true"), limit="1")
        )
        assert ids(result) == [1]
        assert result.page.total == 2
        assert result.page.total_pages == 2

    def test_filters_applied_before_sort_and_page(self, service: CatalogService) -> None:
        """Sorting and paging operate on the filtered set."""
        result = service.list_products(
            ProductQuery(
                filters=FilterParams(max_price="900"),
                sort="price",
                order="desc",
                limit="1",
                page="2",
            )
        )
        assert ids(result) == [3]

    def test_filter_echo(self, service: CatalogService) -> None:
        """The result echoes the recognised filters."""
        result = service.list_products(
            ProductQuery(filters=FilterParams(search="chair", category="Furniture"))
        )
        assert result.filters["search"] == "chair"
        assert result.filters["category"] == "Furniture"
        assert result.filters["minPrice"] is None

    def test_idempotent(self, service: CatalogService) -> None:
        """Identical queries against an unchanged store return identical output."""
        query = ProductQuery(filters=FilterParams(in_stock="true"), sort="name", order="desc")
        assert service.list_products(query) == service.list_products(query)

    def test_does_not_mutate_store(self, service: CatalogService) -> None:
        """Listing leaves the store untouched."""
        before = service.store.list()
        service.list_products(ProductQuery(sort="price", order="desc"))
        assert service.store.list() == before


class TestMutations:
    """Tests for create/update/delete."""

    def test_create_then_get(self, service: CatalogService) -> None:
        """A created product can be fetched with identical fields."""
        draft = ProductDraft(
            name="Monitor", price=249.5, category="Electronics", description="27 inch"
        )
        created = service.create_product(draft)
        fetched = service.get_product(created.id)

        assert fetched == created
        assert (fetched.name, fetched.price, fetched.category, fetched.description) == (
            "Monitor",
            249.5,
            "Electronics",
            "27 inch",
        )
        assert fetched.in_stock is True

    def test_update_then_get(self, service: CatalogService) -> None:
        """Updates merge fields and set updated_at."""
        before = service.get_product(1)
        service.update_product(
            1, ProductDraft(name="Laptop Pro", price=1299.0, category="Electronics")
        )
        after = service.get_product(1)

        assert after.name == "Laptop Pro"
        assert after.price == 1299.0
        assert after.description == before.description
        assert after.in_stock is before.in_stock
        assert after.created_at == before.created_at
        assert after.updated_at is not None

    def test_update_unknown(self, service: CatalogService) -> None:
        """Updating an unknown product raises ProductNotFoundError."""
        with pytest.raises(ProductNotFoundError):
            service.update_product(
                404, ProductDraft(name="Ghost", price=1.0, category="None")
            )

    def test_delete_then_get(self, service: CatalogService) -> None:
        """A deleted product is not found afterwards."""
        removed = service.delete_product(2)

        assert removed.name == "Smartphone"
        with pytest.raises(ProductNotFoundError):
            service.get_product(2)

    def test_delete_unknown(self, service: CatalogService) -> None:
        """Deleting an unknown product raises ProductNotFoundError."""
        with pytest.raises(ProductNotFoundError):
            service.delete_product(999)

    def test_ids_not_reused_after_delete(self, service: CatalogService) -> None:
        """A deleted ID never reappears on later creates."""
        draft = ProductDraft(name="Cable", price=4.99, category="Electronics")
        first = service.create_product(draft)
        service.delete_product(first.id)
        second = service.create_product(draft)

        assert second.id > first.id
        assert first.id not in [p.id for p in service.store.list()]
