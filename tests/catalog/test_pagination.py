"""Tests for pagination."""

import math

import pytest

from catalog_api.catalog.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, PageRequest, paginate

ITEMS = list(range(1, 24))  # 23 items


class TestPageRequest:
    """Tests for PageRequest coercion."""

    def test_defaults(self) -> None:
        """Missing values use page 1 and limit 10."""
        request = PageRequest.from_raw(None, None)
        assert (request.page, request.limit) == (DEFAULT_PAGE, DEFAULT_LIMIT) == (1, 10)

    def test_valid_values(self) -> None:
        """Positive integers are used as given."""
        request = PageRequest.from_raw("3", "5")
        assert (request.page, request.limit) == (3, 5)
        assert request.offset == 10

    @pytest.mark.parametrize("raw", ["0", "-1", "abc", "", "1.5"])
    def test_invalid_page_uses_default(self, raw) -> None:
        """Non-positive or non-numeric pages fall back to 1."""
        assert PageRequest.from_raw(raw, "5").page == 1

    @pytest.mark.parametrize("raw", ["0", "-10", "ten"])
    def test_invalid_limit_uses_default(self, raw) -> None:
        """A zero, negative or non-numeric limit falls back to 10."""
        assert PageRequest.from_raw("1", raw).limit == 10


class TestPaginate:
    """Tests for paginate."""

    def test_first_page(self) -> None:
        """The first page starts at offset zero."""
        page = paginate(ITEMS, PageRequest(page=1, limit=10))
        assert page.items == list(range(1, 11))
        assert page.metadata() == {"page": 1, "limit": 10, "total": 23, "totalPages": 3}

    def test_last_partial_page(self) -> None:
        """The last page holds the remainder."""
        page = paginate(ITEMS, PageRequest(page=3, limit=10))
        assert page.items == [21, 22, 23]

    def test_page_past_end_is_empty(self) -> None:
        """A page beyond the data is empty but keeps metadata."""
        page = paginate(ITEMS, PageRequest(page=9, limit=10))
        assert page.items == []
        assert page.total == 23
        assert page.total_pages == 3

    def test_empty_input(self) -> None:
        """No items means zero pages."""
        page = paginate([], PageRequest())
        assert page.items == []
        assert page.total_pages == 0

    @pytest.mark.parametrize("limit", [1, 2, 3, 7, 10, 23, 24, 100])
    @pytest.mark.parametrize("page_number", [1, 2, 3, 5])
    def test_window_and_total_pages(self, page_number, limit) -> None:
        """Slices never exceed the limit and start at (page-1)*limit."""
        page = paginate(ITEMS, PageRequest(page=page_number, limit=limit))
        start = (page_number - 1) * limit

        assert len(page.items) <= limit
        assert page.items == ITEMS[start : start + limit]
        assert page.total_pages == math.ceil(len(ITEMS) / limit)
