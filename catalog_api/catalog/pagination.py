"""Pagination of filtered results."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from catalog_api.catalog.params import parse_positive_int

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class PageRequest:
    """Normalized pagination parameters.

    Attributes:
        page: Page number (1-based).
        limit: Items per page.
    """

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_raw(cls, page: str | None, limit: str | None) -> "PageRequest":
        """Coerce raw values; missing, non-integer or non-positive input uses defaults."""
        return cls(
            page=parse_positive_int(page) or DEFAULT_PAGE,
            limit=parse_positive_int(limit) or DEFAULT_LIMIT,
        )

    @property
    def offset(self) -> int:
        """Calculate offset from page number."""
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class Page(Generic[T]):
    """One window of a result set.

    Attributes:
        items: Items on this page.
        page: Current page.
        limit: Items per page.
        total: Size of the whole result set before slicing.
    """

    items: list[T]
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        """Calculate total pages."""
        return (self.total + self.limit - 1) // self.limit

    def metadata(self) -> dict[str, int]:
        return {
            "page": self.page,
            "limit": self.limit,
            "total": self.total,
            "totalPages": self.total_pages,
        }


def paginate(items: Sequence[T], request: PageRequest) -> Page[T]:
    """Slice ``items`` to the requested window."""
    start = request.offset
    end = start + request.limit
    return Page(
        items=list(items[start:end]),
        page=request.page,
        limit=request.limit,
        total=len(items),
    )
