# This file handles pagination and sort-direction parsing for list endpoints.
# It exists so every router uses the same deterministic rules for page size and ordering.
# The helpers validate user input and produce stable offset/limit behavior.
# Repositories return `PageResult` objects that routers turn into envelope metadata.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")

SORT_ORDERS = ("asc", "desc")


@dataclass(frozen=True)
class PaginationSpec:
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class PageResult(Generic[T]):
    """One page of records plus the total number of matching records."""

    rows: list[T] = field(default_factory=list)
    total_count: int = 0


def normalize_pagination(
    *,
    page: int,
    limit: int | None,
    default_page_size: int,
    max_page_size: int,
) -> PaginationSpec:
    """Validate and normalize page/limit values.

    Limits above `max_page_size` are clamped to it; the clamped value is what
    the list envelope reports back.
    """

    resolved_limit = default_page_size if limit is None else limit
    if page < 1:
        raise ValueError("page must be >= 1")
    if resolved_limit < 1:
        raise ValueError("limit must be >= 1")
    return PaginationSpec(page=page, limit=min(resolved_limit, max_page_size))


def parse_order(requested_order: str | None, *, default_order: str = "asc") -> str:
    """Parse a sort direction, accepting only `asc` or `desc`."""

    order = (requested_order or default_order).strip().lower()
    if order not in SORT_ORDERS:
        raise ValueError("order must be 'asc' or 'desc'")
    return order


def compute_total_pages(*, total_count: int, limit: int) -> int:
    """Compute deterministic total page count."""

    if total_count <= 0:
        return 0
    return ((total_count - 1) // limit) + 1
