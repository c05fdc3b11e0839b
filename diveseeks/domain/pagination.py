"""Page/limit normalization for list endpoints."""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from .constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE

T = TypeVar("T")


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    data: list[T]
    total: int
    page: int
    limit: int
    total_pages: int


def normalize(page: int | None, limit: int | None) -> tuple[int, int]:
    """Clamp page and limit into their accepted ranges.

    Missing or zero values fall back to page 1 and the default page size.
    """
    page = max(1, page or 1)
    limit = min(MAX_PAGE_SIZE, max(1, limit or DEFAULT_PAGE_SIZE))
    return page, limit


def paginate(
    items: Sequence[T], page: int | None = None, limit: int | None = None
) -> PaginatedResult[T]:
    page, limit = normalize(page, limit)
    skip = (page - 1) * limit
    return PaginatedResult(
        data=list(items[skip : skip + limit]),
        total=len(items),
        page=page,
        limit=limit,
        total_pages=math.ceil(len(items) / limit),
    )
