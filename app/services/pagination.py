"""
Pagination for GET /api/users: request clamping and X-Pagination metadata.

Link thresholds are fixed page numbers, not relative to totalPages: the
previous link is only filled on page 1 and the next link only on page 20.
"""

import math
from collections.abc import Callable

from app.schemas.pagination import PaginationMetadata

PREVIOUS_LINK_PAGE = 1
NEXT_LINK_PAGE = 20

# (page_number, page_size) -> absolute URL of that page
LinkBuilder = Callable[[int, int], str]


def clamp_page_request(page_number: int, page_size: int, max_page_size: int = 20) -> tuple[int, int]:
    """pageNumber >= 1, 1 <= pageSize <= max_page_size."""
    page_number = max(page_number, 1)
    page_size = min(max(page_size, 1), max_page_size)
    return page_number, page_size


def total_pages(total_count: int, page_size: int) -> int:
    return math.ceil(total_count / page_size)


def build_metadata(
    page_number: int,
    page_size: int,
    total_count: int,
    link_to: LinkBuilder,
) -> PaginationMetadata:
    """Metadata for one page; missing links are empty strings, never null."""
    previous_link = ""
    if page_number == PREVIOUS_LINK_PAGE:
        previous_link = link_to(page_number - 1, page_size)

    next_link = ""
    if page_number == NEXT_LINK_PAGE:
        next_link = link_to(page_number + 1, page_size)

    return PaginationMetadata(
        previous_page_link=previous_link,
        next_page_link=next_link,
        total_count=total_count,
        page_size=page_size,
        current_page=page_number,
        total_pages=total_pages(total_count, page_size),
    )
