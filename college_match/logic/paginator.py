"""
Paginator

Slices an ordered, filtered match list into fixed-size pages.
Out-of-range page requests never fail; the caller's current page is kept.
"""

import math
from typing import Sequence

from .contracts import CanonicalMatch, Page


def total_pages(total_count: int, page_size: int) -> int:
    """Number of pages for `total_count` items (0 when there are none)."""
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return math.ceil(total_count / page_size)


def resolve_page(requested: int, pages: int, current_page: int = 1) -> int:
    """
    Pick the page to show.

    A request inside [1, pages] is honoured. Otherwise the current page is
    kept if it is still valid, else the request is clamped into range.
    With no pages at all the answer is always 1.
    """
    if pages <= 0:
        return 1
    if 1 <= requested <= pages:
        return requested
    if 1 <= current_page <= pages:
        return current_page
    return min(max(requested, 1), pages)


def paginate(
    matches: Sequence[CanonicalMatch],
    page: int,
    page_size: int,
    current_page: int = 1,
) -> Page:
    """
    Return one page of matches with its metadata.

    Args:
        matches: Filtered and ordered matches
        page: Requested 1-based page number
        page_size: Items per page (must be positive)
        current_page: Page the caller is currently showing

    Returns:
        Page with items [(page-1)*size, page*size)
    """
    if matches is None:
        raise TypeError("matches must be a sequence, not None")

    total = len(matches)
    pages = total_pages(total, page_size)
    shown = resolve_page(page, pages, current_page)

    start = (shown - 1) * page_size
    items = list(matches[start:start + page_size])

    return Page(
        items=items,
        current_page=shown,
        total_pages=pages,
        total_count=total,
        page_size=page_size,
        first_index=start + 1 if items else 0,
        last_index=start + len(items),
    )
