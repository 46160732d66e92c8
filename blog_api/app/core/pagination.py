"""
Page-number pagination helpers.

Listings are sliced into fixed pages of ``PER_PAGE`` items.  Pages are
1-indexed; ``resolve_page`` coerces anything that is not a positive
integer to the first page.  ``build_window`` computes the metadata
reported alongside each page.
"""

import math
from typing import Any, Optional

from ..schemas.post import Pagination

PER_PAGE = 10


def resolve_page(raw: Any) -> int:
    """Return a valid 1-indexed page number for a raw query value."""
    if raw is None or isinstance(raw, bool):
        return 1
    try:
        page = int(str(raw).strip())
    except (TypeError, ValueError):
        return 1
    return page if page >= 1 else 1


def page_offset(page: int, per_page: int = PER_PAGE) -> int:
    return (page - 1) * per_page


def build_window(page: int, total: int, count: int, per_page: int = PER_PAGE) -> Pagination:
    """Compute the pagination window for a slice of ``count`` items.

    ``from``/``to`` are the 1-based absolute indexes of the first and
    last item on the page, or ``None`` when the page is empty.
    ``last_page`` is never lower than 1.
    """
    first_item: Optional[int] = None
    last_item: Optional[int] = None
    if count > 0:
        first_item = page_offset(page, per_page) + 1
        last_item = first_item + count - 1
    return Pagination(
        current_page=page,
        last_page=max(math.ceil(total / per_page), 1),
        per_page=per_page,
        total=total,
        from_=first_item,
        to=last_item,
    )
