"""
Offset/limit pagination arithmetic.

Dependencies: math, dataclasses
System role: Shared page window computation for listing operations
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class PageWindow:
    """Resolved page request: 1-based page, page size and row offset."""

    page: int
    limit: int
    skip: int

    def total_pages(self, total: int) -> int:
        """Number of pages needed to show `total` rows."""
        return math.ceil(total / self.limit)


def paginate(page: int | None, limit: int | None, default_limit: int) -> PageWindow:
    """
    Resolve page and limit into a PageWindow.

    Non-positive or missing values fall back to page 1 and `default_limit`.

    Args:
        page: Requested 1-based page number
        limit: Requested page size
        default_limit: Page size used when limit is missing or invalid

    Returns:
        PageWindow: with skip = (page - 1) * limit
    """
    page = page if page and page > 0 else 1
    limit = limit if limit and limit > 0 else default_limit
    return PageWindow(page=page, limit=limit, skip=(page - 1) * limit)
