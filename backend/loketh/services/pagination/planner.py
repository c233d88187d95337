from __future__ import annotations

"""backend/loketh/services/pagination/planner.py

Newest-first page windows over an append-only, integer-indexed collection.

The collection holds ids `0..total-1` (zero based) or `1..total`. A page
walks downward from `max_id` (inclusive) to `min_id` (exclusive), where
`min_id` never drops below the floor sentinel, one below the lowest id.

Pages past the end are not an error: the returned window has
`max_id <= floor` and `is_empty` is True. Callers guard on that.
"""

from dataclasses import dataclass
from typing import List, Sequence, TypeVar

from loketh.services.errors import InvalidArgument

T = TypeVar("T")


@dataclass(frozen=True)
class PageWindow:
    """Index range for one descending page."""

    max_id: int
    min_id: int
    has_prev: bool
    has_next: bool
    floor: int

    @property
    def is_empty(self) -> bool:
        return self.max_id <= self.floor

    def ids(self) -> list[int]:
        """Ids to fetch for this page, newest first."""
        if self.is_empty:
            return []
        return list(range(self.max_id, self.min_id, -1))


def _require_int(name: str, value: object, minimum: int) -> int:
    # bool is an int subclass; page=True is almost certainly a bug
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise InvalidArgument(f"{name} must be >= {minimum}, got {value}")
    return value


def plan(
    total: int,
    page: int = 1,
    per_page: int = 10,
    zero_based: bool = True,
) -> PageWindow:
    """Compute the window of ids shown on `page`, newest first.

    `has_prev` means a newer page exists (lower page number), `has_next`
    means older ids remain below `min_id`.
    """
    _require_int("total", total, 0)
    _require_int("page", page, 1)
    _require_int("per_page", per_page, 1)

    effective_total = total - 1 if zero_based else total
    max_id = effective_total - (page - 1) * per_page

    floor = -1 if zero_based else 0
    min_id = max(max_id - per_page, floor)

    return PageWindow(
        max_id=max_id,
        min_id=min_id,
        has_prev=max_id < effective_total,
        has_next=min_id > floor,
        floor=floor,
    )


def page_count(total: int, per_page: int = 10) -> int:
    """Number of non-empty pages for `total` items."""
    _require_int("total", total, 0)
    _require_int("per_page", per_page, 1)
    return -(-total // per_page)


def chunk(items: Sequence[T], size: int = 10) -> List[List[T]]:
    """Split `items` into consecutive lists of at most `size` elements."""
    _require_int("size", size, 1)
    return [list(items[i : i + size]) for i in range(0, len(items), size)]
