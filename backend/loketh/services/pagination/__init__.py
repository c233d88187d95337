from __future__ import annotations

"""
Descending pagination over the on-chain event collection.

Events are stored on-chain in creation order under sequential integer
ids, so "newest first" pages are derived from the current total alone:

- plan(total, page, per_page, zero_based) -> PageWindow
- page_count(total, per_page) -> int
- chunk(items, size) -> list of lists
"""

from .planner import PageWindow, chunk, page_count, plan  # noqa: F401
