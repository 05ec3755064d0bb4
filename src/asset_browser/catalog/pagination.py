"""
Pagination over an ordered record sequence.
"""

import math
from dataclasses import dataclass
from typing import List, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10


def normalize_page_size(page_size: int) -> int:
    """Page sizes below 1 are treated as 1."""
    return max(1, int(page_size))


def total_pages(count: int, page_size: int) -> int:
    """Number of pages for ``count`` records; at least 1, even when empty."""
    page_size = normalize_page_size(page_size)
    return max(1, math.ceil(count / page_size))


def paginate(records: Sequence[T], page_index: int, page_size: int) -> List[T]:
    """One page of ``records`` (0-based index); out-of-range pages are empty."""
    page_size = normalize_page_size(page_size)
    if page_index < 0:
        return []
    start = page_index * page_size
    return list(records[start : start + page_size])


@dataclass
class PaginationState:
    """Current page of a browsing session, with bounds-checked navigation."""

    current_page: int = 0
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        self.page_size = normalize_page_size(self.page_size)

    def reset(self) -> None:
        self.current_page = 0

    def set_page_size(self, page_size: int) -> None:
        """Change the page size; the page returns to the first one."""
        self.page_size = normalize_page_size(page_size)
        self.reset()

    def next_page(self, total: int) -> bool:
        """Move forward; False (and no move) on the last page."""
        if self.current_page < total - 1:
            self.current_page += 1
            return True
        return False

    def previous_page(self) -> bool:
        """Move back; False (and no move) on the first page."""
        if self.current_page > 0:
            self.current_page -= 1
            return True
        return False

    def go_to(self, page: int, total: int) -> bool:
        """Jump to ``page``; False (and no move) outside ``[0, total)``."""
        if 0 <= page < total:
            self.current_page = page
            return True
        return False
