from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, List, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One window of a filtered, sorted result set."""
    items: List[T] = field(default_factory=list)
    page: int = 0
    size: int = 1
    total_items: int = 0

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_items / self.size)


# PUBLIC_INTERFACE
def paginate(items: Sequence[T], page: int, size: int) -> Page[T]:
    """
    Slice the zero-based `page` of `size` items out of `items`.

    A page past the end yields empty content while still reporting the full
    match count.

    Raises:
        ValueError: if page is negative or size is not positive.
    """
    if page < 0:
        raise ValueError("page must be >= 0")
    if size < 1:
        raise ValueError("size must be >= 1")
    total = len(items)
    start = page * size
    end = min(start + size, total)
    content = list(items[start:end]) if start < end else []
    return Page(items=content, page=page, size=size, total_items=total)
