"""
Composite sort orders for course queries.

A sort is an ordered sequence of SortOrder(field, direction) pairs. The first
pair is the primary key and each later pair only breaks ties left by the ones
before it. Python's sort is stable, so applying the keys from last to first
yields exactly that composition, with each key reversed on its own.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Sequence

from src.schemas.courses import Course


class SortDirection(str, Enum):
    """Direction of a single sort key."""
    ASC = "asc"
    DESC = "desc"

    # PUBLIC_INTERFACE
    @classmethod
    def parse(cls, value: Optional[str]) -> "SortDirection":
        """Map 'desc' (any case) to DESC; everything else, including None, to ASC."""
        if value is not None and value.strip().lower() == cls.DESC.value:
            return cls.DESC
        return cls.ASC


class SortOrder(NamedTuple):
    """One (field, direction) pair of a composite sort."""
    field: str
    direction: SortDirection = SortDirection.ASC


def _nullable(attr: str) -> Callable[[Course], Any]:
    # Missing values compare after present ones; the tuple's second item is
    # only reached when both sides agree on presence.
    def key(course: Course) -> Any:
        value = getattr(course, attr)
        return (True, 0) if value is None else (False, value)

    return key


def _attr(attr: str) -> Callable[[Course], Any]:
    return lambda course: getattr(course, attr)


_TITLE = _attr("title")
_CATEGORY = _attr("category")
_KIND = _attr("kind")
_MIN_AGE = _attr("min_age")
_MAX_AGE = _attr("max_age")
_NEXT_SESSION = _nullable("next_session_date")

SORT_KEYS: Dict[str, Callable[[Course], Any]] = {
    "id": _nullable("id"),
    "title": _TITLE,
    "category": _CATEGORY,
    "kind": _KIND,
    "type": _KIND,
    "min_age": _MIN_AGE,
    "minAge": _MIN_AGE,
    "max_age": _MAX_AGE,
    "maxAge": _MAX_AGE,
    "price": _attr("price"),
    "next_session_date": _NEXT_SESSION,
    "nextSessionDate": _NEXT_SESSION,
}


# PUBLIC_INTERFACE
def apply_sort(courses: List[Course], orders: Optional[Sequence[SortOrder]]) -> List[Course]:
    """
    Sort `courses` in place by the composite order and return the same list.

    Unrecognized field names contribute no ordering. With no usable orders the
    list is left in its current order.
    """
    if not orders:
        return courses
    for order in reversed(orders):
        key = SORT_KEYS.get(order.field)
        if key is None:
            continue
        courses.sort(key=key, reverse=order.direction is SortDirection.DESC)
    return courses
