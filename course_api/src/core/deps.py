from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import Query

from src.core.settings import get_app_settings
from src.db.session import get_repository
from src.repositories.courses import CourseRepository
from src.repositories.sorting import SortDirection, SortOrder

logger = logging.getLogger(__name__)

_SETTINGS = get_app_settings()


# PUBLIC_INTERFACE
def get_course_repository() -> CourseRepository:
    """Provide the shared CourseRepository. Tests override this dependency."""
    return get_repository()


# PUBLIC_INTERFACE
def parse_sort_params(values: Optional[List[str]]) -> List[SortOrder]:
    """
    Turn raw `sort` query values into SortOrder pairs.

    Two shapes are accepted:
      - every value is "field,direction", e.g. ?sort=price,desc&sort=title,asc
      - a single pair split across two values, e.g. ?sort=title&sort=desc

    Direction 'desc' sorts descending; anything else, or no direction, ascending.
    """
    if not values:
        return []
    if "," in values[0]:
        orders = []
        for value in values:
            field, _, direction = value.partition(",")
            if field.strip():
                orders.append(SortOrder(field.strip(), SortDirection.parse(direction)))
        return orders
    direction = values[1] if len(values) > 1 else None
    return [SortOrder(values[0].strip(), SortDirection.parse(direction))]


# PUBLIC_INTERFACE
def get_sort_orders(
    sort: List[str] = Query(
        [_SETTINGS.DEFAULT_SORT],
        description="Sort keys as 'field,direction' (repeatable), e.g. sort=price,desc&sort=title,asc",
    ),
) -> List[SortOrder]:
    """Dependency resolving the `sort` query parameter into SortOrder pairs."""
    orders = parse_sort_params(sort)
    logger.debug("Resolved sort orders: %s", orders)
    return orders
