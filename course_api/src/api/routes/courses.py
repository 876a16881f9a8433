from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status

from src.core.deps import get_course_repository, get_sort_orders
from src.core.settings import get_app_settings
from src.repositories.base import CourseNotFoundError
from src.repositories.courses import CourseRepository
from src.repositories.pagination import Page
from src.repositories.sorting import SortOrder
from src.schemas.courses import Course, CourseBase, CoursePage

logger = logging.getLogger(__name__)

settings = get_app_settings()

router = APIRouter(tags=["Courses"])


def _page_response(page: Page[Course]) -> CoursePage:
    return CoursePage(
        courses=page.items,
        current_page=page.page,
        total_items=page.total_items,
        total_pages=page.total_pages,
    )


# PUBLIC_INTERFACE
@router.get(
    "/sortedcourses",
    response_model=List[Course],
    summary="List all courses sorted",
    description="Return every course ordered by the given sort keys. Responds 204 when there are none.",
    responses={204: {"description": "No courses"}},
)
def list_sorted_courses(
    orders: List[SortOrder] = Depends(get_sort_orders),
    repo: CourseRepository = Depends(get_course_repository),
):
    courses = repo.find_by_title("", orders)
    if not courses:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return courses


# PUBLIC_INTERFACE
@router.get(
    "/courses",
    response_model=CoursePage,
    summary="List courses (paged)",
    description="Page through courses, optionally filtered by a case-insensitive title substring.",
)
def list_courses(
    title: Optional[str] = Query(None, description="Filter by title (substring, case-insensitive)"),
    page: int = Query(0, ge=0, description="Zero-based page number"),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Page size"),
    orders: List[SortOrder] = Depends(get_sort_orders),
    repo: CourseRepository = Depends(get_course_repository),
) -> CoursePage:
    result = repo.find_by_title_paged(title or "", orders, page, size)
    return _page_response(result)


# PUBLIC_INTERFACE
@router.get(
    "/courses/type/{course_type}",
    response_model=CoursePage,
    summary="List courses of a type (paged)",
    description="Page through courses whose type equals the path value, ignoring case.",
)
def list_courses_by_type(
    course_type: str = Path(..., description="Course type, e.g. CLUB"),
    page: int = Query(0, ge=0, description="Zero-based page number"),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Page size"),
    orders: List[SortOrder] = Depends(get_sort_orders),
    repo: CourseRepository = Depends(get_course_repository),
) -> CoursePage:
    result = repo.find_by_kind(course_type, orders, page, size)
    return _page_response(result)


# PUBLIC_INTERFACE
@router.get(
    "/courses/{course_id}",
    response_model=Course,
    summary="Get course",
    description="Get a course by id.",
)
def get_course(
    course_id: int = Path(...),
    repo: CourseRepository = Depends(get_course_repository),
) -> Course:
    try:
        return repo.get_by_id(course_id)
    except CourseNotFoundError:
        raise HTTPException(status_code=404, detail="Course not found")


# PUBLIC_INTERFACE
@router.post(
    "/courses",
    response_model=Course,
    status_code=status.HTTP_201_CREATED,
    summary="Create course",
    description=(
        "Create a course. Without an id the next free id is assigned; an id that is "
        "already taken updates that course instead."
    ),
)
def create_course(
    payload: Course,
    repo: CourseRepository = Depends(get_course_repository),
) -> Course:
    return repo.save(payload)


# PUBLIC_INTERFACE
@router.put(
    "/courses/{course_id}",
    response_model=Course,
    summary="Update course",
    description="Replace every field of an existing course. The id in the path wins over any id in the body.",
)
def update_course(
    payload: CourseBase,
    course_id: int = Path(...),
    repo: CourseRepository = Depends(get_course_repository),
) -> Course:
    with repo.locked():
        try:
            repo.get_by_id(course_id)
        except CourseNotFoundError:
            raise HTTPException(status_code=404, detail="Course not found")
        return repo.save(Course(id=course_id, **payload.model_dump()))


# PUBLIC_INTERFACE
@router.delete(
    "/courses/{course_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete course",
    description="Delete a course by id. Deleting an unknown id is not an error.",
)
def delete_course(
    course_id: int = Path(...),
    repo: CourseRepository = Depends(get_course_repository),
) -> Response:
    repo.delete_by_id(course_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# PUBLIC_INTERFACE
@router.delete(
    "/courses",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete all courses",
    description="Remove every course and restart id assignment.",
)
def delete_all_courses(
    repo: CourseRepository = Depends(get_course_repository),
) -> Response:
    repo.delete_all()
    logger.warning("All courses deleted via API")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
