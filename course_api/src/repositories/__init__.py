"""
Repository layer for data access.

Repositories own the in-memory collections and implement filtering, sorting,
pagination and identifier assignment over them. Routes receive a repository via
src.core.deps.get_course_repository and never touch storage internals directly.
"""
from .base import CourseNotFoundError, DuplicateCourseIdError  # noqa: F401
from .courses import STARTING_ID, CourseRepository  # noqa: F401
from .pagination import Page, paginate  # noqa: F401
from .sorting import SortDirection, SortOrder, apply_sort  # noqa: F401
