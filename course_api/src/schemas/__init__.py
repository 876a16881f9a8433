"""
Public Pydantic schemas used by FastAPI routes, repositories, and tests.

Course models use camelCase names on the wire (and `type` for the course kind)
while exposing snake_case attributes in Python.
"""

from .common import ErrorResponse, MessageResponse  # noqa: F401
from .courses import Course, CourseBase, CoursePage  # noqa: F401
