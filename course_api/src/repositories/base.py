from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator


class CourseNotFoundError(LookupError):
    """Raised when no course carries the requested identifier."""

    def __init__(self, course_id: int) -> None:
        super().__init__(f"Course {course_id} not found")
        self.course_id = course_id


class DuplicateCourseIdError(ValueError):
    """Raised when an initial collection contains the same identifier twice."""

    def __init__(self, course_id: int) -> None:
        super().__init__(f"Duplicate course id {course_id} in initial data")
        self.course_id = course_id


class BaseRepository:
    """
    Base class for in-memory repositories providing common helpers.

    Note:
      A single re-entrant lock guards all state held by the repository. Subclasses
      must hold it (via `locked()`) for every read and write of that state.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()

    @contextmanager
    def locked(self) -> Iterator[None]:
        """Hold the repository lock for the duration of the block."""
        with self._lock:
            yield
