from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from src.schemas.courses import Course, CourseBase
from .base import BaseRepository, CourseNotFoundError, DuplicateCourseIdError
from .pagination import Page, paginate
from .sorting import SortOrder, apply_sort

logger = logging.getLogger(__name__)

STARTING_ID = 1


class CourseRepository(BaseRepository):
    """
    In-memory store and query engine for courses.

    Holds the authoritative collection in insertion order together with the
    identifier generator. Both are guarded by the repository lock so that an
    insertion reads and advances the generator atomically. Every read hands out
    copies; callers never see (or alter) stored instances.
    """

    def __init__(self, courses: Optional[Iterable[Course]] = None) -> None:
        super().__init__()
        self._courses: List[Course] = []
        self._next_id = STARTING_ID
        if courses is not None:
            self.initialize(courses)

    # PUBLIC_INTERFACE
    def initialize(self, courses: Iterable[Course]) -> None:
        """
        Replace the collection with `courses`.

        The generator continues one past the highest identifier present, or from
        STARTING_ID when there is none. Courses without an identifier are then
        numbered from the generator in input order.

        Raises:
            DuplicateCourseIdError: if two input courses share an identifier. The
                repository is left untouched in that case.
        """
        incoming = [c.model_copy() for c in courses]
        seen: set[int] = set()
        for course in incoming:
            if course.id is None:
                continue
            if course.id in seen:
                raise DuplicateCourseIdError(course.id)
            seen.add(course.id)

        next_id = max(seen) + 1 if seen else STARTING_ID
        for course in incoming:
            if course.id is None:
                course.id = next_id
                next_id += 1

        with self.locked():
            self._courses = incoming
            self._next_id = next_id
        logger.info("Initialized course repository with %d courses; next id=%d", len(incoming), next_id)

    # PUBLIC_INTERFACE
    def list_all(self) -> List[Course]:
        """Return copies of all courses in storage order."""
        with self.locked():
            return [c.model_copy() for c in self._courses]

    # PUBLIC_INTERFACE
    def get_by_id(self, course_id: int) -> Course:
        """
        Return a copy of the course with `course_id`.

        Raises:
            CourseNotFoundError: if no course has that identifier.
        """
        with self.locked():
            course = self._find(course_id)
            if course is None:
                raise CourseNotFoundError(course_id)
            return course.model_copy()

    # PUBLIC_INTERFACE
    def find_by_title(self, needle: str, sort: Optional[Sequence[SortOrder]] = None) -> List[Course]:
        """Courses whose title contains `needle` (case-insensitive), sorted. Empty needle matches all."""
        lowered = needle.lower()
        with self.locked():
            matched = [c.model_copy() for c in self._courses if lowered in c.title.lower()]
        return apply_sort(matched, sort)

    # PUBLIC_INTERFACE
    def find_by_title_paged(
        self, needle: str, sort: Optional[Sequence[SortOrder]], page: int, size: int
    ) -> Page[Course]:
        """Title substring filter, sort, then the requested page window."""
        return paginate(self.find_by_title(needle, sort), page, size)

    # PUBLIC_INTERFACE
    def find_by_kind(
        self, kind: str, sort: Optional[Sequence[SortOrder]], page: int, size: int
    ) -> Page[Course]:
        """Courses whose kind equals `kind` ignoring case (no substring match), sorted and paged."""
        wanted = kind.casefold()
        with self.locked():
            matched = [c.model_copy() for c in self._courses if c.kind.casefold() == wanted]
        return paginate(apply_sort(matched, sort), page, size)

    # PUBLIC_INTERFACE
    def save(self, course: Course) -> Course:
        """
        Insert or update a course and return a copy of the stored record.

        - id is None: assign the next generated identifier and append.
        - id matches a stored course: overwrite its fields in place; the
          identifier itself never changes.
        - id matches nothing: append under the caller's identifier. The
          generator is not advanced; it skips taken identifiers when it next
          assigns one.
        """
        with self.locked():
            if course.id is None:
                stored = course.model_copy(update={"id": self._take_next_id()})
                self._courses.append(stored)
                logger.info("Created course id=%s title=%r", stored.id, stored.title)
                return stored.model_copy()

            existing = self._find(course.id)
            if existing is not None:
                for name in CourseBase.model_fields:
                    setattr(existing, name, getattr(course, name))
                logger.info("Updated course id=%s", existing.id)
                return existing.model_copy()

            stored = course.model_copy()
            self._courses.append(stored)
            logger.info("Created course with caller-supplied id=%s", stored.id)
            return stored.model_copy()

    # PUBLIC_INTERFACE
    def delete_by_id(self, course_id: int) -> None:
        """Remove the course with `course_id`; absent identifiers are ignored."""
        with self.locked():
            before = len(self._courses)
            self._courses = [c for c in self._courses if c.id != course_id]
            removed = before - len(self._courses)
        logger.debug("delete_by_id(%s) removed %d course(s)", course_id, removed)

    # PUBLIC_INTERFACE
    def delete_all(self) -> None:
        """Remove every course and reset the identifier generator."""
        with self.locked():
            self._courses = []
            self._next_id = STARTING_ID
        logger.info("Deleted all courses; id generator reset to %d", STARTING_ID)

    def count(self) -> int:
        with self.locked():
            return len(self._courses)

    def _find(self, course_id: int) -> Optional[Course]:
        for course in self._courses:
            if course.id == course_id:
                return course
        return None

    def _take_next_id(self) -> int:
        taken = {c.id for c in self._courses}
        candidate = self._next_id
        while candidate in taken:
            candidate += 1
        self._next_id = candidate + 1
        return candidate
