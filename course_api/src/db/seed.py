"""
Seeding utilities for the in-memory course repository.

The bundled sample_courses.json holds a JSON array of course objects using the
wire field names (camelCase, `type` for the course kind) with ISO-8601
date-times carrying an explicit offset.

Usage:
  python -m src.db.seed [path/to/courses.json]
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional, Union

from pydantic import TypeAdapter, ValidationError

from src.repositories.courses import CourseRepository
from src.schemas.courses import Course

logger = logging.getLogger(__name__)

BUNDLED_SEED_FILE = Path(__file__).with_name("sample_courses.json")

_COURSE_LIST = TypeAdapter(List[Course])


class SeedDataError(RuntimeError):
    """Raised when seed data cannot be read or does not describe valid courses."""


# PUBLIC_INTERFACE
def load_courses(path: Optional[Union[str, Path]] = None) -> List[Course]:
    """
    Parse a JSON course file into Course models, preserving file order.

    Parameters:
        path: File to read. Defaults to the bundled sample data.
    Raises:
        SeedDataError: if the file is missing, is not valid JSON, or any entry
            fails validation.
    """
    source = Path(path) if path is not None else BUNDLED_SEED_FILE
    try:
        raw = source.read_bytes()
    except OSError as exc:
        raise SeedDataError(f"Cannot read seed file {source}: {exc}") from exc
    try:
        return _COURSE_LIST.validate_json(raw)
    except ValidationError as exc:
        raise SeedDataError(f"Invalid course data in {source}: {exc}") from exc


# PUBLIC_INTERFACE
def seed_repository(repository: CourseRepository, path: Optional[Union[str, Path]] = None) -> int:
    """
    Replace the repository contents with the courses from `path`.

    Nothing is changed when loading fails.

    Returns:
        Number of courses loaded.
    Raises:
        SeedDataError: on unreadable or invalid data, including duplicate ids.
    """
    courses = load_courses(path)
    try:
        repository.initialize(courses)
    except ValueError as exc:
        raise SeedDataError(str(exc)) from exc
    logger.info("Loaded %d courses from %s", len(courses), path or BUNDLED_SEED_FILE)
    return len(courses)


if __name__ == "__main__":
    from src.core.logging import configure_logging

    configure_logging()
    target = sys.argv[1] if len(sys.argv) > 1 else None
    count = seed_repository(CourseRepository(), target)
    print(f"{count} courses are valid")
