"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from src.api.main import app
from src.core.deps import get_course_repository
from src.repositories.courses import CourseRepository
from src.schemas.courses import Course

EST = timezone(timedelta(hours=-5))


def make_course(
    title: str = "Course",
    kind: str = "COURSE",
    price: str = "10",
    course_id: int | None = None,
    **overrides,
) -> Course:
    """Build a Course with sensible defaults for tests."""
    fields = dict(
        id=course_id,
        title=title,
        description=f"{title} description",
        category="General",
        kind=kind,
        grade_range="1-5",
        min_age=6,
        max_age=11,
        price=Decimal(price),
        next_session_date=datetime(2025, 3, 1, 16, 0, tzinfo=EST),
    )
    fields.update(overrides)
    return Course(**fields)


@pytest.fixture
def course_factory():
    """Expose make_course to tests."""
    return make_course


@pytest.fixture
def courses():
    """Seven courses with explicit ids 1..7 in insertion order."""
    return [
        make_course("Intro to Robotics", "COURSE", "180", 1, category="Engineering"),
        make_course("Chess Club", "CLUB", "40", 2, category="Games"),
        make_course("Watercolor Workshop", "ONE_TIME", "35", 3, category="Art"),
        make_course("Math Circle", "Club", "60", 4, category="Mathematics"),
        make_course("Science Olympiad Club", "club-session", "60", 5, category="Science"),
        make_course("Creative Writing", "COURSE", "150", 6, category="Language Arts"),
        make_course("Intro to Photography", "ONE_TIME", "45", 7, category="Art"),
    ]


@pytest.fixture
def repository(courses):
    """A repository initialized with the `courses` fixture."""
    return CourseRepository(courses)


@pytest.fixture
def client(repository):
    """A TestClient whose routes use the `repository` fixture."""
    app.dependency_overrides[get_course_repository] = lambda: repository
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
