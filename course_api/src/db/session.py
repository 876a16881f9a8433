from __future__ import annotations

from src.repositories.courses import CourseRepository

_REPOSITORY: CourseRepository | None = None


def _ensure_repository_initialized() -> None:
    """
    Lazily create the process-wide CourseRepository.
    """
    global _REPOSITORY
    if _REPOSITORY is None:
        _REPOSITORY = CourseRepository()


# PUBLIC_INTERFACE
def get_repository() -> CourseRepository:
    """Return the global CourseRepository instance shared by all requests."""
    _ensure_repository_initialized()
    assert _REPOSITORY is not None
    return _REPOSITORY
