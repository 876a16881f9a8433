"""
Data package exposing the shared course repository and seed loading helpers.
"""

from .seed import BUNDLED_SEED_FILE, SeedDataError, load_courses, seed_repository
from .session import get_repository

__all__ = [
    "BUNDLED_SEED_FILE",
    "SeedDataError",
    "get_repository",
    "load_courses",
    "seed_repository",
]
