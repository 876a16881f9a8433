"""
Core application utilities for settings, logging and FastAPI dependencies.

This package provides:
- Application-level settings
- Logging configuration with request correlation ids
- Dependency helpers (shared repository, sort parameter parsing)
"""
