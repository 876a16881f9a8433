"""
API route modules.

- Courses: paged and sorted listing, type filter, and course CRUD

Routers are included from src.api.main (under the API_PREFIX prefix).
"""
