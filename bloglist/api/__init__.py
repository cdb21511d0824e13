"""
API layer for the bloglist backend.

Exposes the blog CRUD endpoints under /api/blogs and user registration
under /api/users, plus the centralized error handlers and request logging.
"""
