"""Bloglist backend: blog CRUD and user registration over MongoDB."""

__version__ = "1.0.0"
