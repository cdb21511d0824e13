"""Constants for domain model field names"""

from .blog_fields import BlogFields
from .user_fields import UserFields

__all__ = [
    "BlogFields",
    "UserFields",
]
