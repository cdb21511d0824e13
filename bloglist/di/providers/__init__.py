from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .blog_provider import BlogProvider
from .user_provider import UserProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "BlogProvider",
    "UserProvider",
]
