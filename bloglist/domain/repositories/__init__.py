from .blog_repository import BlogRepository
from .user_repository import UserRepository

__all__ = ["BlogRepository", "UserRepository"]
