from .blog import Blog
from .user import User

__all__ = ["Blog", "User"]
