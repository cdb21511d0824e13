from .blog_dto import BlogCreateRequest, BlogUpdateRequest, BlogResponse
from .user_dto import UserRegistrationRequest, UserResponse

__all__ = [
    "BlogCreateRequest",
    "BlogUpdateRequest",
    "BlogResponse",
    "UserRegistrationRequest",
    "UserResponse",
]
