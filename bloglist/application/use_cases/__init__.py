from .blog import (
    ListBlogsUseCase,
    CreateBlogUseCase,
    GetBlogUseCase,
    UpdateBlogUseCase,
    DeleteBlogUseCase,
)
from .user import RegisterUserUseCase

__all__ = [
    "ListBlogsUseCase",
    "CreateBlogUseCase",
    "GetBlogUseCase",
    "UpdateBlogUseCase",
    "DeleteBlogUseCase",
    "RegisterUserUseCase",
]
