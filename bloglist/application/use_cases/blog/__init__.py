from .list_blogs import ListBlogsUseCase
from .create_blog import CreateBlogUseCase
from .get_blog import GetBlogUseCase
from .update_blog import UpdateBlogUseCase
from .delete_blog import DeleteBlogUseCase

__all__ = [
    "ListBlogsUseCase",
    "CreateBlogUseCase",
    "GetBlogUseCase",
    "UpdateBlogUseCase",
    "DeleteBlogUseCase",
]
