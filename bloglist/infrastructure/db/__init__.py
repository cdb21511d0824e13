from .mongo_connection import (
    init_mongo,
    close_mongo,
    get_blog_collection,
    get_user_collection,
    ensure_indexes,
)
from .mongo_blog_repository import MongoBlogRepository
from .mongo_user_repository import MongoUserRepository

__all__ = [
    "init_mongo",
    "close_mongo",
    "get_blog_collection",
    "get_user_collection",
    "ensure_indexes",
    "MongoBlogRepository",
    "MongoUserRepository",
]
