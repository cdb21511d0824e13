from typing import TYPE_CHECKING

from motor.motor_asyncio import AsyncIOMotorDatabase

from ...infrastructure.db.mongo_connection import (
    get_blog_collection,
    get_user_collection,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""
    
    @staticmethod
    def register(container: "BaseContainer", database: AsyncIOMotorDatabase) -> None:
        """
        Register the database and its collections in the container.
        This is the only place where collections are looked up.
        """
        container.register_singleton("database", database)
        container.register_singleton("blog_collection", get_blog_collection(database))
        container.register_singleton("user_collection", get_user_collection(database))
