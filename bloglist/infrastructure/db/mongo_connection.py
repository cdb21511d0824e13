# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING

# Local application imports
from ...core.config import Settings
from ...domain.constants import UserFields

logger = logging.getLogger(__name__)

BLOG_COLLECTION = "blogs"
USER_COLLECTION = "users"

# Process-wide MongoDB connection, opened on startup and closed on shutdown
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def init_mongo(settings: Settings) -> AsyncIOMotorDatabase:
    """
    Open the MongoDB client (idempotent)
    
    Args:
        settings: Application settings with the connection string and database name
        
    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database
    
    if _mongo_database is not None:
        return _mongo_database
    
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri)
    _mongo_database = _mongo_client[settings.database_name]
    logger.info(f"Connected to MongoDB database '{settings.database_name}'")
    return _mongo_database


def close_mongo() -> None:
    """Close the MongoDB client if it is open"""
    global _mongo_client, _mongo_database
    
    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("MongoDB connection closed")
    _mongo_client = None
    _mongo_database = None


def get_blog_collection(database: AsyncIOMotorDatabase) -> AsyncIOMotorCollection:
    """
    Get blogs collection from MongoDB
    
    Returns:
        MongoDB collection for blogs
    """
    return database[BLOG_COLLECTION]


def get_user_collection(database: AsyncIOMotorDatabase) -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB
    
    Returns:
        MongoDB collection for users
    """
    return database[USER_COLLECTION]


async def ensure_indexes(database: AsyncIOMotorDatabase) -> None:
    """Create the unique username index that backs registration"""
    await get_user_collection(database).create_index(
        [(UserFields.USERNAME, ASCENDING)],
        unique=True,
        name="username_unique",
    )
    logger.info("Ensured unique index on users.username")
