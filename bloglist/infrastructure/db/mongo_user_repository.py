# Standard library imports
import logging
from typing import Any, Dict

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...core.exceptions import DuplicateUsernameError, PersistenceError
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""
    
    def __init__(self, user_collection: AsyncIOMotorCollection) -> None:
        self.user_collection = user_collection
    
    async def create(self, user: User) -> User:
        """
        Insert a new user
        
        Relies on the unique index on username (see ensure_indexes), so the
        duplicate check and the insert are a single database operation.
        
        Args:
            user: User domain model without ID
            
        Returns:
            Saved User domain model with ID set
            
        Raises:
            DuplicateUsernameError: If the username is already taken
        """
        if not user:
            raise ValueError("User cannot be None")
        
        try:
            result = await self.user_collection.insert_one(self._user_to_dict(user))
        except DuplicateKeyError:
            logger.warning(f"Rejected duplicate username '{user.username}'")
            raise DuplicateUsernameError(user.username)
        except PyMongoError as e:
            raise PersistenceError(f"Error saving user: {str(e)}") from e
        
        return User(
            id=str(result.inserted_id),
            username=user.username,
            name=user.name,
            password_hash=user.password_hash,
        )
    
    def _user_to_dict(self, user: User) -> Dict[str, Any]:
        """Convert User domain model to MongoDB document (without _id)"""
        return {
            UserFields.USERNAME: user.username,
            UserFields.NAME: user.name,
            UserFields.PASSWORD_HASH: user.password_hash,
        }
