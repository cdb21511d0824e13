from abc import ABC, abstractmethod
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""
    
    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Insert a new user.
        
        Raises DuplicateUsernameError when the username is taken. The
        uniqueness check must be part of the insert itself.
        """
        pass
