# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....core.security import hash_password
from ...dto.user_dto import UserRegistrationRequest, UserResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: UserRegistrationRequest) -> UserResponse:
        """
        Register a new user
        
        Uniqueness of the username is left to the repository insert, so two
        concurrent registrations cannot both succeed.
        
        Args:
            request: Registration request with user details
            
        Returns:
            UserResponse with created user information
            
        Raises:
            DuplicateUsernameError: If the username is already taken
            ValidationError: If the username is too short
        """
        new_user = User(
            id=None,  # Will be set by repository
            username=request.username,
            name=request.name,
            password_hash=hash_password(request.password),
        )
        
        saved_user = await self.user_repository.create(new_user)
        logger.info(f"Registered user {saved_user.username} ({saved_user.id})")
        
        return UserResponse(
            id=saved_user.id or "",
            username=saved_user.username,
            name=saved_user.name,
        )
