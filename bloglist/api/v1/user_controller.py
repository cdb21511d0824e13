# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.user_dto import UserRegistrationRequest, UserResponse
from ...application.use_cases.user.register_user import RegisterUserUseCase
from ...di.base_container import BaseContainer
from .dependencies import get_container


router = APIRouter(tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    request: UserRegistrationRequest,
    container: BaseContainer = Depends(get_container),
) -> UserResponse:
    """
    Register a new user
    
    Args:
        request: User registration request
        
    Returns:
        UserResponse with created user information (never the password hash)
    """
    register_use_case = container.get(RegisterUserUseCase)
    return await register_use_case.execute(request)
