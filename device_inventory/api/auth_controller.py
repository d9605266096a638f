# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ..application.dto.auth_dto import UserRegistrationRequest, UserLoginRequest, AuthResponse
from ..application.dto.common_dto import ApiResponse
from ..application.dto.user_dto import UserResponse
from ..application.use_cases.auth.register_user import RegisterUserUseCase
from ..application.use_cases.auth.login_user import LoginUserUseCase
from ..di.container import get_container
from .dependencies import get_current_user


router = APIRouter(tags=["authentication"])


@router.post(
    "/register",
    response_model=ApiResponse[AuthResponse],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def register_user(request: UserRegistrationRequest) -> ApiResponse[AuthResponse]:
    """
    Register a new user and sign them in

    Args:
        request: User registration request

    Returns:
        Token and summary of the created user
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)

    auth = await register_use_case.execute(request)
    return ApiResponse(data=auth)


@router.post("/login", response_model=ApiResponse[AuthResponse], response_model_exclude_none=True)
async def login_user(request: UserLoginRequest) -> ApiResponse[AuthResponse]:
    """
    Authenticate user and get access token

    Args:
        request: User login request

    Returns:
        Token and user summary
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)

    auth = await login_use_case.execute(request)
    return ApiResponse(data=auth)


@router.get("/me", response_model=ApiResponse[UserResponse], response_model_exclude_none=True)
async def get_me(current_user: UserResponse = Depends(get_current_user)) -> ApiResponse[UserResponse]:
    """Get current authenticated user information"""
    return ApiResponse(data=current_user)
