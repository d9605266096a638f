# Standard library imports
import asyncio
import logging

# Local application imports
from ....core.exceptions import ConflictError
from ....core.security import hash_password
from ....domain.models.user import User
from ....domain.repositories.user_repository import UserRepository
from ...dto.auth_dto import AuthResponse, UserRegistrationRequest
from .token_issuer import issue_auth_response

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user (signed in right away)"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserRegistrationRequest) -> AuthResponse:
        """
        Register a new user

        Args:
            request: Registration request with username, password and optional email

        Returns:
            AuthResponse with a session token and the created user

        Raises:
            ConflictError: If the username is already taken
        """
        existing_user = await self.user_repository.find_by_username(request.username)
        if existing_user is not None:
            raise ConflictError("Username already exists")

        # bcrypt runs in a worker thread
        hashed_password = await asyncio.to_thread(hash_password, request.password)

        new_user = User(
            id=None,  # Will be set by repository
            username=request.username,
            email=str(request.email) if request.email else None,
            hashed_password=hashed_password,
        )

        saved_user = await self.user_repository.save(new_user)
        logger.info(f"Registered user {saved_user.username}")
        return issue_auth_response(saved_user)
