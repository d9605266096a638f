# Standard library imports
import asyncio
import logging
from functools import lru_cache

# Local application imports
from ....core.exceptions import UnauthorizedError
from ....core.security import hash_password, verify_password
from ....domain.repositories.user_repository import UserRepository
from ...dto.auth_dto import AuthResponse, UserLoginRequest
from .token_issuer import issue_auth_response

logger = logging.getLogger(__name__)

# Same message for unknown user and wrong password
INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"


@lru_cache(maxsize=1)
def _dummy_password_hash() -> str:
    """Hash checked for unknown usernames so both failures cost one bcrypt round"""
    return hash_password("unknown-user-placeholder")


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserLoginRequest) -> AuthResponse:
        """
        Authenticate user and generate access token

        Args:
            request: Login request with username and password

        Returns:
            AuthResponse with a session token and the user summary

        Raises:
            UnauthorizedError: If the username is unknown or the password is wrong
        """
        user = await self.user_repository.find_by_username(request.username, include_password=True)

        if user is None:
            hashed_password = await asyncio.to_thread(_dummy_password_hash)
        else:
            hashed_password = user.hashed_password or ""
        password_matches = await asyncio.to_thread(verify_password, request.password, hashed_password)

        if user is None or not password_matches:
            logger.info("Rejected login attempt")
            raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE)

        return issue_auth_response(user)
