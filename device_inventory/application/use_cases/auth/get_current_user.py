# Standard library imports
from typing import Optional

# Local application imports
from ....core.exceptions import InvalidTokenError
from ....core.security import decode_jwt_token
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse
from .token_issuer import to_user_response


class GetCurrentUserUseCase:
    """Use case for getting current authenticated user from JWT token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, token: str) -> UserResponse:
        """
        Get current user from JWT token

        Args:
            token: JWT access token

        Returns:
            UserResponse with user information

        Raises:
            TokenExpiredError: If the token has expired
            InvalidTokenError: If the token is malformed, forged, or names no user
        """
        payload = decode_jwt_token(token)

        user_id: Optional[str] = payload.get("sub")
        if not user_id:
            raise InvalidTokenError("Invalid authentication payload: missing user ID")

        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise InvalidTokenError("User not found")

        return to_user_response(user)
