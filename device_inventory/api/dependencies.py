# Standard library imports
import logging
from typing import Optional

# External package imports
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ..application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ..application.dto.user_dto import UserResponse
from ..core.exceptions import UnauthorizedError
from ..di.container import get_container

logger = logging.getLogger(__name__)

# auto_error=False so a missing header becomes our 401 instead of FastAPI's 403
security_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> UserResponse:
    """
    FastAPI dependency to get current authenticated user from JWT token

    Args:
        credentials: HTTP Bearer token credentials, None when the header is absent

    Returns:
        UserResponse with user information

    Raises:
        UnauthorizedError: If the header is missing or the token is unusable.
            Expired and invalid tokens get the same response; only the log tells them apart.
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Missing or malformed Authorization header")

    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)

    try:
        return await get_current_user_use_case.execute(credentials.credentials)
    except UnauthorizedError as exception:
        logger.info(f"Rejected bearer token [{exception.code}]: {exception.message}")
        raise UnauthorizedError("Invalid or expired token") from exception
