# Local application imports
from ....core.security import create_jwt_token
from ....domain.constants import UserFields
from ....domain.models.user import User
from ...dto.auth_dto import AuthResponse
from ...dto.user_dto import UserResponse


def to_user_response(user: User) -> UserResponse:
    return UserResponse(
        user_id=user.id or "",
        username=user.username,
        role=user.role,
        email=user.email,
    )


def issue_auth_response(user: User) -> AuthResponse:
    """Sign a session token for the user and pair it with the user summary."""
    token = create_jwt_token({
        "sub": user.id or "",  # JWT standard claim (subject)
        UserFields.USERNAME: user.username,
        UserFields.ROLE: user.role,
    })
    return AuthResponse(token=token, user=to_user_response(user))
