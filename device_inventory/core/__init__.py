from .config import Settings, get_settings
from .exceptions import (
    AppError,
    ValidationError,
    UnauthorizedError,
    TokenExpiredError,
    InvalidTokenError,
    ConflictError,
)
from .security import (
    hash_password,
    verify_password,
    create_jwt_token,
    decode_jwt_token,
)

__all__ = [
    "Settings",
    "get_settings",
    "AppError",
    "ValidationError",
    "UnauthorizedError",
    "TokenExpiredError",
    "InvalidTokenError",
    "ConflictError",
    "hash_password",
    "verify_password",
    "create_jwt_token",
    "decode_jwt_token",
]
