from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 32


class UserRole(str, Enum):
    USER = "user"
    ADMIN = "admin"
    OPERATOR = "operator"
    VIEWER = "viewer"


@dataclass
class User:
    """
    Pure domain model for User entity - no external dependencies.

    hashed_password is only populated when the repository was asked for it
    explicitly (credential verification); default reads leave it None.
    """
    id: Optional[str]
    username: str
    role: str = UserRole.USER.value
    email: Optional[str] = None
    hashed_password: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Business validations"""
        self.username = (self.username or "").strip()
        if not USERNAME_MIN_LENGTH <= len(self.username) <= USERNAME_MAX_LENGTH:
            raise ValueError(
                f"Username must be {USERNAME_MIN_LENGTH}-{USERNAME_MAX_LENGTH} characters"
            )
        if self.role not in {r.value for r in UserRole}:
            raise ValueError(f"Unknown role: {self.role}")
        if self.email is not None:
            self.email = self.email.strip().lower() or None
