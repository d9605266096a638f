from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from ...core.security import BCRYPT_MAX_PASSWORD_BYTES
from .common_dto import CamelModel
from .user_dto import UserResponse


def _check_password_bytes(value: str) -> str:
    if len(value.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes")
    return value


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request"""
    username: str = Field(min_length=3, max_length=32)
    password: str = Field(min_length=6, max_length=BCRYPT_MAX_PASSWORD_BYTES)
    email: Optional[EmailStr] = None

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return _check_password_bytes(value)


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    username: str = Field(min_length=1, max_length=32)
    password: str = Field(min_length=1, max_length=BCRYPT_MAX_PASSWORD_BYTES)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return _check_password_bytes(value)


class AuthResponse(CamelModel):
    """DTO for a successful register/login: bearer token plus user summary"""
    token: str
    user: UserResponse
