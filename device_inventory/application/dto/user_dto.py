from typing import Optional

from .common_dto import CamelModel


class UserResponse(CamelModel):
    """DTO for user response (no password)"""
    user_id: str
    username: str
    role: str
    email: Optional[str] = None
