from .user_repository import UserRepository
from .device_repository import DeviceRepository

__all__ = ["UserRepository", "DeviceRepository"]
