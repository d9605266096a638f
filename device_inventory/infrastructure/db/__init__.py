from .mongo_connection import MongoConnection
from .mongo_user_repository import MongoUserRepository
from .mongo_device_repository import MongoDeviceRepository
from .indexes import ensure_indexes

__all__ = [
    "MongoConnection",
    "MongoUserRepository",
    "MongoDeviceRepository",
    "ensure_indexes",
]
