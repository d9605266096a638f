from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...infrastructure.db.mongo_connection import MongoConnection

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the MongoDB handle and its collections in the container.
        The handle is only created here; the application lifespan connects and closes it.
        """
        connection = MongoConnection(get_settings())

        container.register_singleton(MongoConnection, connection)
        container.register_singleton("database", connection.database)
        container.register_singleton("user_collection", connection.get_user_collection())
        container.register_singleton("device_collection", connection.get_device_collection())
