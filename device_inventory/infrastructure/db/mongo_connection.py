# Standard library imports
import asyncio
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo.errors import PyMongoError

# Local application imports
from ...core.config import Settings
from ...core.logging_config import mask_uri

logger = logging.getLogger(__name__)

DEVICE_COLLECTION = "devices"
USER_COLLECTION = "users"


class MongoConnection:
    """
    Process-wide MongoDB handle.

    Created once by the DI container, connected in the application lifespan
    and closed on shutdown. The motor client itself is lazy, so collections can
    be handed to repositories before connect() has run.
    """

    def __init__(self, settings: Settings, client: Optional[AsyncIOMotorClient] = None) -> None:
        self.settings = settings
        self.client = client if client is not None else AsyncIOMotorClient(
            settings.mongo_uri,
            serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
            socketTimeoutMS=settings.mongo_socket_timeout_ms,
            tz_aware=True,
        )
        self.database: AsyncIOMotorDatabase = self.client[settings.mongo_database_name]
        self._monitor_task: Optional[asyncio.Task] = None
        self._connected = False

    @property
    def connected(self) -> bool:
        return self._connected

    def get_device_collection(self) -> AsyncIOMotorCollection:
        """
        Get devices collection from MongoDB

        Returns:
            MongoDB collection for devices
        """
        return self.database[DEVICE_COLLECTION]

    def get_user_collection(self) -> AsyncIOMotorCollection:
        """
        Get users collection from MongoDB

        Returns:
            MongoDB collection for users
        """
        return self.database[USER_COLLECTION]

    async def ping(self) -> bool:
        try:
            await self.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.debug(f"MongoDB ping failed: {e}")
            return False

    async def connect(self) -> None:
        """
        Verify the server is reachable, retrying with a fixed delay.

        Raises:
            RuntimeError: If every attempt failed; startup must not continue
        """
        attempts = max(1, self.settings.mongo_connect_attempts)
        delay = self.settings.mongo_retry_delay_seconds
        logger.info(
            f"Connecting to MongoDB at {mask_uri(self.settings.mongo_uri)} "
            f"(database={self.settings.mongo_database_name}, "
            f"serverSelectionTimeoutMS={self.settings.mongo_server_selection_timeout_ms}, "
            f"socketTimeoutMS={self.settings.mongo_socket_timeout_ms})"
        )

        for attempt in range(1, attempts + 1):
            if await self.ping():
                self._connected = True
                logger.info("Successfully connected to MongoDB")
                return
            if attempt < attempts:
                logger.warning(
                    f"MongoDB not reachable (attempt {attempt}/{attempts}), retrying in {delay}s"
                )
                await asyncio.sleep(delay)

        logger.error(f"Failed to connect to MongoDB after {attempts} attempt(s)")
        raise RuntimeError("Could not connect to MongoDB")

    def start_monitor(self) -> None:
        """Start the background task that watches for disconnects."""
        if self._monitor_task is None or self._monitor_task.done():
            self._monitor_task = asyncio.create_task(self._monitor())

    async def _monitor(self) -> None:
        # The driver reconnects on its own; this loop only keeps retrying
        # at a fixed delay and reports the transitions.
        delay = self.settings.mongo_retry_delay_seconds
        while True:
            try:
                await asyncio.sleep(delay)
                reachable = await self.ping()
                if self._connected and not reachable:
                    logger.warning(f"MongoDB disconnected, retrying every {delay}s")
                elif not self._connected and reachable:
                    logger.info("MongoDB reconnected")
                self._connected = reachable
            except asyncio.CancelledError:
                break
            except Exception as e:
                logger.error(f"MongoDB monitor check failed: {e}", exc_info=True)

    async def close(self) -> None:
        if self._monitor_task is not None:
            self._monitor_task.cancel()
            try:
                await self._monitor_task
            except asyncio.CancelledError:
                pass
            self._monitor_task = None
        self.client.close()
        self._connected = False
        logger.info("MongoDB connection closed")
