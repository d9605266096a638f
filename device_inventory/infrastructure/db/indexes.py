# Standard library imports
import logging
from typing import List

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING, TEXT, IndexModel
from pymongo.errors import OperationFailure

# Local application imports
from ...domain.constants import DeviceFields, UserFields

logger = logging.getLogger(__name__)

# IndexOptionsConflict / IndexKeySpecsConflict: an equivalent index already exists
INDEX_CONFLICT_CODES = {85, 86}

# Driver default names (deviceId_1, type_1_status_1, ...) so indexes created
# by earlier deployments are recognised as the same index
DEVICE_INDEXES = [
    IndexModel([(DeviceFields.DEVICE_ID, ASCENDING)], unique=True),
    IndexModel([(DeviceFields.TYPE, ASCENDING)]),
    IndexModel([(DeviceFields.STATUS, ASCENDING)]),
    IndexModel([(DeviceFields.NAME, TEXT)]),
    IndexModel([(DeviceFields.CREATED_AT, DESCENDING)]),
    IndexModel([(DeviceFields.UPDATED_AT, DESCENDING)]),
    IndexModel([(DeviceFields.TYPE, ASCENDING), (DeviceFields.STATUS, ASCENDING)]),
    IndexModel([(DeviceFields.WARRANTY_EXPIRY_DATE, ASCENDING)]),
]

USER_INDEXES = [
    IndexModel([(UserFields.USERNAME, ASCENDING)], unique=True),
    IndexModel([(UserFields.EMAIL, ASCENDING)], unique=True, sparse=True),
]


async def _create_indexes(collection: AsyncIOMotorCollection, indexes: List[IndexModel]) -> List[str]:
    """Create indexes one by one; a conflicting existing index is logged and kept."""
    created = []
    for index in indexes:
        name = index.document["name"]
        try:
            created.extend(await collection.create_indexes([index]))
        except OperationFailure as e:
            if e.code not in INDEX_CONFLICT_CODES:
                raise
            logger.warning(f"Keeping existing index on {collection.name} conflicting with {name}: {e}")
    return created


async def ensure_indexes(
    device_collection: AsyncIOMotorCollection,
    user_collection: AsyncIOMotorCollection,
) -> None:
    """Create the secondary indexes both collections rely on (idempotent)."""
    device_names = await _create_indexes(device_collection, DEVICE_INDEXES)
    user_names = await _create_indexes(user_collection, USER_INDEXES)
    logger.info(f"Ensured indexes: devices={device_names}, users={user_names}")
