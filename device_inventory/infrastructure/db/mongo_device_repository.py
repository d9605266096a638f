# Standard library imports
import asyncio
import logging
from typing import Optional, List, Dict, Any, Tuple

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import BulkWriteError, DuplicateKeyError, PyMongoError

# Local application imports
from ...core.exceptions import ConflictError
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.models.device import Device, DeviceStatus, Location, Specifications
from ...domain.models.lookup import DeviceLookup, LookupKey
from ...domain.models.query import DevicePage, DeviceQuery, DeviceStatistics
from ...domain.constants import DeviceFields, LocationFields, SpecificationFields
from ...utils.datetime_utils import ensure_utc, utc_now
from .device_queries import (
    address_present_match,
    aggregation_to_counts,
    build_device_filter,
    build_group_count_pipeline,
)

logger = logging.getLogger(__name__)

DUPLICATE_KEY_CODE = 11000

# Never changed through update(); they identify the document or are store-managed
_IMMUTABLE_FIELDS = {DeviceFields.MONGO_ID, DeviceFields.ID, DeviceFields.DEVICE_ID, DeviceFields.CREATED_AT}

_OPTIONAL_FIELDS = (
    ("last_online_time", DeviceFields.LAST_ONLINE_TIME),
    ("last_maintenance_time", DeviceFields.LAST_MAINTENANCE_TIME),
    ("deployment_date", DeviceFields.DEPLOYMENT_DATE),
    ("warranty_expiry_date", DeviceFields.WARRANTY_EXPIRY_DATE),
    ("firmware_version", DeviceFields.FIRMWARE_VERSION),
    ("maintenance_cycle", DeviceFields.MAINTENANCE_CYCLE),
)


class MongoDeviceRepository(DeviceRepository):
    """MongoDB implementation of DeviceRepository"""

    def __init__(self, device_collection: AsyncIOMotorCollection) -> None:
        self.device_collection = device_collection

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    @staticmethod
    def _identifier_filters(identifier: str) -> List[Tuple[LookupKey, Dict[str, Any]]]:
        """
        Candidate filters for a caller-supplied identifier, in lookup order.

        The _id filter is only tried when the identifier has ObjectId shape;
        the deviceId filter is always tried last.
        """
        filters: List[Tuple[LookupKey, Dict[str, Any]]] = []
        if ObjectId.is_valid(identifier):
            filters.append((LookupKey.PRIMARY, {DeviceFields.MONGO_ID: ObjectId(identifier)}))
        filters.append((LookupKey.SECONDARY, {DeviceFields.DEVICE_ID: identifier}))
        return filters

    async def resolve(self, identifier: str) -> DeviceLookup:
        """
        Find a device by internal id or deviceId

        Args:
            identifier: Either the store's _id (hex string) or the business deviceId

        Returns:
            DeviceLookup saying which key matched; device is None when nothing did
        """
        if not identifier:
            return DeviceLookup.not_found()

        try:
            for key, mongo_filter in self._identifier_filters(identifier):
                document = await self.device_collection.find_one(mongo_filter)
                if document is not None:
                    return DeviceLookup(device=self._document_to_device(document), matched_by=key)
        except PyMongoError as e:
            raise RuntimeError(f"Error finding device {identifier}: {str(e)}") from e

        return DeviceLookup.not_found()

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def create(self, device: Device) -> Device:
        """Insert a new device; duplicate deviceId raises ConflictError"""
        document = self._device_to_document(device)
        now = utc_now()
        document[DeviceFields.CREATED_AT] = now
        document[DeviceFields.UPDATED_AT] = now

        try:
            result = await self.device_collection.insert_one(document)
        except DuplicateKeyError as e:
            raise ConflictError(f"Device {device.device_id} already exists") from e

        document[DeviceFields.MONGO_ID] = result.inserted_id
        logger.info(f"Created device {device.device_id} ({result.inserted_id})")
        return self._document_to_device(document)

    async def create_many(self, devices: List[Device]) -> List[Device]:
        """
        Insert devices with a single ordered bulk write.

        Either all documents are inserted or the first failing one is
        reported; partially written batches are not accounted for.
        """
        if not devices:
            return []

        now = utc_now()
        documents = []
        for device in devices:
            document = self._device_to_document(device)
            document[DeviceFields.CREATED_AT] = now
            document[DeviceFields.UPDATED_AT] = now
            documents.append(document)

        try:
            result = await self.device_collection.insert_many(documents, ordered=True)
        except BulkWriteError as e:
            write_errors = e.details.get("writeErrors", [])
            first_error = write_errors[0] if write_errors else {}
            if first_error.get("code") == DUPLICATE_KEY_CODE:
                failed = documents[first_error.get("index", 0)]
                raise ConflictError(
                    f"Device {failed.get(DeviceFields.DEVICE_ID)} already exists",
                    details={"index": first_error.get("index")},
                ) from e
            raise

        for document, inserted_id in zip(documents, result.inserted_ids):
            document[DeviceFields.MONGO_ID] = inserted_id
        logger.info(f"Created {len(documents)} devices in one batch")
        return [self._document_to_device(document) for document in documents]

    async def _update_first_match(self, identifier: str, update: Dict[str, Any]) -> Optional[Device]:
        for _, mongo_filter in self._identifier_filters(identifier):
            document = await self.device_collection.find_one_and_update(
                mongo_filter,
                update,
                return_document=ReturnDocument.AFTER,
            )
            if document is not None:
                return self._document_to_device(document)
        return None

    async def update(self, identifier: str, changes: Dict[str, Any]) -> Optional[Device]:
        """
        Replace the given top-level fields of a device

        Args:
            identifier: _id or deviceId
            changes: Document-shaped field values; embedded documents are replaced whole

        Returns:
            The device after the update, or None if nothing matched
        """
        if not identifier:
            return None

        fields = {k: v for k, v in changes.items() if k not in _IMMUTABLE_FIELDS}
        fields[DeviceFields.UPDATED_AT] = utc_now()
        try:
            return await self._update_first_match(identifier, {"$set": fields})
        except DuplicateKeyError as e:
            raise ConflictError(f"Device {identifier} conflicts with an existing device") from e

    async def set_status(self, identifier: str, status: str) -> Optional[Device]:
        """
        Change a device's status.

        Going online stamps lastOnlineTime with the current time; any other
        status removes lastOnlineTime from the document.
        """
        if not identifier:
            return None

        now = utc_now()
        update: Dict[str, Any] = {"$set": {DeviceFields.STATUS: status, DeviceFields.UPDATED_AT: now}}
        if status == DeviceStatus.ONLINE.value:
            update["$set"][DeviceFields.LAST_ONLINE_TIME] = now
        else:
            update["$unset"] = {DeviceFields.LAST_ONLINE_TIME: ""}
        return await self._update_first_match(identifier, update)

    async def delete(self, identifier: str) -> bool:
        """Delete by _id or deviceId, returning whether a document was removed"""
        if not identifier:
            return False

        for _, mongo_filter in self._identifier_filters(identifier):
            result = await self.device_collection.delete_one(mongo_filter)
            if result.deleted_count > 0:
                logger.info(f"Deleted device {identifier}")
                return True
        return False

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def list(self, query: DeviceQuery) -> DevicePage:
        """
        List one page of devices matching the query.

        The page and the total are fetched concurrently against the same
        filter; under concurrent writes they may disagree slightly.
        """
        mongo_filter = build_device_filter(query)
        cursor = self.device_collection.find(mongo_filter).skip(query.skip).limit(query.limit)

        try:
            documents, total = await asyncio.gather(
                cursor.to_list(length=query.limit),
                self.device_collection.count_documents(mongo_filter),
            )
        except PyMongoError as e:
            raise RuntimeError(f"Error listing devices: {str(e)}") from e

        return DevicePage(
            items=[self._document_to_device(document) for document in documents],
            total=total,
        )

    async def _group_counts(self, field_path: str, match: Optional[Dict[str, Any]] = None) -> Dict[str, int]:
        cursor = self.device_collection.aggregate(build_group_count_pipeline(field_path, match))
        rows = await cursor.to_list(length=None)
        return aggregation_to_counts(rows)

    async def statistics(self) -> DeviceStatistics:
        """Total count plus counts grouped by type, status and address"""
        try:
            total, by_type, by_status, by_location = await asyncio.gather(
                self.device_collection.count_documents({}),
                self._group_counts(DeviceFields.TYPE),
                self._group_counts(DeviceFields.STATUS),
                self._group_counts(DeviceFields.LOCATION_ADDRESS, address_present_match()),
            )
        except PyMongoError as e:
            raise RuntimeError(f"Error computing device statistics: {str(e)}") from e

        return DeviceStatistics(
            total=total,
            by_type=by_type,
            by_status=by_status,
            by_location=by_location,
        )

    # ------------------------------------------------------------------
    # Mapping
    # ------------------------------------------------------------------

    def _document_to_device(self, document: Dict[str, Any]) -> Device:
        """Convert MongoDB document to Device domain model"""
        if not document or DeviceFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        location = document.get(DeviceFields.LOCATION) or {}
        specifications = dict(document.get(DeviceFields.SPECIFICATIONS) or {})
        model = specifications.pop(SpecificationFields.MODEL, "")
        manufacturer = specifications.pop(SpecificationFields.MANUFACTURER, "")
        production_date = specifications.pop(SpecificationFields.PRODUCTION_DATE, None)
        specifications.pop(DeviceFields.MONGO_ID, None)

        return Device(
            id=str(document[DeviceFields.MONGO_ID]),
            device_id=document.get(DeviceFields.DEVICE_ID, ""),
            name=document.get(DeviceFields.NAME, ""),
            type=document.get(DeviceFields.TYPE, ""),
            status=document.get(DeviceFields.STATUS, DeviceStatus.OFFLINE.value),
            location=Location(
                longitude=location.get(LocationFields.LONGITUDE, 0),
                latitude=location.get(LocationFields.LATITUDE, 0),
                address=location.get(LocationFields.ADDRESS, ""),
            ),
            specifications=Specifications(
                model=model,
                manufacturer=manufacturer,
                production_date=ensure_utc(production_date),
                details=specifications,
            ),
            last_online_time=ensure_utc(document.get(DeviceFields.LAST_ONLINE_TIME)),
            last_maintenance_time=ensure_utc(document.get(DeviceFields.LAST_MAINTENANCE_TIME)),
            deployment_date=ensure_utc(document.get(DeviceFields.DEPLOYMENT_DATE)),
            warranty_expiry_date=ensure_utc(document.get(DeviceFields.WARRANTY_EXPIRY_DATE)),
            firmware_version=document.get(DeviceFields.FIRMWARE_VERSION),
            maintenance_cycle=document.get(DeviceFields.MAINTENANCE_CYCLE),
            created_at=ensure_utc(document.get(DeviceFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(DeviceFields.UPDATED_AT)),
        )

    def _device_to_document(self, device: Device) -> Dict[str, Any]:
        """Convert Device domain model to MongoDB document (without _id)"""
        if not device:
            raise ValueError("Device cannot be None")

        document: Dict[str, Any] = {
            DeviceFields.DEVICE_ID: device.device_id,
            DeviceFields.NAME: device.name,
            DeviceFields.TYPE: device.type,
            DeviceFields.STATUS: device.status,
            DeviceFields.LOCATION: {
                LocationFields.LONGITUDE: device.location.longitude,
                LocationFields.LATITUDE: device.location.latitude,
                LocationFields.ADDRESS: device.location.address,
            },
            DeviceFields.SPECIFICATIONS: {
                **device.specifications.details,
                SpecificationFields.MODEL: device.specifications.model,
                SpecificationFields.MANUFACTURER: device.specifications.manufacturer,
                SpecificationFields.PRODUCTION_DATE: device.specifications.production_date,
            },
        }

        for attribute, field_name in _OPTIONAL_FIELDS:
            value = getattr(device, attribute)
            if value is not None:
                document[field_name] = value

        return document
