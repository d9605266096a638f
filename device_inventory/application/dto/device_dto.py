from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ...domain.constants import SpecificationFields
from ...domain.models.device import Device, DeviceStatus, DeviceType
from ...utils.datetime_utils import ensure_utc, utc_now
from .common_dto import CamelModel

DEVICE_ID_PATTERN = r"^[A-Za-z0-9_-]+$"


class LocationSchema(CamelModel):
    """DTO for a device location"""
    longitude: float = Field(ge=-180, le=180)
    latitude: float = Field(ge=-90, le=90)
    address: str = Field(max_length=200)


class SpecificationsSchema(CamelModel):
    """
    DTO for device specifications.

    model, manufacturer and productionDate are required; the named optional
    attributes are the common ones, any other key is accepted as-is.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    model: str = Field(max_length=50)
    manufacturer: str = Field(max_length=100)
    production_date: datetime
    protocol: Optional[str] = None
    power_supply: Optional[str] = None
    ip_rating: Optional[str] = None
    operating_temperature: Optional[str] = None
    dimensions: Optional[str] = None
    measurement_range: Optional[str] = None
    accuracy: Optional[str] = None
    response_time: Optional[str] = None
    resolution: Optional[str] = None
    field_of_view: Optional[str] = None
    night_vision: Optional[str] = None
    storage_support: Optional[str] = None

    @field_validator("production_date")
    @classmethod
    def production_date_not_in_future(cls, value: datetime) -> datetime:
        value = ensure_utc(value)
        if value > utc_now():
            raise ValueError("productionDate cannot be in the future")
        return value


class DeviceCreateRequest(CamelModel):
    """
    DTO for device creation request.

    Only deviceId is mandatory; omitted fields are backfilled with defaults
    when the device is built.
    """
    device_id: str = Field(min_length=1, max_length=50, pattern=DEVICE_ID_PATTERN)
    name: Optional[str] = Field(default=None, max_length=100)
    type: Optional[DeviceType] = None
    status: Optional[DeviceStatus] = None
    location: Optional[LocationSchema] = None
    specifications: Optional[SpecificationsSchema] = None
    last_online_time: Optional[datetime] = None
    last_maintenance_time: Optional[datetime] = None
    deployment_date: Optional[datetime] = None
    warranty_expiry_date: Optional[datetime] = None
    firmware_version: Optional[str] = None
    maintenance_cycle: Optional[str] = None


class DeviceUpdateRequest(CamelModel):
    """DTO for device update request (deviceId cannot be changed)"""
    name: Optional[str] = Field(default=None, max_length=100)
    type: Optional[DeviceType] = None
    status: Optional[DeviceStatus] = None
    location: Optional[LocationSchema] = None
    specifications: Optional[SpecificationsSchema] = None
    last_online_time: Optional[datetime] = None
    last_maintenance_time: Optional[datetime] = None
    deployment_date: Optional[datetime] = None
    warranty_expiry_date: Optional[datetime] = None
    firmware_version: Optional[str] = None
    maintenance_cycle: Optional[str] = None

    def to_changes(self) -> Dict[str, Any]:
        """Explicitly provided, non-null fields keyed by document field name"""
        return self.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)


class DeviceBatchCreateRequest(CamelModel):
    """DTO for batch creation request"""
    devices: List[DeviceCreateRequest] = Field(min_length=1)


class DeviceStatusUpdateRequest(CamelModel):
    """DTO for device status change request"""
    status: DeviceStatus


class DeviceResponse(CamelModel):
    """DTO for device response"""
    id: str
    device_id: str
    name: str
    type: str
    status: str
    location: Dict[str, Any]
    specifications: Dict[str, Any]
    last_online_time: Optional[datetime] = None
    last_maintenance_time: Optional[datetime] = None
    deployment_date: Optional[datetime] = None
    warranty_expiry_date: Optional[datetime] = None
    firmware_version: Optional[str] = None
    maintenance_cycle: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, device: Device) -> "DeviceResponse":
        specifications = device.specifications
        return cls(
            id=device.id or "",
            device_id=device.device_id,
            name=device.name,
            type=device.type,
            status=device.status,
            location={
                "longitude": device.location.longitude,
                "latitude": device.location.latitude,
                "address": device.location.address,
            },
            specifications={
                **specifications.details,
                SpecificationFields.MODEL: specifications.model,
                SpecificationFields.MANUFACTURER: specifications.manufacturer,
                SpecificationFields.PRODUCTION_DATE: specifications.production_date,
            },
            last_online_time=device.last_online_time,
            last_maintenance_time=device.last_maintenance_time,
            deployment_date=device.deployment_date,
            warranty_expiry_date=device.warranty_expiry_date,
            firmware_version=device.firmware_version,
            maintenance_cycle=device.maintenance_cycle,
            created_at=device.created_at,
            updated_at=device.updated_at,
        )


class DeviceListResponse(CamelModel):
    """DTO for one page of devices"""
    devices: List[DeviceResponse] = Field(default_factory=list)
    total: int


class DeviceStatisticsResponse(CamelModel):
    """DTO for device statistics"""
    total: int
    by_type: Dict[str, int] = Field(default_factory=dict)
    by_status: Dict[str, int] = Field(default_factory=dict)
    by_location: Dict[str, int] = Field(default_factory=dict)
