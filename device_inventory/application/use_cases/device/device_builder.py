# Standard library imports
from datetime import datetime
from typing import Optional

# Local application imports
from ....domain.constants import SpecificationFields
from ....domain.models.device import Device, DeviceStatus, DeviceType, Location, Specifications
from ....utils.datetime_utils import utc_now
from ...dto.device_dto import DeviceCreateRequest, SpecificationsSchema

DEFAULT_NAME = "Unnamed Device"
DEFAULT_ADDRESS = "Unknown Location"
DEFAULT_MODEL = "Unknown Model"
DEFAULT_MANUFACTURER = "Unknown Manufacturer"


def _default_device(device_id: str, now: datetime) -> Device:
    return Device(
        id=None,
        device_id=device_id,
        name=DEFAULT_NAME,
        type=DeviceType.OTHER.value,
        status=DeviceStatus.OFFLINE.value,
        location=Location(longitude=0, latitude=0, address=DEFAULT_ADDRESS),
        specifications=Specifications(
            model=DEFAULT_MODEL,
            manufacturer=DEFAULT_MANUFACTURER,
            production_date=now,
        ),
    )


def _specifications_from_schema(schema: SpecificationsSchema) -> Specifications:
    values = schema.model_dump(by_alias=True, exclude_none=True)
    return Specifications(
        model=values.pop(SpecificationFields.MODEL),
        manufacturer=values.pop(SpecificationFields.MANUFACTURER),
        production_date=values.pop(SpecificationFields.PRODUCTION_DATE),
        details=values,
    )


def build_device(request: DeviceCreateRequest, now: Optional[datetime] = None) -> Device:
    """
    Build a new Device from a creation request.

    Starts from a record filled with defaults, then copies over every field
    the caller actually supplied. Fields sent as null count as not supplied.
    """
    device = _default_device(request.device_id, now or utc_now())

    supplied = request.model_dump(
        exclude_unset=True,
        exclude_none=True,
        exclude={"device_id", "location", "specifications"},
    )
    for attribute, value in supplied.items():
        setattr(device, attribute, value)

    if request.location is not None:
        device.location = Location(
            longitude=request.location.longitude,
            latitude=request.location.latitude,
            address=request.location.address,
        )
    if request.specifications is not None:
        device.specifications = _specifications_from_schema(request.specifications)

    return device
