from .user import User, UserRole
from .device import Device, DeviceStatus, DeviceType, Location, Specifications
from .lookup import DeviceLookup, LookupKey
from .query import DeviceQuery, DevicePage, DeviceStatistics

__all__ = [
    "User",
    "UserRole",
    "Device",
    "DeviceStatus",
    "DeviceType",
    "Location",
    "Specifications",
    "DeviceLookup",
    "LookupKey",
    "DeviceQuery",
    "DevicePage",
    "DeviceStatistics",
]
