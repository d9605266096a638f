# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional


class DeviceStatus(str, Enum):
    ONLINE = "online"
    OFFLINE = "offline"
    ERROR = "error"
    MAINTENANCE = "maintenance"


class DeviceType(str, Enum):
    """Device categories accepted on create; storage itself keeps any string."""
    SENSOR = "sensor"
    CAMERA = "camera"
    GATEWAY = "gateway"
    CONTROLLER = "controller"
    OTHER = "other"


@dataclass
class Location:
    longitude: float
    latitude: float
    address: str


@dataclass
class Specifications:
    """
    Hardware specification of a device.

    model, manufacturer and production_date are always present. Every other
    technical attribute (protocol, powerSupply, ipRating, ...) is kept in
    details under its document key, so unknown attributes survive a round trip.
    """
    model: str
    manufacturer: str
    production_date: datetime
    details: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Device:
    """
    Pure domain model for Device entity.

    id is the store-assigned primary key, device_id the caller-assigned
    business key. Both are immutable once the device exists.
    """
    id: Optional[str]
    device_id: str
    name: str
    type: str
    status: str
    location: Location
    specifications: Specifications
    last_online_time: Optional[datetime] = None
    last_maintenance_time: Optional[datetime] = None
    deployment_date: Optional[datetime] = None
    warranty_expiry_date: Optional[datetime] = None
    firmware_version: Optional[str] = None
    maintenance_cycle: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.device_id:
            raise ValueError("Device ID is required")
        if self.status not in {s.value for s in DeviceStatus}:
            raise ValueError(f"Unknown device status: {self.status}")
