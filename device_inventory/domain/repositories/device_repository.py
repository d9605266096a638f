from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from ..models.device import Device
from ..models.lookup import DeviceLookup
from ..models.query import DevicePage, DeviceQuery, DeviceStatistics


class DeviceRepository(ABC):
    """Repository interface - defines contract for device data access"""

    @abstractmethod
    async def resolve(self, identifier: str) -> DeviceLookup:
        """Find a device by internal id, falling back to its deviceId"""
        pass

    @abstractmethod
    async def create(self, device: Device) -> Device:
        """Insert a new device"""
        pass

    @abstractmethod
    async def create_many(self, devices: List[Device]) -> List[Device]:
        """Insert several devices in one bulk write"""
        pass

    @abstractmethod
    async def update(self, identifier: str, changes: Dict[str, Any]) -> Optional[Device]:
        """Replace the given top-level fields, return the updated device"""
        pass

    @abstractmethod
    async def delete(self, identifier: str) -> bool:
        """Delete a device, return whether one was removed"""
        pass

    @abstractmethod
    async def set_status(self, identifier: str, status: str) -> Optional[Device]:
        """Change the status, stamping or clearing lastOnlineTime"""
        pass

    @abstractmethod
    async def list(self, query: DeviceQuery) -> DevicePage:
        """Filtered page of devices plus the unpaginated match count"""
        pass

    @abstractmethod
    async def statistics(self) -> DeviceStatistics:
        """Total count and grouped counts by type, status and address"""
        pass
