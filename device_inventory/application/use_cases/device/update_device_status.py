# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.models.device import DeviceStatus
from ....domain.repositories.device_repository import DeviceRepository
from ...dto.device_dto import DeviceResponse

logger = logging.getLogger(__name__)


class UpdateDeviceStatusUseCase:
    """Use case for changing a device's status"""

    def __init__(self, device_repository: DeviceRepository) -> None:
        self.device_repository = device_repository

    async def execute(self, identifier: str, status: DeviceStatus) -> Optional[DeviceResponse]:
        """
        Set the status of a device

        Switching to online records lastOnlineTime; every other status clears it.

        Returns:
            DeviceResponse after the change, or None when no device matches
        """
        status_value = DeviceStatus(status).value
        device = await self.device_repository.set_status(identifier, status_value)
        if device is None:
            return None
        logger.info(f"Device {device.device_id} is now {status_value}")
        return DeviceResponse.from_domain(device)
