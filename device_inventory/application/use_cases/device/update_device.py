# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.device_repository import DeviceRepository
from ...dto.device_dto import DeviceResponse, DeviceUpdateRequest

logger = logging.getLogger(__name__)


class UpdateDeviceUseCase:
    """Use case for updating device fields"""

    def __init__(self, device_repository: DeviceRepository) -> None:
        self.device_repository = device_repository

    async def execute(self, identifier: str, request: DeviceUpdateRequest) -> Optional[DeviceResponse]:
        """
        Update a device

        Args:
            identifier: Internal id or business deviceId
            request: Fields to replace; nested objects are replaced as a whole

        Returns:
            DeviceResponse after the update, or None when no device matches
        """
        device = await self.device_repository.update(identifier, request.to_changes())
        if device is None:
            return None
        logger.info(f"Updated device {device.device_id}")
        return DeviceResponse.from_domain(device)
