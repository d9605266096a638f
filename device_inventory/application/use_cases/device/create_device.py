# Standard library imports
import logging

# Local application imports
from ....domain.repositories.device_repository import DeviceRepository
from ...dto.device_dto import DeviceCreateRequest, DeviceResponse
from .device_builder import build_device

logger = logging.getLogger(__name__)


class CreateDeviceUseCase:
    """Use case for creating a new device"""

    def __init__(self, device_repository: DeviceRepository) -> None:
        self.device_repository = device_repository

    async def execute(self, request: DeviceCreateRequest) -> DeviceResponse:
        """
        Create a new device

        Args:
            request: Device creation request; missing location/specifications get defaults

        Returns:
            DeviceResponse with created device information

        Raises:
            ConflictError: If the deviceId is already taken
        """
        device = build_device(request)
        saved_device = await self.device_repository.create(device)
        logger.info(f"Successfully saved device {saved_device.device_id}")
        return DeviceResponse.from_domain(saved_device)
