# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.device_repository import DeviceRepository
from ...dto.device_dto import DeviceResponse


class GetDeviceUseCase:
    """Use case for getting a device by internal id or deviceId"""

    def __init__(self, device_repository: DeviceRepository) -> None:
        self.device_repository = device_repository

    async def execute(self, identifier: str) -> Optional[DeviceResponse]:
        """
        Get a device

        Args:
            identifier: Internal id or business deviceId

        Returns:
            DeviceResponse, or None when no device matches
        """
        lookup = await self.device_repository.resolve(identifier)
        if not lookup.found:
            return None
        return DeviceResponse.from_domain(lookup.device)
