# Local application imports
from ....domain.repositories.device_repository import DeviceRepository


class DeleteDeviceUseCase:
    """Use case for deleting a device"""

    def __init__(self, device_repository: DeviceRepository) -> None:
        self.device_repository = device_repository

    async def execute(self, identifier: str) -> bool:
        """Delete by internal id or deviceId; False when nothing was removed"""
        return await self.device_repository.delete(identifier)
