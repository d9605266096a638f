# Local application imports
from ....domain.models.query import DeviceQuery
from ....domain.repositories.device_repository import DeviceRepository
from ...dto.device_dto import DeviceListResponse, DeviceResponse


class ListDevicesUseCase:
    """Use case for listing devices with filters and pagination"""

    def __init__(self, device_repository: DeviceRepository) -> None:
        self.device_repository = device_repository

    async def execute(self, query: DeviceQuery) -> DeviceListResponse:
        """
        List one page of devices

        Args:
            query: Filters (type, status, location, search) and pagination

        Returns:
            DeviceListResponse with the page and the total number of matches
        """
        page = await self.device_repository.list(query)
        return DeviceListResponse(
            devices=[DeviceResponse.from_domain(device) for device in page.items],
            total=page.total,
        )
