# Local application imports
from ....domain.repositories.device_repository import DeviceRepository
from ...dto.device_dto import DeviceStatisticsResponse


class GetDeviceStatisticsUseCase:
    """Use case for aggregate device counts"""

    def __init__(self, device_repository: DeviceRepository) -> None:
        self.device_repository = device_repository

    async def execute(self) -> DeviceStatisticsResponse:
        statistics = await self.device_repository.statistics()
        return DeviceStatisticsResponse(
            total=statistics.total,
            by_type=statistics.by_type,
            by_status=statistics.by_status,
            by_location=statistics.by_location,
        )
