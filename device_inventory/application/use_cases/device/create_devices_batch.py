# Standard library imports
import logging
from typing import List

# Local application imports
from ....domain.repositories.device_repository import DeviceRepository
from ....utils.datetime_utils import utc_now
from ...dto.device_dto import DeviceBatchCreateRequest, DeviceResponse
from .device_builder import build_device

logger = logging.getLogger(__name__)


class CreateDevicesBatchUseCase:
    """Use case for creating many devices with one bulk insert"""

    def __init__(self, device_repository: DeviceRepository) -> None:
        self.device_repository = device_repository

    async def execute(self, request: DeviceBatchCreateRequest) -> List[DeviceResponse]:
        """
        Create all devices of the batch

        Raises:
            ConflictError: On the first duplicate deviceId; no partial result is reported
        """
        now = utc_now()
        devices = [build_device(draft, now=now) for draft in request.devices]
        saved_devices = await self.device_repository.create_many(devices)
        logger.info(f"Batch created {len(saved_devices)} devices")
        return [DeviceResponse.from_domain(device) for device in saved_devices]
