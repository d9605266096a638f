from typing import TYPE_CHECKING
from ...domain.repositories.device_repository import DeviceRepository
from ...application.use_cases.device import (
    CreateDeviceUseCase,
    CreateDevicesBatchUseCase,
    ListDevicesUseCase,
    GetDeviceUseCase,
    UpdateDeviceUseCase,
    DeleteDeviceUseCase,
    UpdateDeviceStatusUseCase,
    GetDeviceStatisticsUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer

DEVICE_USE_CASES = (
    CreateDeviceUseCase,
    CreateDevicesBatchUseCase,
    ListDevicesUseCase,
    GetDeviceUseCase,
    UpdateDeviceUseCase,
    DeleteDeviceUseCase,
    UpdateDeviceStatusUseCase,
    GetDeviceStatisticsUseCase,
)


class DeviceProvider:
    """Device use case provider - registers all device-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all device use cases.
        Use cases are created on-demand via factories; each only needs the device repository.
        """
        for use_case_class in DEVICE_USE_CASES:
            container.register_factory(
                use_case_class,
                lambda cls=use_case_class: cls(
                    device_repository=container.get(DeviceRepository),
                )
            )
