from .create_device import CreateDeviceUseCase
from .create_devices_batch import CreateDevicesBatchUseCase
from .list_devices import ListDevicesUseCase
from .get_device import GetDeviceUseCase
from .update_device import UpdateDeviceUseCase
from .delete_device import DeleteDeviceUseCase
from .update_device_status import UpdateDeviceStatusUseCase
from .get_device_statistics import GetDeviceStatisticsUseCase

__all__ = [
    "CreateDeviceUseCase",
    "CreateDevicesBatchUseCase",
    "ListDevicesUseCase",
    "GetDeviceUseCase",
    "UpdateDeviceUseCase",
    "DeleteDeviceUseCase",
    "UpdateDeviceStatusUseCase",
    "GetDeviceStatisticsUseCase",
]
