from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
)
from .device import (
    CreateDeviceUseCase,
    CreateDevicesBatchUseCase,
    ListDevicesUseCase,
    GetDeviceUseCase,
    UpdateDeviceUseCase,
    DeleteDeviceUseCase,
    UpdateDeviceStatusUseCase,
    GetDeviceStatisticsUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "CreateDeviceUseCase",
    "CreateDevicesBatchUseCase",
    "ListDevicesUseCase",
    "GetDeviceUseCase",
    "UpdateDeviceUseCase",
    "DeleteDeviceUseCase",
    "UpdateDeviceStatusUseCase",
    "GetDeviceStatisticsUseCase",
]
