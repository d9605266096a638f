from .common_dto import ApiResponse, CamelModel
from .auth_dto import UserRegistrationRequest, UserLoginRequest, AuthResponse
from .user_dto import UserResponse
from .device_dto import (
    LocationSchema,
    SpecificationsSchema,
    DeviceCreateRequest,
    DeviceUpdateRequest,
    DeviceBatchCreateRequest,
    DeviceStatusUpdateRequest,
    DeviceResponse,
    DeviceListResponse,
    DeviceStatisticsResponse,
)

__all__ = [
    "ApiResponse",
    "CamelModel",
    "UserRegistrationRequest",
    "UserLoginRequest",
    "AuthResponse",
    "UserResponse",
    "LocationSchema",
    "SpecificationsSchema",
    "DeviceCreateRequest",
    "DeviceUpdateRequest",
    "DeviceBatchCreateRequest",
    "DeviceStatusUpdateRequest",
    "DeviceResponse",
    "DeviceListResponse",
    "DeviceStatisticsResponse",
]
