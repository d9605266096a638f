# Standard library imports
from typing import List, Optional

# External package imports
from fastapi import APIRouter, Depends, HTTPException, Query, status

# Local application imports
from ..application.dto.common_dto import ApiResponse
from ..application.dto.device_dto import (
    DeviceBatchCreateRequest,
    DeviceCreateRequest,
    DeviceListResponse,
    DeviceResponse,
    DeviceStatisticsResponse,
    DeviceStatusUpdateRequest,
    DeviceUpdateRequest,
)
from ..application.use_cases.device import (
    CreateDeviceUseCase,
    CreateDevicesBatchUseCase,
    DeleteDeviceUseCase,
    GetDeviceStatisticsUseCase,
    GetDeviceUseCase,
    ListDevicesUseCase,
    UpdateDeviceStatusUseCase,
    UpdateDeviceUseCase,
)
from ..domain.models.device import DeviceStatus, DeviceType
from ..domain.models.query import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT, DeviceQuery
from ..di.container import get_container
from .dependencies import get_current_user

DEVICE_NOT_FOUND = "Device not found"

# Every device route requires a valid bearer token
router = APIRouter(tags=["devices"], dependencies=[Depends(get_current_user)])


def _device_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=DEVICE_NOT_FOUND)


@router.post(
    "",
    response_model=ApiResponse[DeviceResponse],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_device(request: DeviceCreateRequest) -> ApiResponse[DeviceResponse]:
    """
    Create a new device

    Omitted fields are filled with defaults before the device is stored.

    Raises:
        ConflictError: If the deviceId is already taken (409)
    """
    container = get_container()
    create_device_use_case = container.get(CreateDeviceUseCase)

    device = await create_device_use_case.execute(request)
    return ApiResponse(data=device)


@router.get("", response_model=ApiResponse[DeviceListResponse], response_model_exclude_none=True)
async def list_devices(
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    device_type: Optional[DeviceType] = Query(None, alias="type"),
    device_status: Optional[DeviceStatus] = Query(None, alias="status"),
    location: Optional[str] = Query(None, max_length=200),
    search: Optional[str] = Query(None, max_length=100),
) -> ApiResponse[DeviceListResponse]:
    """
    List devices with filtering and pagination

    Args:
        page: 1-based page number
        limit: Page size
        device_type: Exact type match
        device_status: Exact status match
        location: Exact match on location.address
        search: Case-insensitive substring match on name, type or address

    Returns:
        The requested page and the total number of matching devices
    """
    container = get_container()
    list_devices_use_case = container.get(ListDevicesUseCase)

    query = DeviceQuery(
        page=page,
        limit=limit,
        type=device_type.value if device_type else None,
        status=device_status.value if device_status else None,
        location=location,
        search=search,
    )
    result = await list_devices_use_case.execute(query)
    return ApiResponse(data=result)


# Registered before /{device_id} so "statistics" is never taken for an identifier
@router.get(
    "/statistics",
    response_model=ApiResponse[DeviceStatisticsResponse],
    response_model_exclude_none=True,
)
async def get_device_statistics() -> ApiResponse[DeviceStatisticsResponse]:
    """Total device count plus counts grouped by type, status and address"""
    container = get_container()
    statistics_use_case = container.get(GetDeviceStatisticsUseCase)

    statistics = await statistics_use_case.execute()
    return ApiResponse(data=statistics)


@router.post(
    "/batch",
    response_model=ApiResponse[List[DeviceResponse]],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_devices_batch(request: DeviceBatchCreateRequest) -> ApiResponse[List[DeviceResponse]]:
    """
    Create many devices in one request

    The batch stops at the first duplicate deviceId and the request fails with 409.
    """
    container = get_container()
    batch_use_case = container.get(CreateDevicesBatchUseCase)

    devices = await batch_use_case.execute(request)
    return ApiResponse(data=devices)


@router.get("/{device_id}", response_model=ApiResponse[DeviceResponse], response_model_exclude_none=True)
async def get_device(device_id: str) -> ApiResponse[DeviceResponse]:
    """
    Get a device by internal id or by deviceId

    Args:
        device_id: Internal id (tried first) or business deviceId

    Returns:
        The matching device
    """
    container = get_container()
    get_device_use_case = container.get(GetDeviceUseCase)

    device = await get_device_use_case.execute(device_id)
    if device is None:
        raise _device_not_found()
    return ApiResponse(data=device)


@router.put("/{device_id}", response_model=ApiResponse[DeviceResponse], response_model_exclude_none=True)
async def update_device(device_id: str, request: DeviceUpdateRequest) -> ApiResponse[DeviceResponse]:
    """
    Update a device

    Only the fields present in the body are changed; deviceId is immutable.
    """
    container = get_container()
    update_device_use_case = container.get(UpdateDeviceUseCase)

    device = await update_device_use_case.execute(device_id, request)
    if device is None:
        raise _device_not_found()
    return ApiResponse(data=device)


@router.delete("/{device_id}", response_model=ApiResponse, response_model_exclude_none=True)
async def delete_device(device_id: str) -> ApiResponse:
    container = get_container()
    delete_device_use_case = container.get(DeleteDeviceUseCase)

    deleted = await delete_device_use_case.execute(device_id)
    if not deleted:
        raise _device_not_found()
    return ApiResponse(message="Device deleted")


@router.patch(
    "/{device_id}/status",
    response_model=ApiResponse[DeviceResponse],
    response_model_exclude_none=True,
)
async def update_device_status(
    device_id: str,
    request: DeviceStatusUpdateRequest,
) -> ApiResponse[DeviceResponse]:
    """
    Change the status of a device

    Going online stamps lastOnlineTime; any other status clears it.
    """
    container = get_container()
    update_status_use_case = container.get(UpdateDeviceStatusUseCase)

    device = await update_status_use_case.execute(device_id, request.status)
    if device is None:
        raise _device_not_found()
    return ApiResponse(data=device)
