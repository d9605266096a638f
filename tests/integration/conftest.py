"""
Fixtures for API tests: the full FastAPI app with a mocked DI container (no real DB).
"""
from contextlib import ExitStack
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from device_inventory.application.dto.user_dto import UserResponse
from device_inventory.application.use_cases.auth import (
    GetCurrentUserUseCase,
    LoginUserUseCase,
    RegisterUserUseCase,
)
from device_inventory.application.use_cases.device import (
    CreateDeviceUseCase,
    CreateDevicesBatchUseCase,
    DeleteDeviceUseCase,
    GetDeviceStatisticsUseCase,
    GetDeviceUseCase,
    ListDevicesUseCase,
    UpdateDeviceStatusUseCase,
    UpdateDeviceUseCase,
)
from device_inventory.infrastructure.db.mongo_connection import MongoConnection

USE_CASES = (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
    CreateDeviceUseCase,
    CreateDevicesBatchUseCase,
    GetDeviceUseCase,
    ListDevicesUseCase,
    UpdateDeviceUseCase,
    DeleteDeviceUseCase,
    UpdateDeviceStatusUseCase,
    GetDeviceStatisticsUseCase,
)

# Every module that resolved get_container at import time
CONTAINER_USERS = (
    "device_inventory.main",
    "device_inventory.api.dependencies",
    "device_inventory.api.auth_controller",
    "device_inventory.api.device_controller",
    "device_inventory.api.health_controller",
)

AUTH_TOKEN = "valid.jwt.token"


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {AUTH_TOKEN}"}


@pytest.fixture
def use_cases():
    """One AsyncMock per use case, keyed by class."""
    mocks = {use_case: AsyncMock(spec=use_case) for use_case in USE_CASES}
    mocks[GetCurrentUserUseCase].execute.return_value = UserResponse(
        user_id="usr-1",
        username="alice",
        role="user",
    )
    return mocks


@pytest.fixture
def mock_connection():
    connection = MagicMock(spec=MongoConnection)
    connection.connect = AsyncMock()
    connection.close = AsyncMock()
    connection.connected = True
    return connection


@pytest.fixture
def mock_container(use_cases, mock_connection):
    container = MagicMock()
    registry = {**use_cases, MongoConnection: mock_connection}
    container.get.side_effect = lambda key: registry[key]
    return container


def _client(mock_container, raise_server_exceptions=True):
    from device_inventory.main import app

    with ExitStack() as stack:
        for module in CONTAINER_USERS:
            stack.enter_context(patch(f"{module}.get_container", return_value=mock_container))
        stack.enter_context(patch("device_inventory.main.ensure_indexes", new=AsyncMock()))
        with TestClient(app, raise_server_exceptions=raise_server_exceptions) as c:
            yield c


@pytest.fixture
def client(mock_container):
    """Create test client with mocked container."""
    yield from _client(mock_container)


@pytest.fixture
def lenient_client(mock_container):
    """Test client that returns 500 responses instead of re-raising server errors."""
    yield from _client(mock_container, raise_server_exceptions=False)
