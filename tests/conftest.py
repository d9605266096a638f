"""
Shared pytest fixtures for device inventory tests.
"""
import os
from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_device_db",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "LOG_LEVEL": "WARNING",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.mongo_server_selection_timeout_ms = 100
    mock.mongo_socket_timeout_ms = 100
    mock.mongo_retry_delay_seconds = 0
    mock.mongo_connect_attempts = 2
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 1440
    mock.log_level = "WARNING"
    mock.allowed_origins = ["http://localhost:3000"]

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("device_inventory.core.config.get_settings", return_value=mock), patch(
        "device_inventory.core.security.get_settings", return_value=mock
    ):
        yield mock
