"""
Unit tests for BaseContainer and the application wiring.
"""
import pytest

from device_inventory.application.use_cases.device import GetDeviceUseCase
from device_inventory.application.use_cases.auth import LoginUserUseCase
from device_inventory.di.base_container import BaseContainer
from device_inventory.di.container import DIContainer
from device_inventory.domain.repositories.device_repository import DeviceRepository
from device_inventory.infrastructure.db.mongo_connection import MongoConnection


class TestBaseContainer:

    def test_singleton_returned_as_is(self):
        container = BaseContainer()
        instance = object()
        container.register_singleton("thing", instance)
        assert container.get("thing") is instance

    def test_factory_called_per_get(self):
        container = BaseContainer()
        container.register_factory("thing", object)
        assert container.get("thing") is not container.get("thing")

    def test_unknown_key_raises(self):
        with pytest.raises(ValueError) as exc_info:
            BaseContainer().get(GetDeviceUseCase)
        assert "GetDeviceUseCase" in str(exc_info.value)


class TestDIContainer:

    def test_wires_use_cases_to_shared_repository(self, mock_env):
        # Motor clients are lazy; constructing one does not touch the network
        container = DIContainer()

        get_device = container.get(GetDeviceUseCase)
        login = container.get(LoginUserUseCase)

        assert isinstance(container.get(MongoConnection), MongoConnection)
        assert get_device.device_repository is container.get(DeviceRepository)
        assert login.user_repository is not None
