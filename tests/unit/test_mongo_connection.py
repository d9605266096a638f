"""
Unit tests for MongoConnection connect/close and index bootstrap.
"""
import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import OperationFailure, ServerSelectionTimeoutError

from device_inventory.core.logging_config import mask_uri
from device_inventory.infrastructure.db.indexes import DEVICE_INDEXES, USER_INDEXES, ensure_indexes
from device_inventory.infrastructure.db.mongo_connection import MongoConnection


@pytest.fixture
def client():
    mock = MagicMock()
    mock.admin.command = AsyncMock(return_value={"ok": 1})
    return mock


class TestConnect:

    @pytest.mark.asyncio
    async def test_connect_succeeds_first_try(self, mock_settings, client):
        connection = MongoConnection(mock_settings, client=client)

        await connection.connect()

        assert connection.connected
        client.admin.command.assert_awaited_once_with("ping")

    @pytest.mark.asyncio
    async def test_connect_retries_then_succeeds(self, mock_settings, client):
        client.admin.command.side_effect = [ServerSelectionTimeoutError("down"), {"ok": 1}]
        connection = MongoConnection(mock_settings, client=client)

        await connection.connect()

        assert connection.connected
        assert client.admin.command.await_count == 2

    @pytest.mark.asyncio
    async def test_connect_gives_up(self, mock_settings, client):
        client.admin.command.side_effect = ServerSelectionTimeoutError("down")
        connection = MongoConnection(mock_settings, client=client)

        with pytest.raises(RuntimeError):
            await connection.connect()
        assert not connection.connected
        assert client.admin.command.await_count == mock_settings.mongo_connect_attempts

    @pytest.mark.asyncio
    async def test_close_stops_client(self, mock_settings, client):
        connection = MongoConnection(mock_settings, client=client)
        await connection.connect()

        await connection.close()

        client.close.assert_called_once()
        assert not connection.connected

    @pytest.mark.asyncio
    async def test_monitor_survives_unexpected_errors(self, mock_settings, client):
        connection = MongoConnection(mock_settings, client=client)
        connection.ping = AsyncMock(side_effect=[RuntimeError("boom"), True, asyncio.CancelledError()])

        await connection._monitor()

        assert connection.ping.await_count == 3
        assert connection.connected


class TestEnsureIndexes:

    @pytest.mark.asyncio
    async def test_creates_every_index(self):
        devices = MagicMock()
        devices.create_indexes = AsyncMock(side_effect=lambda indexes: [indexes[0].document["name"]])
        users = MagicMock()
        users.create_indexes = AsyncMock(side_effect=lambda indexes: [indexes[0].document["name"]])

        await ensure_indexes(devices, users)

        assert [call.args[0] for call in devices.create_indexes.call_args_list] == [[index] for index in DEVICE_INDEXES]
        assert [call.args[0] for call in users.create_indexes.call_args_list] == [[index] for index in USER_INDEXES]

    def test_default_driver_index_names(self):
        names = [index.document["name"] for index in DEVICE_INDEXES]
        assert names[0] == "deviceId_1"
        assert "type_1_status_1" in names
        assert "name_text" in names
        assert [index.document["name"] for index in USER_INDEXES] == ["username_1", "email_1"]

    @pytest.mark.asyncio
    async def test_conflicting_existing_index_does_not_abort(self):
        devices = MagicMock()
        devices.create_indexes = AsyncMock(side_effect=[
            OperationFailure("Index already exists with a different name", code=85),
        ] + [["ok"]] * (len(DEVICE_INDEXES) - 1))
        users = MagicMock()
        users.create_indexes = AsyncMock(return_value=["ok"])

        await ensure_indexes(devices, users)

        assert devices.create_indexes.await_count == len(DEVICE_INDEXES)

    @pytest.mark.asyncio
    async def test_other_index_failures_propagate(self):
        devices = MagicMock()
        devices.create_indexes = AsyncMock(side_effect=OperationFailure("not authorized", code=13))

        with pytest.raises(OperationFailure):
            await ensure_indexes(devices, MagicMock())

    def test_device_id_index_is_unique(self):
        device_id_index = DEVICE_INDEXES[0].document
        assert device_id_index["key"] == {"deviceId": 1}
        assert device_id_index["unique"] is True


def test_mask_uri_hides_credentials():
    assert mask_uri("mongodb://admin:s3cret@db:27017/x") == "mongodb://***:***@db:27017/x"
    assert mask_uri("mongodb://localhost:27017") == "mongodb://localhost:27017"
