"""
Unit tests for the device seeding script (no database).
"""
import random
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from device_inventory.domain.models.device import DeviceStatus, DeviceType
from device_inventory.scripts.seed_devices import generate_device, parse_args, seed_devices

NOW = datetime(2025, 3, 1, tzinfo=timezone.utc)


class TestGenerateDevice:

    def test_document_shape(self):
        document = generate_device(7, random.Random(1), NOW)

        assert document["deviceId"].endswith("00000007")
        assert document["type"] in {t.value for t in DeviceType}
        assert document["status"] in {s.value for s in DeviceStatus}
        assert set(document["location"]) == {"longitude", "latitude", "address"}
        assert {"model", "manufacturer", "productionDate"} <= set(document["specifications"])
        assert document["specifications"]["productionDate"] <= NOW
        assert document["createdAt"] == NOW

    def test_last_online_time_only_when_online(self):
        rng = random.Random(3)
        for number in range(1, 50):
            document = generate_device(number, rng, NOW)
            assert ("lastOnlineTime" in document) == (document["status"] == "online")

    def test_same_seed_same_output(self):
        assert generate_device(1, random.Random(42), NOW) == generate_device(1, random.Random(42), NOW)


class TestSeedDevices:

    def test_inserts_in_batches(self):
        collection = MagicMock()

        inserted = seed_devices(collection, count=25, batch_size=10, seed=5)

        assert inserted == 25
        sizes = [len(call.args[0]) for call in collection.insert_many.call_args_list]
        assert sizes == [10, 10, 5]
        device_ids = [doc["deviceId"] for call in collection.insert_many.call_args_list for doc in call.args[0]]
        assert len(set(device_ids)) == 25
        collection.delete_many.assert_not_called()

    def test_clear_first(self):
        collection = MagicMock()
        collection.delete_many.return_value = MagicMock(deleted_count=3)

        seed_devices(collection, count=1, batch_size=10, clear=True)

        collection.delete_many.assert_called_once_with({})

    def test_invalid_batch_size(self):
        with pytest.raises(ValueError):
            seed_devices(MagicMock(), count=10, batch_size=0)


def test_parse_args():
    args = parse_args(["--count", "500", "--batch-size", "50", "--clear"])
    assert args.count == 500
    assert args.batch_size == 50
    assert args.clear is True
