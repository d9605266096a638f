"""
Seed the devices collection with random but plausible IoT devices.

Usage:
    python -m device_inventory.scripts.seed_devices --count 100000 --batch-size 1000 --clear

Devices are written with blocking PyMongo in batches. deviceIds are derived
from the running number, so re-running without --clear fails on the first
duplicate.
"""
# Standard library imports
import argparse
import logging
import random
import string
import sys
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

# External package imports
from dotenv import load_dotenv
from pymongo.errors import PyMongoError

# Local application imports
from ..core.config import get_settings
from ..core.logging_config import configure_logging
from ..domain.constants import DeviceFields, LocationFields, SpecificationFields
from ..domain.models.device import DeviceStatus, DeviceType
from ..infrastructure.db.mongo_connection import DEVICE_COLLECTION
from ..utils.datetime_utils import utc_now
from ..utils.db import close_client, get_collection

logger = logging.getLogger(__name__)

DEFAULT_COUNT = 100_000
DEFAULT_BATCH_SIZE = 1000

# Manufacturer -> device types it ships
MANUFACTURER_SPECIALTIES: Dict[str, List[DeviceType]] = {
    "Huawei": [DeviceType.GATEWAY, DeviceType.CONTROLLER, DeviceType.CAMERA],
    "Xiaomi": [DeviceType.SENSOR, DeviceType.GATEWAY],
    "Hikvision": [DeviceType.CAMERA, DeviceType.SENSOR],
    "Dahua": [DeviceType.CAMERA, DeviceType.OTHER],
    "Siemens": [DeviceType.SENSOR, DeviceType.CONTROLLER],
    "Schneider": [DeviceType.SENSOR, DeviceType.CONTROLLER],
    "Omron": [DeviceType.SENSOR, DeviceType.OTHER],
    "Honeywell": [DeviceType.SENSOR, DeviceType.CONTROLLER],
}

MODEL_PREFIXES: Dict[DeviceType, str] = {
    DeviceType.SENSOR: "SENS",
    DeviceType.CAMERA: "CAM",
    DeviceType.GATEWAY: "GTW",
    DeviceType.CONTROLLER: "CTRL",
    DeviceType.OTHER: "DEV",
}

PROTOCOLS = ["MQTT", "CoAP", "HTTP", "Modbus", "BACnet", "ZigBee", "LoRaWAN", "NB-IoT"]
POWER_SUPPLIES = ["AC 220V", "DC 24V", "DC 12V", "Battery"]
IP_RATINGS = ["IP65", "IP66", "IP67", "IP68"]
MAINTENANCE_CYCLES = ["30 days", "60 days", "90 days", "180 days", "365 days"]

CITIES = ["Berlin", "Shenzhen", "Austin", "Lyon", "Osaka", "Toronto", "Pune", "Melbourne"]
DEPLOYMENT_SCENARIOS = [
    "Factory Floor",
    "Smart Warehouse",
    "Office Building",
    "Data Center",
    "Greenhouse",
    "Transit Hub",
    "Hospital",
    "School",
    "Shopping Mall",
]


def _alphanumeric(rng: random.Random, length: int) -> str:
    return "".join(rng.choices(string.ascii_uppercase + string.digits, k=length))


def _days_ago(rng: random.Random, now: datetime, max_days: int) -> datetime:
    return now - timedelta(days=rng.uniform(0, max_days))


def generate_specifications(
    rng: random.Random,
    device_type: DeviceType,
    manufacturer: str,
    now: datetime,
) -> Dict[str, Any]:
    specifications = {
        SpecificationFields.MODEL: f"{MODEL_PREFIXES[device_type]}-{_alphanumeric(rng, 6)}",
        SpecificationFields.MANUFACTURER: manufacturer,
        SpecificationFields.PRODUCTION_DATE: _days_ago(rng, now, 730),
        "protocol": rng.choice(PROTOCOLS),
        "powerSupply": rng.choice(POWER_SUPPLIES),
        "ipRating": rng.choice(IP_RATINGS),
        "operatingTemperature": "-20°C ~ 60°C",
        "dimensions": f"{rng.randint(50, 300)}x{rng.randint(50, 300)}x{rng.randint(20, 100)}mm",
    }
    if device_type == DeviceType.SENSOR:
        specifications.update({
            "measurementRange": "-40°C ~ 120°C",
            "accuracy": "±0.5°C",
            "responseTime": "< 2s",
        })
    elif device_type == DeviceType.CAMERA:
        specifications.update({
            "resolution": rng.choice(["1080P", "2K", "4K"]),
            "fieldOfView": rng.choice(["120°", "130°", "140°"]),
            "nightVision": rng.choice(["10m", "15m", "20m"]),
            "storageSupport": "SD Card, NVR",
        })
    return specifications


def generate_device(number: int, rng: random.Random, now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Build one device document ready for insertion.

    Args:
        number: Running number, encoded into the deviceId
        rng: Random source (seed it for reproducible output)
        now: Reference time for all generated dates
    """
    now = now or utc_now()
    manufacturer = rng.choice(list(MANUFACTURER_SPECIALTIES))
    device_type = rng.choice(MANUFACTURER_SPECIALTIES[manufacturer])
    status = rng.choice(list(DeviceStatus))

    document = {
        DeviceFields.DEVICE_ID: f"{MODEL_PREFIXES[device_type]}{number:08d}",
        DeviceFields.NAME: f"{manufacturer} {device_type.value}-{_alphanumeric(rng, 4)}",
        DeviceFields.TYPE: device_type.value,
        DeviceFields.STATUS: status.value,
        DeviceFields.LOCATION: {
            LocationFields.LONGITUDE: round(rng.uniform(-180, 180), 6),
            LocationFields.LATITUDE: round(rng.uniform(-90, 90), 6),
            LocationFields.ADDRESS: f"{rng.choice(CITIES)} {rng.choice(DEPLOYMENT_SCENARIOS)}",
        },
        DeviceFields.SPECIFICATIONS: generate_specifications(rng, device_type, manufacturer, now),
        DeviceFields.LAST_MAINTENANCE_TIME: _days_ago(rng, now, 365),
        DeviceFields.DEPLOYMENT_DATE: _days_ago(rng, now, 365),
        DeviceFields.WARRANTY_EXPIRY_DATE: now + timedelta(days=rng.uniform(1, 3 * 365)),
        DeviceFields.FIRMWARE_VERSION: f"v{rng.randint(0, 5)}.{rng.randint(0, 20)}.{rng.randint(0, 50)}",
        DeviceFields.MAINTENANCE_CYCLE: rng.choice(MAINTENANCE_CYCLES),
        DeviceFields.CREATED_AT: now,
        DeviceFields.UPDATED_AT: now,
    }
    # Only online devices carry a last-online timestamp
    if status == DeviceStatus.ONLINE:
        document[DeviceFields.LAST_ONLINE_TIME] = _days_ago(rng, now, 30)
    return document


def seed_devices(collection, count: int, batch_size: int, clear: bool = False, seed: Optional[int] = None) -> int:
    """
    Insert count generated devices in batches of batch_size.

    Returns:
        Number of devices inserted
    """
    if count < 0 or batch_size < 1:
        raise ValueError("count must be >= 0 and batch_size >= 1")

    rng = random.Random(seed)
    if clear:
        deleted = collection.delete_many({}).deleted_count
        logger.info(f"Removed {deleted} existing devices")

    inserted = 0
    for start in range(0, count, batch_size):
        now = utc_now()
        size = min(batch_size, count - start)
        batch = [generate_device(start + offset + 1, rng, now) for offset in range(size)]
        collection.insert_many(batch, ordered=True)
        inserted += size
        logger.info(f"Inserted {inserted}/{count} devices")
    return inserted


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the devices collection with random IoT devices")
    parser.add_argument("--count", "-n", type=int, default=DEFAULT_COUNT, help="Number of devices to generate")
    parser.add_argument("--batch-size", "-b", type=int, default=DEFAULT_BATCH_SIZE, help="Devices per insert_many call")
    parser.add_argument("--clear", action="store_true", help="Delete all existing devices first")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible data")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    configure_logging(get_settings().log_level)
    args = parse_args(argv)

    try:
        collection = get_collection(DEVICE_COLLECTION)
        seed_devices(collection, args.count, args.batch_size, clear=args.clear, seed=args.seed)
    except (PyMongoError, RuntimeError, ValueError) as e:
        logger.error(f"Seeding failed: {e}")
        return 1
    finally:
        close_client()

    logger.info("Device seeding complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
