"""
Query composition for the devices collection.

Pure functions that turn a DeviceQuery into a MongoDB filter and build the
grouped-count aggregation pipelines used for statistics. Kept free of I/O so
the exact documents sent to the server can be asserted in unit tests.
"""

# Standard library imports
import re
from typing import Any, Dict, Iterable, List, Optional

# Local application imports
from ...domain.constants import DeviceFields
from ...domain.models.query import DeviceQuery

SEARCH_FIELDS = (DeviceFields.NAME, DeviceFields.TYPE, DeviceFields.LOCATION_ADDRESS)


def build_device_filter(query: DeviceQuery) -> Dict[str, Any]:
    """
    Compose the find/count filter for a device listing.

    type, status and location become exact-match predicates when non-empty;
    search becomes a case-insensitive substring match on name, type OR
    location.address. All predicates are ANDed (implicitly, as keys of one
    filter document).
    """
    mongo_filter: Dict[str, Any] = {}

    exact_matches = (
        (DeviceFields.TYPE, query.type),
        (DeviceFields.STATUS, query.status),
        (DeviceFields.LOCATION_ADDRESS, query.location),
    )
    for field_name, value in exact_matches:
        if value is not None and value != "":
            mongo_filter[field_name] = value

    if query.search:
        pattern = re.escape(query.search)
        mongo_filter["$or"] = [
            {field_name: {"$regex": pattern, "$options": "i"}}
            for field_name in SEARCH_FIELDS
        ]

    return mongo_filter


def build_group_count_pipeline(
    field_path: str,
    match: Optional[Dict[str, Any]] = None,
) -> List[Dict[str, Any]]:
    """Pipeline producing one {_id: value, count: n} row per distinct value."""
    pipeline: List[Dict[str, Any]] = []
    if match:
        pipeline.append({"$match": match})
    pipeline.append({"$group": {"_id": f"${field_path}", "count": {"$sum": 1}}})
    return pipeline


def address_present_match() -> Dict[str, Any]:
    return {DeviceFields.LOCATION_ADDRESS: {"$exists": True, "$ne": None}}


def aggregation_to_counts(rows: Iterable[Dict[str, Any]]) -> Dict[str, int]:
    """Reshape grouped-count rows into a mapping keyed by the group value."""
    counts: Dict[str, int] = {}
    for row in rows:
        key = row["_id"]
        # Documents missing the grouped field land in a null group
        counts[key if isinstance(key, str) else str(key)] = row["count"]
    return counts
