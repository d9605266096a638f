# Standard library imports
from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Local application imports
from .device import Device


class LookupKey(str, Enum):
    """Which key matched when resolving a caller-supplied device identifier."""
    PRIMARY = "primary"      # store-assigned _id
    SECONDARY = "secondary"  # business deviceId
    NONE = "none"


@dataclass(frozen=True)
class DeviceLookup:
    device: Optional[Device]
    matched_by: LookupKey

    @property
    def found(self) -> bool:
        return self.device is not None

    @classmethod
    def not_found(cls) -> "DeviceLookup":
        return cls(device=None, matched_by=LookupKey.NONE)
