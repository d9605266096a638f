# Standard library imports
from dataclasses import dataclass, field
from typing import Dict, List, Optional

# Local application imports
from .device import Device

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


@dataclass
class DeviceQuery:
    """Filter and pagination for listing devices."""
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    type: Optional[str] = None
    status: Optional[str] = None
    location: Optional[str] = None
    search: Optional[str] = None

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("page must be >= 1")
        if not 1 <= self.limit <= MAX_LIMIT:
            raise ValueError(f"limit must be between 1 and {MAX_LIMIT}")

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


@dataclass
class DevicePage:
    """One page of devices plus the number of matches ignoring pagination."""
    items: List[Device]
    total: int


@dataclass
class DeviceStatistics:
    total: int
    by_type: Dict[str, int] = field(default_factory=dict)
    by_status: Dict[str, int] = field(default_factory=dict)
    by_location: Dict[str, int] = field(default_factory=dict)
