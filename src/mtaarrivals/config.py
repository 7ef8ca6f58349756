"""Configuration for the arrivals tracker."""

import math
from dataclasses import dataclass
from typing import FrozenSet, Optional

# MTA endpoint for the A Division (1, 2, 3, 4, 5, 6, S)
MTA_FEED_URL = "https://api-endpoint.mta.info/Dataservice/mtagtfsfeeds/nyct%2Fgtfs"

DEFAULT_ROUTES: FrozenSet[str] = frozenset({"1", "2", "3"})
REQUEST_TIMEOUT_SECONDS = 30
REFRESH_INTERVAL_SECONDS = 30
DEFAULT_STOPS_PATH = "gtfs_subway/stops.csv"


@dataclass(frozen=True)
class ArrivalsConfig:
    """Immutable settings for one run of the tracker."""
    station: Optional[str] = None  # Station name or stop ID; None shows everything
    watch: bool = False
    refresh_interval: float = REFRESH_INTERVAL_SECONDS
    routes: FrozenSet[str] = DEFAULT_ROUTES
    feed_url: str = MTA_FEED_URL
    timeout: float = REQUEST_TIMEOUT_SECONDS
    stops_path: str = DEFAULT_STOPS_PATH

    def __post_init__(self):
        if not math.isfinite(self.refresh_interval) or self.refresh_interval <= 0:
            raise ValueError("refresh_interval must be a positive number")
        # Accept any iterable of route IDs
        object.__setattr__(self, "routes", frozenset(self.routes))
