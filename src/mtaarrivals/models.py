"""Data models for MTA arrivals."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Tuple


@dataclass(frozen=True)
class StationRecord:
    """One row of the static station table."""
    stop_id: str
    name: str


@dataclass(frozen=True)
class Arrival:
    """Represents a single upcoming arrival at a stop."""
    stop_id: str
    route_id: str
    arrival_time: datetime


@dataclass(frozen=True)
class FeedSnapshot:
    """All arrivals produced by one feed fetch."""
    fetched_at: datetime  # Reference time used for the future-only filter
    arrivals: Tuple[Arrival, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.arrivals)

    @property
    def stop_ids(self) -> frozenset:
        """Stop IDs present in this snapshot."""
        return frozenset(arrival.stop_id for arrival in self.arrivals)
