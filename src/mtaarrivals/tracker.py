"""Main arrivals tracker: one fetch, extract and resolve pass."""

import logging
from datetime import datetime
from typing import AbstractSet, Callable, List, Optional

from .config import DEFAULT_ROUTES
from .exceptions import NoMatchError
from .extractor import extract_arrivals
from .feed_client import FeedClient
from .models import Arrival, FeedSnapshot
from .resolver import filter_arrivals, resolve_station
from .station_directory import StationDirectory

logger = logging.getLogger(__name__)


class ArrivalsTracker:
    """
    Tracks upcoming arrivals for a set of subway routes.

    This class provides methods to:
    - Fetch a fresh snapshot of upcoming arrivals
    - Narrow a snapshot down to one station by name or stop ID
    """

    def __init__(
        self,
        client: FeedClient,
        directory: StationDirectory,
        routes: AbstractSet[str] = DEFAULT_ROUTES,
        now: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize the tracker.

        Args:
            client: Feed client used for every fetch.
            directory: Station directory for name lookups.
            routes: Route IDs to keep.
            now: Clock returning the reference time for each fetch.
        """
        self.client = client
        self.directory = directory
        self.routes = frozenset(routes)
        self._now = now

    def fetch_snapshot(self) -> FeedSnapshot:
        """
        Fetch the feed and extract upcoming arrivals.

        Raises:
            FeedError: If the feed cannot be fetched or decoded.
        """
        fetched_at = self._now()
        entities = self.client.fetch()
        arrivals = extract_arrivals(entities, fetched_at, self.routes)
        logger.info(f"Fetched {len(arrivals)} upcoming arrivals for routes {sorted(self.routes)}")
        return FeedSnapshot(fetched_at=fetched_at, arrivals=tuple(arrivals))

    def arrivals_for_station(self, query: str, snapshot: FeedSnapshot) -> List[Arrival]:
        """
        Get the arrivals in a snapshot for a station name or stop ID.

        Raises:
            NoMatchError: If the query resolves to no stops or no stop has arrivals.
        """
        stop_ids = resolve_station(query, snapshot.arrivals, self.directory)
        matched = filter_arrivals(snapshot.arrivals, stop_ids)
        if not matched:
            raise NoMatchError(query)
        return matched

    def get_arrivals(self, query: Optional[str] = None) -> List[Arrival]:
        """Fetch a snapshot and return the arrivals for ``query``, or all of them."""
        snapshot = self.fetch_snapshot()
        if not query:
            return list(snapshot.arrivals)
        return self.arrivals_for_station(query, snapshot)
