"""Extraction of upcoming arrivals from GTFS-Realtime trip updates."""

import logging
from datetime import datetime
from typing import AbstractSet, Iterable, List

from google.transit import gtfs_realtime_pb2

from .models import Arrival

logger = logging.getLogger(__name__)


def extract_arrivals(
    entities: Iterable[gtfs_realtime_pb2.FeedEntity],
    now: datetime,
    allowed_routes: AbstractSet[str],
) -> List[Arrival]:
    """
    Walk feed entities and collect upcoming arrivals for the allowed routes.

    Args:
        entities: FeedEntity messages from a decoded feed.
        now: Reference time; arrivals strictly before it are dropped.
        allowed_routes: Route IDs to keep (e.g., {"1", "2", "3"}).

    Returns:
        List of Arrival objects in feed order. Ordering is left to the caller.
    """
    arrivals: List[Arrival] = []

    for entity in entities:
        if not entity.HasField("trip_update"):
            continue

        trip_update = entity.trip_update
        if not trip_update.HasField("trip"):
            continue

        route_id = trip_update.trip.route_id
        if not route_id or route_id not in allowed_routes:
            continue

        for stop_time_update in trip_update.stop_time_update:
            if not stop_time_update.HasField("arrival"):
                continue

            # 0 means the prediction has no timestamp
            timestamp = stop_time_update.arrival.time
            if timestamp == 0:
                continue

            try:
                arrival_time = datetime.fromtimestamp(timestamp, tz=now.tzinfo)
            except (OverflowError, OSError, ValueError):
                logger.debug(f"Skipping out-of-range arrival time {timestamp} at {stop_time_update.stop_id}")
                continue
            if arrival_time < now:
                continue

            stop_id = stop_time_update.stop_id
            if not stop_id:
                continue

            arrivals.append(Arrival(stop_id=stop_id, route_id=route_id, arrival_time=arrival_time))

    logger.debug(f"Extracted {len(arrivals)} upcoming arrivals")
    return arrivals
