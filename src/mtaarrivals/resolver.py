"""Resolution of a station query to the stop IDs it refers to."""

import logging
from typing import AbstractSet, FrozenSet, Iterable, List, Sequence

from .models import Arrival
from .station_directory import StationDirectory

logger = logging.getLogger(__name__)


def resolve_station(
    query: str,
    arrivals: Iterable[Arrival],
    directory: StationDirectory,
) -> FrozenSet[str]:
    """
    Decide which stop IDs a user query refers to.

    A query is treated as a stop ID only when that ID appears among the live
    arrivals; a stop ID that exists in the directory but has no arrivals right
    now falls through to the name lookup. Otherwise the query is looked up as
    a station name, which may map to several platform IDs (e.g., 116N, 116S).

    Args:
        query: Stop ID (e.g., "116N") or station name (e.g., "116 St").
        arrivals: Current arrivals from the feed.
        directory: Static station directory.

    Returns:
        Frozen set of stop IDs; empty if nothing matched.
    """
    if any(arrival.stop_id == query for arrival in arrivals):
        logger.debug(f"'{query}' matched a live stop ID")
        return frozenset({query})

    stop_ids = directory.ids_for(query)
    if stop_ids:
        logger.debug(f"'{query}' matched station name with stops {stop_ids}")
        return frozenset(stop_ids)

    logger.debug(f"'{query}' matched no stop ID or station name")
    return frozenset()


def filter_arrivals(arrivals: Sequence[Arrival], stop_ids: AbstractSet[str]) -> List[Arrival]:
    """Keep arrivals at any of the given stops, preserving input order."""
    return [arrival for arrival in arrivals if arrival.stop_id in stop_ids]
