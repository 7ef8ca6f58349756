"""mtaarrivals - Real-time MTA subway arrivals in the terminal."""

__version__ = "0.1.0"

from .models import Arrival, FeedSnapshot, StationRecord
from .station_directory import StationDirectory, load_station_directory, load_stop_names
from .feed_client import FeedClient
from .extractor import extract_arrivals
from .resolver import filter_arrivals, resolve_station
from .presenter import render_arrivals
from .tracker import ArrivalsTracker
from .scheduler import RefreshScheduler
from .config import ArrivalsConfig

__all__ = [
    "ArrivalsTracker",
    "RefreshScheduler",
    "ArrivalsConfig",
    "FeedClient",
    "StationDirectory",
    "load_station_directory",
    "load_stop_names",
    "extract_arrivals",
    "resolve_station",
    "filter_arrivals",
    "render_arrivals",
    "Arrival",
    "FeedSnapshot",
    "StationRecord",
]
