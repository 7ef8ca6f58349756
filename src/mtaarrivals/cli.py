"""Command-line entry point: ``mta-arrivals [station] [--watch]``."""

import argparse
import logging
import sys
from typing import List, Optional

from .config import DEFAULT_STOPS_PATH, REFRESH_INTERVAL_SECONDS, ArrivalsConfig
from .exceptions import DirectoryLoadError, UsageError
from .feed_client import FeedClient
from .scheduler import RefreshScheduler
from .station_directory import StationDirectory, load_station_directory
from .tracker import ArrivalsTracker

logger = logging.getLogger(__name__)

EPILOG = """examples:
  mta-arrivals                              # Show all arrivals
  mta-arrivals "116 St-Columbia University" # Filter by station name
  mta-arrivals 116N                         # Filter by stop ID
  mta-arrivals 116N --watch                 # Watch mode: continuous updates"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mta-arrivals",
        description="Fetch real-time arrival data for subway lines 1, 2, and 3.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("station", nargs="?", help="Station name or stop ID to filter by")
    parser.add_argument(
        "-w",
        "--watch",
        action="store_true",
        help=f"Watch mode: continuously update arrivals every {REFRESH_INTERVAL_SECONDS} seconds",
    )
    parser.add_argument("--stops", default=DEFAULT_STOPS_PATH, help="Path to the GTFS stops CSV")
    parser.add_argument(
        "--interval",
        type=float,
        default=REFRESH_INTERVAL_SECONDS,
        help="Seconds between refreshes in watch mode",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity")
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _load_directory(path: str) -> StationDirectory:
    try:
        return load_station_directory(path)
    except DirectoryLoadError as e:
        logger.warning(f"Could not load stop names from {path}: {e}")
        print(f"Warning: Could not load stop names: {e}")
        print("Will display stop IDs only.")
        return StationDirectory()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = ArrivalsConfig(
            station=args.station,
            watch=args.watch,
            refresh_interval=args.interval,
            stops_path=args.stops,
        )
    except ValueError as e:
        print(f"Error: {e}")
        return 2

    # Checked before any network activity
    if config.watch and not config.station:
        print("Error: watch mode requires a station name or stop ID")
        print("Usage: mta-arrivals [station] --watch")
        return 2

    directory = _load_directory(config.stops_path)
    client = FeedClient(feed_url=config.feed_url, timeout=config.timeout)
    tracker = ArrivalsTracker(client, directory, routes=config.routes)
    scheduler = RefreshScheduler(config, tracker)

    try:
        scheduler.run()
    except UsageError as e:
        print(f"Error: {e}")
        return 2
    except KeyboardInterrupt:
        print("\nStopped.")
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
