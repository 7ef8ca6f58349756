"""Text rendering of arrivals."""

from datetime import datetime
from typing import Iterable, List

from .models import Arrival
from .station_directory import StationDirectory

UNKNOWN_STATION = "(unknown)"
ROW_FORMAT = "{:<10} {:<8} {:<35} {}"
RULE = "-" * 80


def format_clock(dt: datetime) -> str:
    """Format a time on the 12-hour clock, e.g. '3:04 PM'."""
    return f"{dt.hour % 12 or 12}:{dt:%M %p}"


def format_timestamp(dt: datetime) -> str:
    """Format a time with seconds on the 12-hour clock, e.g. '3:04:05 PM'."""
    return f"{dt.hour % 12 or 12}:{dt:%M:%S %p}"


def sort_arrivals(arrivals: Iterable[Arrival]) -> List[Arrival]:
    """Order arrivals by time; equal times keep their input order."""
    return sorted(arrivals, key=lambda arrival: arrival.arrival_time)


def render_arrivals(arrivals: Iterable[Arrival], directory: StationDirectory) -> str:
    """
    Render arrivals as a fixed-width table.

    Args:
        arrivals: Arrivals to show, in any order.
        directory: Used to look up station names; unknown stops show a placeholder.

    Returns:
        The table text, ending with a total line.
    """
    ordered = sort_arrivals(arrivals)

    lines = [ROW_FORMAT.format("STOP_ID", "ROUTE", "STATION", "ARRIVAL_TIME"), RULE]
    for arrival in ordered:
        station_name = directory.name_for(arrival.stop_id) or UNKNOWN_STATION
        lines.append(
            ROW_FORMAT.format(
                arrival.stop_id,
                arrival.route_id,
                station_name,
                format_clock(arrival.arrival_time),
            )
        )
    lines.append("")
    lines.append(f"Total: {len(ordered)} upcoming arrivals")
    return "\n".join(lines)
