"""Tests for arrival rendering."""

import sys
import unittest
from datetime import datetime, timedelta
from pathlib import Path

# Add src to path so we can import mtaarrivals
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mtaarrivals.models import Arrival
from mtaarrivals.presenter import format_clock, format_timestamp, render_arrivals, sort_arrivals
from mtaarrivals.station_directory import StationDirectory

from feed_helpers import NOW


def arrival(stop_id, route_id, minutes):
    return Arrival(stop_id=stop_id, route_id=route_id, arrival_time=NOW + timedelta(minutes=minutes))


class TestFormatting(unittest.TestCase):
    """Test 12-hour clock formatting."""

    def test_format_clock(self):
        self.assertEqual(format_clock(datetime(2026, 1, 15, 15, 4)), "3:04 PM")
        self.assertEqual(format_clock(datetime(2026, 1, 15, 0, 30)), "12:30 AM")
        self.assertEqual(format_clock(datetime(2026, 1, 15, 12, 0)), "12:00 PM")
        self.assertEqual(format_clock(datetime(2026, 1, 15, 9, 59)), "9:59 AM")

    def test_format_timestamp(self):
        self.assertEqual(format_timestamp(datetime(2026, 1, 15, 15, 4, 5)), "3:04:05 PM")


class TestRenderArrivals(unittest.TestCase):
    """Test the arrivals table."""

    def setUp(self):
        self.directory = StationDirectory.build([["id", "name"], ["127N", "Times Sq-42 St"]])

    def test_sorted_by_arrival_time(self):
        arrivals = [arrival("127N", "1", 9), arrival("127N", "2", 1), arrival("127N", "3", 5)]
        ordered = sort_arrivals(arrivals)
        times = [a.arrival_time for a in ordered]
        self.assertEqual(times, sorted(times))
        self.assertEqual([a.route_id for a in ordered], ["2", "3", "1"])

    def test_ties_keep_input_order(self):
        arrivals = [arrival("127N", "3", 4), arrival("127S", "1", 4), arrival("127N", "2", 4)]
        self.assertEqual([a.route_id for a in sort_arrivals(arrivals)], ["3", "1", "2"])

    def test_rendered_rows_keep_input_order_on_ties(self):
        arrivals = [arrival("127N", "3", 4), arrival("127S", "1", 4), arrival("120N", "2", 1), arrival("127N", "2", 4)]
        rows = render_arrivals(arrivals, self.directory).split("\n")[2:6]
        self.assertEqual([row.split()[:2] for row in rows], [["120N", "2"], ["127N", "3"], ["127S", "1"], ["127N", "2"]])

    def test_input_list_is_not_reordered(self):
        arrivals = [arrival("127N", "1", 9), arrival("127N", "2", 1)]
        render_arrivals(arrivals, self.directory)
        self.assertEqual([a.route_id for a in arrivals], ["1", "2"])

    def test_table_layout(self):
        output = render_arrivals([arrival("127N", "1", 4)], self.directory)
        lines = output.split("\n")

        self.assertEqual(lines[0], f"{'STOP_ID':<10} {'ROUTE':<8} {'STATION':<35} ARRIVAL_TIME")
        self.assertEqual(lines[1], "-" * 80)
        self.assertEqual(lines[2], f"{'127N':<10} {'1':<8} {'Times Sq-42 St':<35} 2:04 PM")
        self.assertEqual(lines[3], "")
        self.assertEqual(lines[4], "Total: 1 upcoming arrivals")

    def test_unknown_station_placeholder(self):
        output = render_arrivals([arrival("999X", "2", 1)], self.directory)
        self.assertIn(f"{'(unknown)':<35}", output)

    def test_empty_directory(self):
        output = render_arrivals([arrival("127N", "1", 1)], StationDirectory())
        self.assertIn("(unknown)", output)

    def test_no_arrivals(self):
        output = render_arrivals([], self.directory)
        self.assertTrue(output.endswith("Total: 0 upcoming arrivals"))


if __name__ == "__main__":
    unittest.main()
