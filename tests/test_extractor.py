"""Tests for arrival extraction."""

import sys
import unittest
from datetime import timedelta
from pathlib import Path

# Add src to path so we can import mtaarrivals
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mtaarrivals.extractor import extract_arrivals

from feed_helpers import NOW, build_feed, ts

ROUTES = frozenset({"1", "2", "3"})


class TestExtractArrivals(unittest.TestCase):
    """Test filtering of trip updates into arrivals."""

    def extract(self, trips, routes=ROUTES):
        return extract_arrivals(build_feed(trips).entity, NOW, routes)

    def test_basic_extraction(self):
        arrivals = self.extract([("1", [("116N", ts(5)), ("110N", ts(7))])])

        self.assertEqual([a.stop_id for a in arrivals], ["116N", "110N"])
        self.assertEqual(arrivals[0].route_id, "1")
        self.assertEqual(arrivals[0].arrival_time, NOW + timedelta(minutes=5))

    def test_routes_outside_allow_list_are_dropped(self):
        arrivals = self.extract([("4", [("621N", ts(5))]), ("3", [("120S", ts(2))])])
        self.assertEqual([a.route_id for a in arrivals], ["3"])

    def test_past_arrivals_are_dropped(self):
        arrivals = self.extract([("2", [("120S", ts(-1)), ("127S", ts(4))])])
        self.assertEqual([a.stop_id for a in arrivals], ["127S"])

    def test_arrival_exactly_now_is_kept(self):
        # Only arrivals strictly before the reference time are dropped
        arrivals = self.extract([("1", [("116N", ts(0))])])
        self.assertEqual(len(arrivals), 1)
        self.assertEqual(arrivals[0].arrival_time, NOW)

    def test_arrival_one_second_before_now_is_dropped(self):
        feed = build_feed([("1", [("116N", ts(0) - 1)])])
        self.assertEqual(extract_arrivals(feed.entity, NOW, ROUTES), [])

    def test_missing_arrival_and_zero_timestamp_are_skipped(self):
        feed = build_feed([("1", [("116N", None), ("117N", ts(3))])])
        zero = feed.entity[0].trip_update.stop_time_update.add()
        zero.stop_id = "118N"
        zero.arrival.time = 0

        arrivals = extract_arrivals(feed.entity, NOW, ROUTES)
        self.assertEqual([a.stop_id for a in arrivals], ["117N"])

    def test_out_of_range_timestamp_is_skipped(self):
        arrivals = self.extract([("1", [("116N", 2 ** 62), ("116S", ts(4))])])
        self.assertEqual([a.stop_id for a in arrivals], ["116S"])

    def test_empty_stop_id_is_skipped(self):
        arrivals = self.extract([("1", [("", ts(3)), ("116S", ts(4))])])
        self.assertEqual([a.stop_id for a in arrivals], ["116S"])

    def test_entities_without_trip_update_or_trip_are_skipped(self):
        feed = build_feed([("1", [("116N", ts(3))])])
        vehicle = feed.entity.add()
        vehicle.id = "vehicle"
        vehicle.vehicle.stop_id = "116N"
        no_trip = feed.entity.add()
        no_trip.id = "no-trip"
        update = no_trip.trip_update.stop_time_update.add()
        update.stop_id = "116S"
        update.arrival.time = ts(2)

        arrivals = extract_arrivals(feed.entity, NOW, ROUTES)
        self.assertEqual([a.stop_id for a in arrivals], ["116N"])

    def test_never_emits_past_or_disallowed(self):
        trips = [
            ("1", [("116N", ts(-10)), ("116N", ts(1)), ("117N", ts(30))]),
            ("5", [("621N", ts(3))]),
            ("2", [("120S", ts(-0.5)), ("120S", ts(0.5))]),
        ]
        for arrival in self.extract(trips):
            self.assertGreaterEqual(arrival.arrival_time, NOW)
            self.assertIn(arrival.route_id, ROUTES)

    def test_input_is_not_mutated(self):
        feed = build_feed([("1", [("116N", ts(-5)), ("116S", ts(5))])])
        before = feed.SerializeToString()
        extract_arrivals(feed.entity, NOW, ROUTES)
        self.assertEqual(feed.SerializeToString(), before)


if __name__ == "__main__":
    unittest.main()
