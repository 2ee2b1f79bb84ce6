"""
Tests for the simulated calendar and the temperature filter.
"""

import unittest
from datetime import date

from climate_samples import WESTERN_TEMPS
from state_paths.errors import AttributeLookupGap
from state_paths.path_types import AcceptedPath, ComfortRange, Interval, TripSettings
from state_paths.temperature_filter import filter_by_temp_range, walk_path
from state_paths.trip_calendar import SimulatedCalendar, add_interval, visited_months


def _flat(value):
    return tuple(float(value) for _ in range(12))


class TestInterval(unittest.TestCase):
    def test_parse(self):
        self.assertEqual(Interval.parse("1 week"), Interval(1, "week"))
        self.assertEqual(Interval.parse("2 Months"), Interval(2, "month"))
        self.assertEqual(Interval.parse("+10 days"), Interval(10, "day"))
        self.assertEqual(Interval.parse(" 1 year "), Interval(1, "year"))

    def test_parse_passes_intervals_through(self):
        interval = Interval(3, "week")
        self.assertIs(Interval.parse(interval), interval)

    def test_parse_errors(self):
        for text in ("week", "1 fortnight", "one week", "", "-1 week"):
            with self.assertRaises(ValueError, msg=text):
                Interval.parse(text)

    def test_str(self):
        self.assertEqual(str(Interval(1, "month")), "1 month")
        self.assertEqual(str(Interval(3, "week")), "3 weeks")


class TestCalendar(unittest.TestCase):
    def test_add_days_and_weeks(self):
        self.assertEqual(add_interval(date(2024, 4, 1), Interval(1, "week")), date(2024, 4, 8))
        self.assertEqual(add_interval(date(2024, 4, 29), Interval(1, "week")), date(2024, 5, 6))
        self.assertEqual(add_interval(date(2024, 2, 28), Interval(2, "day")), date(2024, 3, 1))

    def test_add_months_clamps_day(self):
        self.assertEqual(add_interval(date(2024, 1, 31), Interval(1, "month")), date(2024, 2, 29))
        self.assertEqual(add_interval(date(2023, 1, 31), Interval(1, "month")), date(2023, 2, 28))

    def test_add_months_across_year_end(self):
        self.assertEqual(add_interval(date(2024, 11, 1), Interval(3, "month")), date(2025, 2, 1))
        self.assertEqual(add_interval(date(2024, 6, 1), Interval(1, "year")), date(2025, 6, 1))

    def test_monthly_steps_from_april(self):
        trip = TripSettings.create(start_month=4, interval="1 month", year=2024)
        self.assertEqual(visited_months(3, trip), [4, 5, 6])

    def test_weekly_steps(self):
        trip = TripSettings.create(start_month=1, interval="1 week", year=2024)
        # Jan 1, 8, 15, 22, 29, then Feb 5
        self.assertEqual(visited_months(6, trip), [1, 1, 1, 1, 1, 2])

    def test_wraps_into_next_year(self):
        trip = TripSettings.create(start_month=11, interval="1 month", year=2024)
        self.assertEqual(visited_months(4, trip), [11, 12, 1, 2])

    def test_reset(self):
        cursor = SimulatedCalendar(TripSettings.create(start_month=4, interval="1 month"))
        cursor.advance()
        cursor.advance()
        self.assertEqual(cursor.month, 6)
        cursor.reset()
        self.assertEqual(cursor.month, 4)
        self.assertEqual(cursor.current.day, 1)

    def test_defaults_to_current_year(self):
        cursor = SimulatedCalendar(TripSettings.create(start_month=2))
        self.assertEqual(cursor.current, date(date.today().year, 2, 1))


class TestTripSettings(unittest.TestCase):
    def test_defaults(self):
        trip = TripSettings.create()
        self.assertEqual(trip.start_month, 1)
        self.assertEqual(trip.interval, Interval(1, "week"))
        self.assertEqual(trip.comfort_range, ComfortRange(0, 105))
        self.assertEqual(trip.state_ranges, {})

    def test_invalid_month(self):
        for month in (0, 13):
            with self.assertRaises(ValueError):
                TripSettings.create(start_month=month)

    def test_inverted_range(self):
        with self.assertRaises(ValueError):
            TripSettings.create(min_temp=70, max_temp=40)
        with self.assertRaises(ValueError):
            TripSettings.create(state_ranges={"OR": (60, 50)})

    def test_override_keys_are_upper_cased(self):
        trip = TripSettings.create(min_temp=40, max_temp=68, state_ranges={"ca": (20, 50)})
        self.assertEqual(trip.range_for("CA"), ComfortRange(20, 50))
        self.assertEqual(trip.range_for("OR"), ComfortRange(40, 68))


class TestTemperatureFilter(unittest.TestCase):
    def test_out_of_range_stop_rejects_path(self):
        temps = {"WA": _flat(50), "OR": _flat(50), "CA": _flat(70)}
        trip = TripSettings.create(min_temp=40, max_temp=68)

        result = filter_by_temp_range([("WA", "OR", "CA")], temps, trip)

        self.assertEqual(result.accepted, [])
        self.assertEqual(result.count, 0)
        self.assertEqual(result.rejected, 1)

    def test_state_override_takes_precedence(self):
        temps = {"WA": _flat(50), "OR": _flat(50), "CA": _flat(30)}
        trip = TripSettings.create(min_temp=40, max_temp=68, state_ranges={"CA": (20, 50)})

        result = filter_by_temp_range([("WA", "OR", "CA")], temps, trip)

        self.assertEqual(result.accepted, [AcceptedPath(("WA", "OR", "CA"), (50.0, 50.0, 30.0))])

    def test_override_can_also_reject(self):
        temps = {"WA": _flat(50), "OR": _flat(50), "CA": _flat(60)}
        trip = TripSettings.create(min_temp=40, max_temp=68, state_ranges={"CA": (20, 50)})

        self.assertEqual(filter_by_temp_range([("WA", "OR", "CA")], temps, trip).count, 0)

    def test_bounds_are_inclusive(self):
        temps = {"WA": _flat(40), "OR": _flat(68)}
        trip = TripSettings.create(min_temp=40, max_temp=68)

        self.assertEqual(filter_by_temp_range([("WA", "OR")], temps, trip).count, 1)

    def test_temperatures_follow_the_calendar(self):
        trip = TripSettings.create(start_month=4, interval="1 month", min_temp=40, max_temp=68)
        paths = [("NM", "AZ", "UT", "CO"), ("NM", "CO", "UT", "AZ")]

        result = filter_by_temp_range(paths, WESTERN_TEMPS, trip)

        # NM in April, AZ in May, UT in June, CO in July; the reverse ends in AZ in July (79)
        self.assertEqual(
            result.accepted, [AcceptedPath(("NM", "AZ", "UT", "CO"), (52.0, 66.0, 65.0, 65.0))]
        )
        self.assertEqual(result.rejected, 1)

    def test_each_path_starts_a_fresh_calendar(self):
        trip = TripSettings.create(start_month=5, interval="1 month", min_temp=40, max_temp=68)
        paths = [("WA", "OR", "CA"), ("CA", "OR", "WA"), ("WA", "OR", "CA")]

        result = filter_by_temp_range(paths, WESTERN_TEMPS, trip)

        # WA-OR-CA reaches CA in July (73); CA-OR-WA is fine
        self.assertEqual(result.accepted, [AcceptedPath(("CA", "OR", "WA"), (61.0, 60.0, 64.0))])
        self.assertEqual(result.rejected, 2)

    def test_preserves_input_order(self):
        temps = {code: _flat(50) for code in ("WA", "OR", "CA")}
        paths = [("CA", "OR", "WA"), ("WA", "OR", "CA")]

        result = filter_by_temp_range(paths, temps, TripSettings.create())

        self.assertEqual(result.paths, paths)

    def test_refiltering_accepted_paths(self):
        trip = TripSettings.create(start_month=4, interval="1 month", min_temp=40, max_temp=68)
        first = filter_by_temp_range([("NM", "AZ", "UT", "CO")], WESTERN_TEMPS, trip)
        second = filter_by_temp_range(first.accepted, WESTERN_TEMPS, trip)

        self.assertEqual(first, second)

    def test_missing_state_raises(self):
        with self.assertRaises(AttributeLookupGap):
            filter_by_temp_range([("OR", "TX")], WESTERN_TEMPS, TripSettings.create())

    def test_gap_after_rejection_is_not_reached(self):
        temps = {"OR": _flat(120)}
        result = filter_by_temp_range([("OR", "TX")], temps, TripSettings.create())
        self.assertEqual(result.rejected, 1)

    def test_walk_path(self):
        trip = TripSettings.create(start_month=4, interval="1 month", min_temp=40, max_temp=68)

        self.assertIsNone(walk_path(("NM", "CO", "UT", "AZ"), WESTERN_TEMPS, trip))
        accepted = walk_path(("NM", "AZ"), WESTERN_TEMPS, trip)
        self.assertEqual(accepted.stops(), [("NM", 52.0), ("AZ", 66.0)])

    def test_empty_input(self):
        result = filter_by_temp_range([], WESTERN_TEMPS, TripSettings.create())
        self.assertEqual(result.accepted, [])
        self.assertEqual(result.rejected, 0)
