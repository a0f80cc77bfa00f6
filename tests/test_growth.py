"""Tests for growth and staleness analysis."""

import unittest
from datetime import date, datetime, timedelta, timezone

from gear_sizer.growth import (
    analyze_growth_trend,
    format_growth_summary,
    growth_warning_reason,
    is_measurement_stale,
    months_between,
    should_warn_growth,
)
from gear_sizer.models import FamilyMember, MeasurementEntry, Measurements

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)
MONTH = timedelta(days=30.4375)


def make_member(date_of_birth=date(2015, 1, 1), measured_at=None, history=None):
    return FamilyMember(
        id="kid",
        name="Astrid",
        date_of_birth=date_of_birth,
        gender="female",
        measurements=Measurements(
            height=140, weight=35, foot_length_left=22, foot_length_right=22,
            measured_at=measured_at,
        ),
        measurement_history=history or [],
    )


def entry(recorded_at, height):
    return MeasurementEntry(
        id=recorded_at.isoformat(), recorded_at=recorded_at, height=height,
        weight=35, foot_length_left=22, foot_length_right=22,
    )


class TestStaleness(unittest.TestCase):
    def test_recent_measurement_is_fresh(self):
        member = make_member(measured_at=NOW - timedelta(days=180))
        self.assertFalse(is_measurement_stale(member, NOW))

    def test_old_measurement_is_stale(self):
        member = make_member(measured_at=NOW - timedelta(days=200))
        self.assertTrue(is_measurement_stale(member, NOW))

    def test_six_average_months_boundary(self):
        # 6 * 30.4375 = 182.625 days
        just_inside = make_member(measured_at=NOW - timedelta(days=182.6))
        just_over = make_member(measured_at=NOW - timedelta(days=182.63))
        self.assertFalse(is_measurement_stale(just_inside, NOW))
        self.assertTrue(is_measurement_stale(just_over, NOW))

    def test_adults_are_never_stale(self):
        member = make_member(date_of_birth=date(1980, 5, 5), measured_at=NOW - timedelta(days=900))
        self.assertFalse(is_measurement_stale(member, NOW))

    def test_no_measurement_date(self):
        self.assertFalse(is_measurement_stale(make_member(), NOW))

    def test_naive_timestamps_treated_as_utc(self):
        member = make_member(measured_at=datetime(2025, 8, 1, 12, 0))
        self.assertTrue(is_measurement_stale(member, NOW))

    def test_months_between(self):
        self.assertAlmostEqual(months_between(NOW - MONTH * 3, NOW), 3)


class TestGrowthTrend(unittest.TestCase):
    def test_known_slope(self):
        start = datetime(2025, 1, 1, tzinfo=timezone.utc)
        history = [entry(start + MONTH * k, 120 + 0.5 * k) for k in range(8)]
        trend = analyze_growth_trend(history)
        self.assertTrue(trend.is_growing)
        self.assertAlmostEqual(trend.growth_rate_cm_per_month, 0.5, delta=0.05)

    def test_three_cm_in_six_months(self):
        start = datetime(2025, 3, 1, tzinfo=timezone.utc)
        history = [entry(start, 130), entry(start + timedelta(days=182), 133)]
        self.assertTrue(analyze_growth_trend(history).is_growing)

    def test_slow_growth(self):
        start = datetime(2025, 3, 1, tzinfo=timezone.utc)
        history = [entry(start, 130), entry(start + MONTH * 12, 132)]
        trend = analyze_growth_trend(history)
        self.assertFalse(trend.is_growing)
        self.assertGreater(trend.growth_rate_cm_per_month, 0)

    def test_order_does_not_matter(self):
        start = datetime(2025, 1, 1, tzinfo=timezone.utc)
        history = [entry(start + MONTH * k, 120 + 0.4 * k) for k in range(5)]
        forward = analyze_growth_trend(history)
        backward = analyze_growth_trend(list(reversed(history)))
        self.assertAlmostEqual(forward.growth_rate_cm_per_month, backward.growth_rate_cm_per_month)

    def test_needs_two_entries(self):
        trend = analyze_growth_trend([entry(NOW, 140)])
        self.assertFalse(trend.is_growing)
        self.assertEqual(trend.growth_rate_cm_per_month, 0)

    def test_identical_timestamps_are_flat(self):
        trend = analyze_growth_trend([entry(NOW, 140), entry(NOW, 150)])
        self.assertFalse(trend.is_growing)
        self.assertEqual(trend.growth_rate_cm_per_month, 0)


class TestGrowthWarning(unittest.TestCase):
    def setUp(self):
        start = NOW - MONTH * 6
        self.growing_history = [entry(start, 130), entry(start + MONTH * 6, 134)]

    def test_no_warning(self):
        member = make_member(measured_at=NOW - timedelta(days=30))
        self.assertIsNone(growth_warning_reason(member, NOW))
        self.assertFalse(should_warn_growth(member, NOW))

    def test_stale_only(self):
        member = make_member(measured_at=NOW - timedelta(days=365))
        self.assertEqual(growth_warning_reason(member, NOW), "stale")
        self.assertTrue(should_warn_growth(member, NOW))

    def test_growing_only(self):
        member = make_member(measured_at=NOW, history=self.growing_history)
        self.assertEqual(growth_warning_reason(member, NOW), "growing")

    def test_both(self):
        member = make_member(measured_at=NOW - timedelta(days=365), history=self.growing_history)
        self.assertEqual(growth_warning_reason(member, NOW), "both")

    def test_summary_mentions_rate_and_warning(self):
        member = make_member(measured_at=NOW, history=self.growing_history)
        summary = format_growth_summary(member, NOW)
        self.assertIn("Astrid (age 11)", summary)
        self.assertIn("Growth rate: 0.67 cm/month", summary)
        self.assertIn("Growing fast", summary)


if __name__ == "__main__":
    unittest.main()
