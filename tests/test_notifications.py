"""Tests for gear notifications."""

import unittest
from datetime import date

from gear_sizer.models import FamilyMember, GearItem, Measurements
from gear_sizer.notifications import filter_dismissed, format_notifications, generate_notifications


def make_gear(gear_id, condition="good", year=None, gear_type="ski", owner_id="m1"):
    return GearItem(
        id=gear_id, owner_id=owner_id, sports=["alpine"], type=gear_type,
        brand="Atomic", model="Redster", size="170cm", condition=condition, year=year,
    )


class TestGenerateNotifications(unittest.TestCase):
    def setUp(self):
        self.members = [FamilyMember(
            id="m1", name="Emma", date_of_birth=date(2012, 4, 1), gender="female",
            measurements=Measurements(height=150, weight=40, foot_length_left=23, foot_length_right=23),
        )]

    def test_worn_item(self):
        notifications = generate_notifications(self.members, [make_gear("g1", "worn")], current_year=2026)
        self.assertEqual(len(notifications), 1)
        n = notifications[0]
        self.assertEqual(n.id, "worn-g1")
        self.assertEqual(n.type, "replace")
        self.assertEqual(n.title, "Replace Emma's Skis")
        self.assertEqual(n.gear_item_id, "g1")
        self.assertEqual(n.member_id, "m1")

    def test_fair_item(self):
        notifications = generate_notifications(self.members, [make_gear("g2", "fair")], current_year=2026)
        self.assertEqual([(n.id, n.type) for n in notifications], [("fair-g2", "service")])
        self.assertIn("fair condition", notifications[0].body)

    def test_good_item_is_quiet(self):
        self.assertEqual(generate_notifications(self.members, [make_gear("g3")], current_year=2026), [])

    def test_old_gear_threshold_is_inclusive(self):
        at_threshold = make_gear("g4", year=2019)
        below = make_gear("g5", year=2020)
        notifications = generate_notifications(self.members, [at_threshold, below], current_year=2026)
        self.assertEqual([n.id for n in notifications], ["old-g4"])
        self.assertEqual(notifications[0].title, "Check Emma's 2019 Skis")
        self.assertIn("7 years old", notifications[0].body)

    def test_threshold_depends_on_type(self):
        boot = make_gear("b1", year=2021, gear_type="boot")
        self.assertEqual(len(generate_notifications(self.members, [boot], current_year=2026)), 1)

    def test_one_item_can_raise_two(self):
        notifications = generate_notifications(self.members, [make_gear("g6", "worn", year=2010)], current_year=2026)
        self.assertEqual([n.id for n in notifications], ["worn-g6", "old-g6"])

    def test_priority_order(self):
        gear = [
            make_gear("a", year=2000),
            make_gear("b", "fair"),
            make_gear("c", "worn"),
            make_gear("d", "worn"),
        ]
        notifications = generate_notifications(self.members, gear, current_year=2026)
        self.assertEqual([n.id for n in notifications], ["worn-c", "worn-d", "fair-b", "old-a"])

    def test_regeneration_is_identical(self):
        gear = [make_gear("g1", "worn"), make_gear("g2", "fair", year=2015)]
        first = generate_notifications(self.members, gear, current_year=2026)
        second = generate_notifications(self.members, gear, current_year=2026)
        self.assertEqual(first, second)

    def test_unknown_owner(self):
        notifications = generate_notifications([], [make_gear("g1", "worn", owner_id="ghost")], current_year=2026)
        self.assertEqual(notifications[0].title, "Replace Unknown's Skis")

    def test_filter_dismissed(self):
        gear = [make_gear("g1", "worn"), make_gear("g2", "fair")]
        notifications = generate_notifications(self.members, gear, current_year=2026)
        remaining = filter_dismissed(notifications, ["worn-g1"])
        self.assertEqual([n.id for n in remaining], ["fair-g2"])


class TestFormatNotifications(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(format_notifications([]), "No notifications. All gear looks good.")

    def test_lists_titles(self):
        member = FamilyMember(
            id="m1", name="Emma", date_of_birth=date(2012, 4, 1), gender="female",
            measurements=Measurements(height=150, weight=40, foot_length_left=23, foot_length_right=23),
        )
        text = format_notifications(generate_notifications([member], [make_gear("g1", "worn")], current_year=2026))
        self.assertIn("Notifications (1)", text)
        self.assertIn("Replace Emma's Skis", text)
        self.assertIn("Atomic Redster Skis is worn out", text)


if __name__ == "__main__":
    unittest.main()
