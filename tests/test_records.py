"""Tests for family data import/export."""

import json
import os
import tempfile
import unittest
from datetime import date, datetime, timezone

from gear_sizer.models import (
    AlpineSkiDetails,
    BindingInfo,
    ExtendedGearDetails,
    FamilyMember,
    GearItem,
    GearPhoto,
    MeasurementEntry,
    Measurements,
    SkiProfile,
)
from gear_sizer.records import (
    find_member,
    load_family,
    member_from_dict,
    parse_datetime,
    parse_family,
    save_family,
)

CAMEL_MEMBER = {
    "id": "m1",
    "name": "Ingrid",
    "dateOfBirth": "2014-02-20T00:00:00.000Z",
    "gender": "female",
    "measurements": {
        "height": 142,
        "weight": 34,
        "footLengthLeft": 22.1,
        "footLengthRight": 22.4,
        "headCircumference": 54,
        "measuredAt": "2025-10-01T08:30:00Z",
    },
    "measurementHistory": [
        {"id": "h1", "recordedAt": "2025-04-01T08:30:00Z", "height": 139,
         "weight": 32, "footLengthLeft": 21.6, "footLengthRight": 21.8},
    ],
    "skillLevels": {"nordic-classic": "advanced"},
}


class TestParsing(unittest.TestCase):
    def test_camel_case_member(self):
        member = member_from_dict(CAMEL_MEMBER)
        self.assertEqual(member.date_of_birth, date(2014, 2, 20))
        self.assertEqual(member.measurements.foot_length, 22.4)
        self.assertEqual(member.measurements.head_circumference, 54)
        self.assertEqual(member.measurements.measured_at, datetime(2025, 10, 1, 8, 30, tzinfo=timezone.utc))
        self.assertEqual(member.measurement_history[0].height, 139)
        self.assertEqual(member.skill_levels["nordic-classic"], "advanced")

    def test_parse_datetime_z_suffix(self):
        self.assertEqual(parse_datetime("2025-01-02T03:04:05Z").tzinfo, timezone.utc)
        self.assertIsNone(parse_datetime(None))

    def test_missing_field_names_record(self):
        data = {"members": [CAMEL_MEMBER, {"id": "m2", "name": "No Body"}]}
        with self.assertRaises(ValueError) as ctx:
            parse_family(data)
        self.assertIn("#1", str(ctx.exception))

    def test_unknown_skill_level_names_record(self):
        member = dict(CAMEL_MEMBER, skillLevels={"alpine": "pro"})
        with self.assertRaises(ValueError) as ctx:
            parse_family({"members": [member]})
        self.assertIn("#0", str(ctx.exception))
        self.assertIn("pro", str(ctx.exception))

    def test_unknown_detail_type(self):
        gear = {"id": "g1", "ownerId": "m1", "type": "ski", "condition": "good",
                "extendedDetails": {"type": "sled", "details": {}}}
        with self.assertRaises(ValueError):
            parse_family({"gear": [gear]})

    def test_camel_case_skate_details(self):
        gear = {"id": "g2", "ownerId": "m1", "type": "skate", "condition": "good",
                "extendedDetails": {"type": "skate", "details": {"sizeUS": 7.5, "width": "D"}}}
        _, items = parse_family({"gear": [gear]})
        self.assertEqual(items[0].extended_details.details.size_us, 7.5)


class TestFamilyFile(unittest.TestCase):
    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmp_dir.name, "nested", "family.json")

    def tearDown(self):
        self.tmp_dir.cleanup()

    def test_save_and_load(self):
        members = [FamilyMember(
            id="m1", name="Lars", date_of_birth=date(1982, 7, 9), gender="male",
            measurements=Measurements(
                height=182, weight=84, foot_length_left=28, foot_length_right=28.2,
                measured_at=datetime(2025, 11, 3, 10, 0, tzinfo=timezone.utc),
            ),
            measurement_history=[MeasurementEntry(
                id="h1", recorded_at=datetime(2024, 11, 3, 10, 0, tzinfo=timezone.utc),
                height=182, weight=86, foot_length_left=28, foot_length_right=28.2,
            )],
            skill_levels={"alpine": "expert"},
        )]
        gear = [GearItem(
            id="g1", owner_id="m1", sports=["alpine"], type="ski", brand="Atomic",
            model="Redster X9", size="170cm", condition="good", year=2023,
            photos=[GearPhoto(id="p1", type="labelView", url="photos/g1.jpg")],
            extended_details=ExtendedGearDetails(
                type="alpineSki",
                details=AlpineSkiDetails(
                    length_cm=170,
                    profile=SkiProfile(tip=121, waist=68, tail=103),
                    radius_m=15.5,
                    bindings=BindingInfo(brand="Atomic", model="X12 GW", din_range="4-12", din_setting=7),
                ),
            ),
        )]

        save_family(members, gear, self.path)
        loaded_members, loaded_gear = load_family(self.path)
        self.assertEqual(loaded_members, members)
        self.assertEqual(loaded_gear, gear)

    def test_saved_file_drops_empty_fields(self):
        member = member_from_dict(CAMEL_MEMBER)
        save_family([member], [], self.path)
        with open(self.path) as f:
            data = json.load(f)
        saved = data["members"][0]
        self.assertEqual(saved["date_of_birth"], "2014-02-20")
        self.assertNotIn("inseam", saved["measurements"])

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_family(os.path.join(self.tmp_dir.name, "missing.json"))


class TestFindMember(unittest.TestCase):
    def test_by_id_then_name(self):
        members = [member_from_dict(CAMEL_MEMBER)]
        self.assertIs(find_member(members, "m1"), members[0])
        self.assertIs(find_member(members, "ingrid"), members[0])
        self.assertIsNone(find_member(members, "nobody"))


if __name__ == "__main__":
    unittest.main()
