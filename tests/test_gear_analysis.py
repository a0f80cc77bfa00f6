"""Tests for gear photo analysis and label string parsing."""

import unittest

from gear_sizer.gear_analysis import (
    FALLBACK_NOTE,
    NO_PHOTOS_NOTE,
    GearPhotoAnalyzer,
    HeuristicGearAnalyzer,
    analyze_gear_photos,
    format_ski_details,
    parse_profile,
    parse_radius,
    parse_ski_size,
)
from gear_sizer.models import AlpineSkiDetails, GearAnalysisResult, GearPhoto, SkiProfile

LABEL_PHOTO = GearPhoto(id="p1", type="labelView", url="photos/label.jpg")
OTHER_PHOTO = GearPhoto(id="p2", type="other", url="photos/scratch.jpg")


class BrokenAnalyzer(GearPhotoAnalyzer):
    def analyze(self, photos, hints):
        raise ConnectionError("vision service unreachable")


class BrandOnlyAnalyzer(GearPhotoAnalyzer):
    def analyze(self, photos, hints):
        return GearAnalysisResult(confidence=0.9, brand="Rossignol")


class TestHeuristicAnalyzer(unittest.TestCase):
    def test_alpine_ski_with_label_photo(self):
        result = analyze_gear_photos([LABEL_PHOTO], {"sport": "alpine", "type": "ski"})
        self.assertEqual(result.confidence, 0.85)
        self.assertEqual(result.brand, "Atomic")
        self.assertEqual(result.extended_details.type, "alpineSki")
        self.assertEqual(result.extended_details.details.profile, SkiProfile(121, 68, 103))
        self.assertNotIn(NO_PHOTOS_NOTE, result.notes)

    def test_no_photos_lowers_confidence(self):
        result = analyze_gear_photos([], {"sport": "alpine", "type": "ski"})
        self.assertEqual(result.confidence, 0.3)
        self.assertIn(NO_PHOTOS_NOTE, result.notes)

    def test_other_photos_do_not_count(self):
        result = analyze_gear_photos([OTHER_PHOTO], {"type": "boot"})
        self.assertEqual(result.confidence, 0.3)

    def test_unknown_gear_capped(self):
        result = analyze_gear_photos([LABEL_PHOTO], {"type": "helmet"})
        self.assertEqual(result.confidence, 0.5)
        self.assertEqual(result.brand, "Unknown")

    def test_unknown_gear_without_photos(self):
        self.assertEqual(analyze_gear_photos([], {}).confidence, 0.3)

    def test_nordic_grip_by_style(self):
        classic = analyze_gear_photos([LABEL_PHOTO], {"sport": "nordic-classic", "type": "ski"})
        skate = analyze_gear_photos([LABEL_PHOTO], {"sport": "nordic-skate", "type": "ski"})
        self.assertEqual(classic.extended_details.details.grip, "skin")
        self.assertEqual(classic.extended_details.details.style, "classic")
        self.assertIsNone(skate.extended_details.details.grip)

    def test_skate_and_snowboard(self):
        skate = HeuristicGearAnalyzer().analyze([LABEL_PHOTO], {"type": "skate"})
        board = HeuristicGearAnalyzer().analyze([LABEL_PHOTO], {"type": "snowboard"})
        self.assertEqual(skate.extended_details.details.width, "D")
        self.assertEqual(board.extended_details.details.length_cm, 156)

    def test_failing_backend_falls_back(self):
        with self.assertLogs("gear_sizer.gear_analysis", level="ERROR"):
            result = analyze_gear_photos([LABEL_PHOTO], {"sport": "alpine", "type": "ski"}, BrokenAnalyzer())
        self.assertEqual(result.brand, "Atomic")
        self.assertIn(FALLBACK_NOTE, result.notes)

    def test_backend_result_gets_hints(self):
        result = analyze_gear_photos([LABEL_PHOTO], {"sport": "alpine", "type": "ski"}, BrandOnlyAnalyzer())
        self.assertEqual(result.brand, "Rossignol")
        self.assertEqual(result.sport, "alpine")
        self.assertEqual(result.type, "ski")


class TestLabelParsing(unittest.TestCase):
    def test_ski_size(self):
        self.assertEqual(parse_ski_size("170cm"), 170)
        self.assertEqual(parse_ski_size("175 cm"), 175)
        self.assertIsNone(parse_ski_size("long"))

    def test_profile(self):
        self.assertEqual(parse_profile("121/68/103"), SkiProfile(121, 68, 103))
        self.assertEqual(parse_profile(" 130-98-120 "), SkiProfile(130, 98, 120))
        self.assertIsNone(parse_profile("121/68"))

    def test_radius(self):
        self.assertEqual(parse_radius("R15.5"), 15.5)
        self.assertEqual(parse_radius("16m"), 16.0)
        self.assertIsNone(parse_radius("tight"))

    def test_format_details(self):
        details = AlpineSkiDetails(length_cm=170, profile=SkiProfile(121, 68, 103), radius_m=15.5)
        self.assertEqual(format_ski_details(details), "170cm | 121/68/103 | R15.5m")
        self.assertEqual(format_ski_details(AlpineSkiDetails(length_cm=160)), "160cm")


if __name__ == "__main__":
    unittest.main()
