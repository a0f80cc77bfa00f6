"""Tests for shoe size conversion."""

import unittest

from gear_sizer.config import SIZE_SYSTEMS
from gear_sizer.shoe_size import (
    convert_shoe_size,
    format_number,
    format_shoe_size,
    from_cm,
    get_all_shoe_sizes,
    get_shoe_sizes_from_foot_length,
    get_size_system_label,
    round_half_up,
    round_to_increment,
    to_cm,
)


class TestRounding(unittest.TestCase):
    def test_halves_round_up(self):
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(3.5), 4)
        self.assertEqual(round_half_up(-2.5), -2)

    def test_round_to_half(self):
        self.assertEqual(round_to_increment(10.25, 0.5), 10.5)
        self.assertEqual(round_to_increment(10.2, 0.5), 10.0)

    def test_round_to_tenth(self):
        self.assertAlmostEqual(round_to_increment(27.46, 0.1), 27.5)


class TestConversion(unittest.TestCase):
    def test_cm_to_mondopoint(self):
        self.assertEqual(convert_shoe_size(27, "cm", "mondopoint"), 270)

    def test_mondopoint_is_integer(self):
        self.assertIsInstance(from_cm(27.46, "mondopoint"), int)
        self.assertEqual(from_cm(27.46, "mondopoint"), 275)

    def test_all_sizes_from_cm(self):
        sizes = get_all_shoe_sizes(27)
        # EU (27 + 1.5) * 1.5 = 42.75 -> 43, UK (27 - 22) * 3 = 15
        self.assertEqual(sizes.cm, 27)
        self.assertEqual(sizes.mondopoint, 270)
        self.assertEqual(sizes.eu, 43)
        self.assertEqual(sizes.uk, 15)
        self.assertEqual(sizes.us_men, 16)
        self.assertEqual(sizes.us_women, 17.5)

    def test_all_sizes_from_other_system(self):
        sizes = get_all_shoe_sizes(10, "us-men")
        self.assertEqual(sizes.cm, 25)
        self.assertEqual(sizes.uk, 9)
        self.assertEqual(sizes.us_women, 11.5)

    def test_foot_length_helper_matches_cm(self):
        self.assertEqual(get_shoe_sizes_from_foot_length(27.5), get_all_shoe_sizes(27.5, "cm"))

    def test_us_women_is_men_plus_one_and_a_half(self):
        self.assertEqual(convert_shoe_size(9, "us-men", "us-women"), 10.5)

    def test_round_trip_stays_close(self):
        for system in SIZE_SYSTEMS:
            for tenth in range(150, 351):
                cm = tenth / 10
                size = from_cm(cm, system)
                self.assertLessEqual(abs(to_cm(size, system) - cm), 1, f"{system} at {cm} cm")

    def test_as_dict_keys(self):
        sizes = get_all_shoe_sizes(27).as_dict()
        self.assertEqual(set(sizes), {"cm", "mondopoint", "eu", "uk", "us-men", "us-women"})

    def test_unknown_system_raises(self):
        with self.assertRaises(ValueError):
            convert_shoe_size(27, "cm", "jp")
        with self.assertRaises(ValueError):
            to_cm(27, "inches")


class TestFormatting(unittest.TestCase):
    def test_format_number_drops_trailing_zero(self):
        self.assertEqual(format_number(7.0), "7")
        self.assertEqual(format_number(10.5), "10.5")

    def test_format_shoe_size(self):
        self.assertEqual(format_shoe_size("us-men", 10.5), "US M 10.5")
        self.assertEqual(format_shoe_size("mondopoint", 275), "MP 275")

    def test_labels(self):
        self.assertEqual(get_size_system_label("us-women"), "US Women")
        self.assertEqual(get_size_system_label("cm"), "Centimeters")


if __name__ == "__main__":
    unittest.main()
