"""Tests for the command-line interface."""

import io
import json
import os
import tempfile
import unittest
from contextlib import redirect_stdout

from gear_sizer.cli import main

FAMILY = {
    "members": [
        {
            "id": "m1",
            "name": "Erik",
            "date_of_birth": "1985-03-02",
            "gender": "male",
            "measurements": {
                "height": 180, "weight": 80,
                "foot_length_left": 27.5, "foot_length_right": 27.5,
                "foot_width_left": 10, "foot_width_right": 10.1,
                "us_shoe_size": 10,
            },
            "skill_levels": {"alpine": "intermediate"},
        },
    ],
    "gear": [
        {"id": "g1", "owner_id": "m1", "sports": ["alpine"], "type": "ski",
         "brand": "Atomic", "model": "Redster", "size": "170cm", "condition": "worn"},
        {"id": "g2", "owner_id": "m1", "sports": ["hockey"], "type": "skate",
         "brand": "Bauer", "model": "Supreme", "size": "8.5D", "condition": "fair"},
    ],
}


class TestCLI(unittest.TestCase):
    def setUp(self):
        self.db_fd, self.path = tempfile.mkstemp(suffix=".json")
        with os.fdopen(self.db_fd, "w") as f:
            json.dump(FAMILY, f)

    def tearDown(self):
        os.unlink(self.path)

    def run_cli(self, *argv):
        out = io.StringIO()
        with redirect_stdout(out):
            main(["--data", self.path, *argv])
        return out.getvalue()

    def test_convert_single(self):
        self.assertIn("27 Centimeters = 270 Mondopoint", self.run_cli("convert", "27", "--to", "mondopoint"))

    def test_convert_all(self):
        output = self.run_cli("convert", "10", "--from", "us-men")
        self.assertIn("US Women", output)
        self.assertIn("250", output)

    def test_members(self):
        output = self.run_cli("members")
        self.assertIn("Erik", output)
        self.assertIn("180cm", output)

    def test_size(self):
        output = self.run_cli("size", "erik", "--sport", "nordic-classic")
        self.assertIn("190-200 cm (recommended 193 cm)", output)

    def test_size_fischer(self):
        output = self.run_cli("size", "m1", "--sport", "nordic-skate", "--model", "fischer")
        self.assertIn("Chart:      Fischer", output)
        self.assertIn("FA value:", output)

    def test_unknown_member_exits(self):
        with self.assertRaises(SystemExit):
            self.run_cli("size", "nobody", "--sport", "alpine")

    def test_missing_data_file_exits(self):
        out = io.StringIO()
        with redirect_stdout(out), self.assertRaises(SystemExit):
            main(["--data", self.path + ".missing", "members"])
        self.assertIn("No family data found", out.getvalue())

    def test_bad_skill_level_exits(self):
        family = json.loads(json.dumps(FAMILY))
        family["members"][0]["skill_levels"] = {"alpine": "pro"}
        with open(self.path, "w") as f:
            json.dump(family, f)
        out = io.StringIO()
        with redirect_stdout(out), self.assertRaises(SystemExit):
            main(["--data", self.path, "din", "8", "--member", "m1"])
        self.assertIn("Unknown skill level for alpine", out.getvalue())

    def test_notifications_and_dismiss(self):
        output = self.run_cli("notifications")
        self.assertIn("Replace Erik's Skis", output)
        self.assertIn("Service Erik's Skates", output)

        output = self.run_cli("notifications", "--dismiss", "worn-g1", "--dismiss", "fair-g2")
        self.assertIn("No notifications", output)

    def test_din(self):
        self.assertIn("SAFE", self.run_cli("din", "7", "--member", "m1"))
        self.assertIn("TOO-HIGH", self.run_cli("din", "9.5", "--member", "m1"))

    def test_analyze(self):
        output = self.run_cli("analyze", "--sport", "alpine", "--type", "ski", "--photo", "ski.jpg",
                              "--photo-type", "labelView")
        self.assertIn("Brand:      Atomic", output)
        self.assertIn("Details:    170cm | 121/68/103 | R15.5m", output)
        self.assertIn("Confidence: 85%", output)

    def test_growth(self):
        self.assertIn("Erik (age", self.run_cli("growth", "m1"))


if __name__ == "__main__":
    unittest.main()
