import unittest

from utils.helpers import (clamp_fraction, format_time, fraction_from_position,
                           progress_percent, volume_tier, VOLUME_HIGH, VOLUME_LOW,
                           VOLUME_MUTED)


class TestFormatTime(unittest.TestCase):
    def test_zero(self):
        self.assertEqual(format_time(0), "0:00")

    def test_nan(self):
        self.assertEqual(format_time(float("nan")), "0:00")

    def test_minutes_and_seconds(self):
        self.assertEqual(format_time(125), "2:05")

    def test_fractional_seconds_are_truncated(self):
        self.assertEqual(format_time(59.9), "0:59")

    def test_long_tracks_keep_counting_minutes(self):
        self.assertEqual(format_time(3725), "62:05")

    def test_invalid_values(self):
        self.assertEqual(format_time(None), "0:00")
        self.assertEqual(format_time(-3), "0:00")
        self.assertEqual(format_time(float("inf")), "0:00")


class TestVolumeTier(unittest.TestCase):
    def test_tiers(self):
        self.assertEqual(volume_tier(0), VOLUME_MUTED)
        self.assertEqual(volume_tier(25), VOLUME_LOW)
        self.assertEqual(volume_tier(49), VOLUME_LOW)
        self.assertEqual(volume_tier(50), VOLUME_HIGH)
        self.assertEqual(volume_tier(75), VOLUME_HIGH)


class TestFractions(unittest.TestCase):
    def test_clamp(self):
        self.assertEqual(clamp_fraction(-0.5), 0.0)
        self.assertEqual(clamp_fraction(1.7), 1.0)
        self.assertEqual(clamp_fraction(0.25), 0.25)
        self.assertEqual(clamp_fraction(float("nan")), 0.0)

    def test_fraction_from_position(self):
        self.assertEqual(fraction_from_position(50, 200), 0.25)
        self.assertEqual(fraction_from_position(-10, 200), 0.0)
        self.assertEqual(fraction_from_position(250, 200), 1.0)
        self.assertEqual(fraction_from_position(10, 0), 0.0)

    def test_progress_percent(self):
        self.assertEqual(progress_percent(30000, 120000), 25.0)
        self.assertEqual(progress_percent(1000, 0), 0.0)
        self.assertEqual(progress_percent(1000, -1), 0.0)


if __name__ == '__main__':
    unittest.main()
