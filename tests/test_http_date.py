import unittest

from core.http_date import parse_rfc1123


class TestParseRfc1123(unittest.TestCase):
    def test_parses_gmt_date(self):
        self.assertEqual(
            parse_rfc1123("Mon, 02 Jan 2006 15:04:05 GMT"), 1136214245.0
        )

    def test_utc_zone_is_offset_zero(self):
        self.assertEqual(
            parse_rfc1123("Mon, 02 Jan 2006 15:04:05 UTC"), 1136214245.0
        )

    def test_rejects_missing_value(self):
        with self.assertRaises(ValueError):
            parse_rfc1123("")

    def test_rejects_rfc850_and_asctime(self):
        with self.assertRaises(ValueError):
            parse_rfc1123("Monday, 02-Jan-06 15:04:05 GMT")
        with self.assertRaises(ValueError):
            parse_rfc1123("Mon Jan  2 15:04:05 2006")

    def test_rejects_numeric_offset(self):
        with self.assertRaises(ValueError):
            parse_rfc1123("Mon, 02 Jan 2006 15:04:05 +0000")

    def test_rejects_single_digit_day(self):
        with self.assertRaises(ValueError):
            parse_rfc1123("Mon, 2 Jan 2006 15:04:05 GMT")

    def test_rejects_unknown_names(self):
        with self.assertRaises(ValueError):
            parse_rfc1123("Mun, 02 Jan 2006 15:04:05 GMT")
        with self.assertRaises(ValueError):
            parse_rfc1123("Mon, 02 Jab 2006 15:04:05 GMT")

    def test_accepts_single_digit_hour(self):
        self.assertEqual(
            parse_rfc1123("Mon, 02 Jan 2006 5:04:05 GMT"), 1136178245.0
        )

    def test_gmt_hour_offset(self):
        self.assertEqual(
            parse_rfc1123("Mon, 02 Jan 2006 18:04:05 GMT+3"), 1136214245.0
        )
        self.assertEqual(
            parse_rfc1123("Mon, 02 Jan 2006 12:04:05 GMT-3"), 1136214245.0
        )
        with self.assertRaises(ValueError):
            parse_rfc1123("Mon, 02 Jan 2006 15:04:05 GMT+24")

    def test_zone_abbreviations(self):
        for zone in ("EST", "CEST", "AKDT", "ChST", "WITA"):
            with self.subTest(zone=zone):
                self.assertEqual(
                    parse_rfc1123(f"Mon, 02 Jan 2006 15:04:05 {zone}"), 1136214245.0
                )
        for zone in ("ABCD", "ABCDE", "ABCDEFT", "Gmt", "GM"):
            with self.subTest(zone=zone):
                with self.assertRaises(ValueError):
                    parse_rfc1123(f"Mon, 02 Jan 2006 15:04:05 {zone}")

    def test_rejects_impossible_date(self):
        with self.assertRaises(ValueError):
            parse_rfc1123("Mon, 30 Feb 2006 15:04:05 GMT")


if __name__ == "__main__":
    unittest.main()
