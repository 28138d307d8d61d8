import unittest
from datetime import datetime, timezone

from gdrivefetch.util.time import normalize_dt, parse_rfc3339, to_epoch_ns


class TestUtilTime(unittest.TestCase):
    def test_normalize_dt_rejects_naive(self) -> None:
        naive = datetime(2025, 1, 1, 12, 0, 0)
        with self.assertRaises(ValueError):
            normalize_dt(naive)

    def test_parse_rfc3339_z(self) -> None:
        dt = parse_rfc3339("2025-01-01T12:34:56Z")
        self.assertEqual(dt.tzinfo, timezone.utc)
        self.assertEqual(dt, datetime(2025, 1, 1, 12, 34, 56, tzinfo=timezone.utc))

    def test_parse_rfc3339_drive_milliseconds(self) -> None:
        dt = parse_rfc3339("2023-05-01T12:00:00.000Z")
        self.assertEqual(dt, datetime(2023, 5, 1, 12, 0, 0, tzinfo=timezone.utc))

    def test_parse_rfc3339_nanoseconds_truncated(self) -> None:
        dt = parse_rfc3339("2025-01-01T12:34:56.123456789Z")
        self.assertEqual(
            dt, datetime(2025, 1, 1, 12, 34, 56, 123456, tzinfo=timezone.utc)
        )

    def test_parse_rfc3339_single_fraction_digit(self) -> None:
        dt = parse_rfc3339("2025-01-01T12:34:56.5Z")
        self.assertEqual(dt.microsecond, 500000)

    def test_parse_rfc3339_offset_converts_to_utc(self) -> None:
        dt = parse_rfc3339("2025-01-01T12:34:56+09:00")
        self.assertEqual(dt.tzinfo, timezone.utc)
        # 12:34:56 JST == 03:34:56 UTC
        self.assertEqual(dt, datetime(2025, 1, 1, 3, 34, 56, tzinfo=timezone.utc))

    def test_parse_rfc3339_rejects_garbage(self) -> None:
        for value in ("", "yesterday", "2025-13-01T00:00:00Z", "2025-01-01T00:00:00"):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    parse_rfc3339(value)

    def test_to_epoch_ns(self) -> None:
        dt = datetime(1970, 1, 2, 0, 0, 0, tzinfo=timezone.utc)
        self.assertEqual(to_epoch_ns(dt), 86400 * 10**9)

    def test_to_epoch_ns_keeps_milliseconds_exact(self) -> None:
        dt = parse_rfc3339("2023-05-01T12:00:00.123Z")
        self.assertEqual(to_epoch_ns(dt), 1682942400123000000)

    def test_to_epoch_ns_rejects_naive(self) -> None:
        with self.assertRaises(ValueError):
            to_epoch_ns(datetime(2025, 1, 1))


if __name__ == "__main__":
    unittest.main()
