from __future__ import annotations

import datetime as dt
import unittest

from errday.util.datekey import (
    format_date_key,
    format_display_date,
    is_date_key,
    parse_date_key,
    shift_date_key,
)


class TestDateKeyContract(unittest.TestCase):
    def test_format_is_zero_padded(self) -> None:
        self.assertEqual(format_date_key(dt.date(2024, 1, 5)), "2024-01-05")
        self.assertEqual(format_date_key(dt.date(999, 12, 31)), "0999-12-31")

    def test_parse_rejects_malformed_keys(self) -> None:
        for bad in ("2024-1-5", "2024/01/05", "2024-02-30", "2023-02-29", "", "tomorrow"):
            with self.assertRaises(ValueError, msg=bad):
                parse_date_key(bad)
            self.assertFalse(is_date_key(bad))
        self.assertFalse(is_date_key(20240101))
        self.assertTrue(is_date_key("2024-02-29"))

    def test_shift_rolls_across_month_and_year(self) -> None:
        self.assertEqual(shift_date_key("2024-02-29", 1), "2024-03-01")
        self.assertEqual(shift_date_key("2024-03-01", -1), "2024-02-29")
        self.assertEqual(shift_date_key("2023-02-28", 1), "2023-03-01")
        self.assertEqual(shift_date_key("2024-12-31", 1), "2025-01-01")
        self.assertEqual(shift_date_key("2025-01-01", -1), "2024-12-31")

    def test_shift_is_invertible(self) -> None:
        key = "2023-12-25"
        for _ in range(800):
            self.assertEqual(shift_date_key(shift_date_key(key, 1), -1), key)
            key = shift_date_key(key, 1)

    def test_shift_ignores_dst_transitions(self) -> None:
        # US and EU DST switch days.
        self.assertEqual(shift_date_key("2024-03-10", 1), "2024-03-11")
        self.assertEqual(shift_date_key("2024-03-31", -1), "2024-03-30")
        self.assertEqual(shift_date_key("2024-10-27", 1), "2024-10-28")

    def test_shift_past_the_calendar_range_raises_value_error(self) -> None:
        self.assertEqual(shift_date_key("9999-12-30", 1), "9999-12-31")
        with self.assertRaises(ValueError):
            shift_date_key("9999-12-31", 1)
        with self.assertRaises(ValueError):
            shift_date_key("0001-01-01", -1)
        with self.assertRaises(ValueError):
            shift_date_key("2024-01-01", 10**7)

    def test_display_date_is_long_en_us(self) -> None:
        self.assertEqual(format_display_date("2024-01-01"), "Monday, January 1, 2024")
        self.assertEqual(format_display_date("2024-02-29"), "Thursday, February 29, 2024")


if __name__ == "__main__":
    unittest.main(verbosity=2)
