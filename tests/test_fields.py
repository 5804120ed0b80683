# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from trackr.errors import InvalidDate
from trackr.fields import (
    date_range,
    list_field_or_none,
    parse_json_field,
    parse_date,
    parse_list_field,
    serialize_list_field,
    shift_date,
    utc_now,
    week_bounds,
)


class TestListField(unittest.TestCase):
    def test_valid_list(self):
        self.assertEqual(parse_list_field('["a", "b"]'), (["a", "b"], True))

    def test_empty_list_is_set(self):
        self.assertEqual(parse_list_field("[]"), ([], True))

    def test_null_and_malformed_are_unset(self):
        for raw in (None, "", "not json", '{"a": 1}', '"text"'):
            values, ok = parse_list_field(raw)
            self.assertFalse(ok, raw)
            self.assertEqual(values, [])

    def test_list_field_or_none(self):
        self.assertIsNone(list_field_or_none("[broken"))
        self.assertEqual(list_field_or_none('["caffeine"]'), ["caffeine"])

    def test_serialize_keeps_unicode(self):
        self.assertEqual(serialize_list_field(["café"]), '["café"]')
        self.assertIsNone(serialize_list_field(None))

    def test_parse_json_field_tolerates_garbage(self):
        self.assertEqual(parse_json_field('{"foods": []}'), {"foods": []})
        self.assertIsNone(parse_json_field("{oops"))
        self.assertIsNone(parse_json_field(None))


class TestDates(unittest.TestCase):
    def test_invalid_date_raises(self):
        for value in ("2026-13-45", "2026-02-30", "tomorrow"):
            with self.assertRaises(InvalidDate):
                parse_date(value)
        self.assertTrue(issubclass(InvalidDate, ValueError))

    def test_shift_across_month(self):
        self.assertEqual(shift_date("2026-03-01", -1), "2026-02-28")

    def test_date_range_inclusive(self):
        self.assertEqual(date_range("2026-02-16", "2026-02-18"), ["2026-02-16", "2026-02-17", "2026-02-18"])
        self.assertEqual(date_range("2026-02-18", "2026-02-16"), [])

    def test_week_bounds_monday_to_sunday(self):
        self.assertEqual(week_bounds("2026-02-18"), ("2026-02-16", "2026-02-22"))
        self.assertEqual(week_bounds("2026-02-22"), ("2026-02-16", "2026-02-22"))

    def test_utc_now_format(self):
        now = utc_now()
        self.assertTrue(now.endswith("Z"))
        self.assertEqual(len(now), len("2026-02-18T08:30:00.000Z"))


if __name__ == "__main__":
    unittest.main()
