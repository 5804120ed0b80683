# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from trackr.errors import ConstraintViolation
from trackr.habits.models import HabitCreate, HabitPatch
from trackr.habits.storage import HabitRepository

from store_case import StoreTestCase


class TestHabitRepository(StoreTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.repo = HabitRepository(self.store)
        self.habit = self.repo.create(
            HabitCreate(name="Read", description="20 pages", color="#4CAF50", frequency="daily")
        )

    def test_create_and_get(self):
        fetched = self.repo.get_by_id(self.habit.id)
        self.assertIsNotNone(fetched)
        self.assertEqual(fetched.name, "Read")
        self.assertEqual(fetched.created_at, fetched.updated_at)
        self.assertIsNone(self.repo.get_by_id("missing"))

    def test_get_all_newest_first(self):
        second = self.repo.create(HabitCreate(name="Walk", color="#000"))
        self.assertEqual([h.id for h in self.repo.get_all()], [second.id, self.habit.id])

    def test_update_only_touches_present_fields(self):
        self.store.execute(
            "UPDATE habits SET updated_at = ? WHERE id = ?",
            ("2000-01-01T00:00:00.000Z", self.habit.id),
        )
        self.assertTrue(self.repo.update(self.habit.id, HabitPatch(name="Read more")))

        fetched = self.repo.get_by_id(self.habit.id)
        self.assertEqual(fetched.name, "Read more")
        self.assertEqual(fetched.description, "20 pages")
        self.assertNotEqual(fetched.updated_at, "2000-01-01T00:00:00.000Z")

    def test_explicit_none_clears_field(self):
        self.repo.update(self.habit.id, HabitPatch(description=None))
        self.assertIsNone(self.repo.get_by_id(self.habit.id).description)

    def test_update_and_delete_missing_return_false(self):
        self.assertFalse(self.repo.update("missing", HabitPatch(name="x")))
        self.assertFalse(self.repo.delete("missing"))

    def test_invalid_frequency_is_rejected_by_store(self):
        with self.assertRaises(ConstraintViolation):
            self.store.execute(
                "INSERT INTO habits (id, name, color, frequency, created_at, updated_at) VALUES (?, ?, ?, ?, ?, ?)",
                ("bad", "x", "#fff", "hourly", "t", "t"),
            )

    def test_set_completion_is_an_upsert(self):
        first = self.repo.set_completion(self.habit.id, "2026-02-18", True)
        second = self.repo.set_completion(self.habit.id, "2026-02-18", False, notes="skipped")

        rows = self.repo.get_completions_for_date("2026-02-18")
        self.assertEqual(len(rows), 1)
        self.assertEqual(second.id, first.id)
        self.assertFalse(rows[0].completed)
        self.assertIsNone(rows[0].completed_at)
        self.assertEqual(rows[0].notes, "skipped")

    def test_completion_for_unknown_habit_violates_foreign_key(self):
        with self.assertRaises(ConstraintViolation):
            self.repo.set_completion("missing", "2026-02-18", True)

    def test_delete_cascades_to_completions(self):
        self.repo.set_completion(self.habit.id, "2026-02-17", True)
        self.repo.set_completion(self.habit.id, "2026-02-18", True)

        self.assertTrue(self.repo.delete(self.habit.id))
        self.assertEqual(self.store.scalar("SELECT COUNT(*) FROM habit_completions"), 0)

    def test_date_range_is_inclusive(self):
        for day in ("2026-02-15", "2026-02-16", "2026-02-17", "2026-02-18", "2026-02-19"):
            self.repo.set_completion(self.habit.id, day, True)
        dates = [c.date for c in self.repo.get_by_date_range("2026-02-16", "2026-02-18")]
        self.assertEqual(dates, ["2026-02-16", "2026-02-17", "2026-02-18"])

    def test_streak(self):
        for day in ("2026-02-16", "2026-02-17", "2026-02-18"):
            self.repo.set_completion(self.habit.id, day, True)
        self.assertEqual(self.repo.get_streak(self.habit.id, "2026-02-18"), 3)

        self.repo.set_completion(self.habit.id, "2026-02-17", False)
        self.assertEqual(self.repo.get_streak(self.habit.id, "2026-02-18"), 1)

        self.repo.set_completion(self.habit.id, "2026-02-18", False)
        self.assertEqual(self.repo.get_streak(self.habit.id, "2026-02-18"), 0)

    def test_streak_ignores_future_completions(self):
        self.repo.set_completion(self.habit.id, "2026-02-17", True)
        self.repo.set_completion(self.habit.id, "2026-02-19", True)
        self.assertEqual(self.repo.get_streak(self.habit.id, "2026-02-18"), 1)

    def test_weekly_completions(self):
        other = self.repo.create(HabitCreate(name="Walk", color="#000"))
        self.repo.set_completion(self.habit.id, "2026-02-10", True)
        self.repo.set_completion(self.habit.id, "2026-02-12", True)
        self.repo.set_completion(self.habit.id, "2026-02-18", True)
        self.repo.set_completion(other.id, "2026-02-15", False)

        weekly = self.repo.get_weekly_completions("2026-02-18")
        self.assertEqual(weekly, {self.habit.id: {"2026-02-12", "2026-02-18"}})


if __name__ == "__main__":
    unittest.main()
