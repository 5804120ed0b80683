# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from trackr.errors import ConstraintViolation
from trackr.exercise.models import ExerciseSessionCreate, ExerciseSessionPatch
from trackr.exercise.storage import ExerciseRepository

from store_case import StoreTestCase


class TestExerciseRepository(StoreTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.repo = ExerciseRepository(self.store)

    def _log(self, date: str, minutes: int = 30, calories=None, **kwargs):
        return self.repo.create(ExerciseSessionCreate(
            date=date,
            type=kwargs.pop("type", "running"),
            duration_minutes=minutes,
            intensity=kwargs.pop("intensity", "moderate"),
            calories_burned=calories,
            **kwargs,
        ))

    def test_multiple_sessions_per_day(self):
        self._log("2026-02-18", 30)
        self._log("2026-02-18", 45, type="yoga", intensity="low")
        self.assertEqual(len(self.repo.get_by_date("2026-02-18")), 2)

    def test_range_is_inclusive(self):
        for day in ("2026-02-14", "2026-02-15", "2026-02-20", "2026-02-21"):
            self._log(day)
        dates = [s.date for s in self.repo.get_by_date_range("2026-02-15", "2026-02-20")]
        self.assertEqual(dates, ["2026-02-15", "2026-02-20"])

    def test_totals(self):
        self._log("2026-02-16", 30, calories=300)
        self._log("2026-02-17", 45)
        self._log("2026-03-01", 60, calories=500)
        self.assertEqual(self.repo.get_total_duration("2026-02-16", "2026-02-22"), 75)
        self.assertEqual(self.repo.get_total_calories("2026-02-16", "2026-02-22"), 300)
        self.assertEqual(self.repo.get_total_duration("2025-01-01", "2025-01-07"), 0)

    def test_distance_fields_round_trip(self):
        created = self._log("2026-02-18", 40, distance=5.2, distance_unit="km", heart_rate_avg=150)
        fetched = self.repo.get_by_id(created.id)
        self.assertEqual(fetched.distance, 5.2)
        self.assertEqual(fetched.distance_unit, "km")
        self.assertEqual(fetched.heart_rate_avg, 150)
        self.assertIsNone(fetched.heart_rate_max)

    def test_unknown_intensity_is_rejected_by_store(self):
        with self.assertRaises(ConstraintViolation):
            self.repo.create(ExerciseSessionCreate.model_construct(
                date="2026-02-18",
                type="running",
                duration_minutes=30,
                intensity="extreme",
            ))

    def test_update_and_delete(self):
        created = self._log("2026-02-18", 30, notes="easy")
        self.assertTrue(self.repo.update(created.id, ExerciseSessionPatch(duration_minutes=35)))
        fetched = self.repo.get_by_id(created.id)
        self.assertEqual(fetched.duration_minutes, 35)
        self.assertEqual(fetched.notes, "easy")

        self.assertTrue(self.repo.delete(created.id))
        self.assertEqual(self.repo.get_all(), [])


if __name__ == "__main__":
    unittest.main()
