# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from trackr.exercise.models import ExerciseSessionCreate
from trackr.habits.models import HabitCreate
from trackr.insights.storage import InsightsService
from trackr.nutrition.models import MealCreate
from trackr.sleep.models import SleepEntryCreate

from store_case import StoreTestCase


class TestInsights(StoreTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.insights = InsightsService(self.store)

        habit = self.insights.habits.create(HabitCreate(name="Read", color="#fff"))
        for day in ("2026-02-16", "2026-02-17", "2026-02-18"):
            self.insights.habits.set_completion(habit.id, day, True)
        self.insights.habits.set_completion(habit.id, "2026-02-19", False)

        for day, minutes, quality in (("2026-02-16", 480, 4), ("2026-02-17", 420, 2)):
            self.insights.sleep.create(SleepEntryCreate(
                date=day,
                bedtime=f"{day}T00:00:00.000Z",
                wake_time=f"{day}T08:00:00.000Z",
                duration_minutes=minutes,
                quality=quality,
            ))

        for minutes in (30, 45):
            self.insights.exercise.create(ExerciseSessionCreate(
                date="2026-02-18", type="running", duration_minutes=minutes, intensity="moderate",
            ))

        for day, calories in (("2026-02-16", 500), ("2026-02-16", 700), ("2026-02-17", 600)):
            self.insights.nutrition.create(MealCreate(date=day, meal_type="lunch", total_calories=calories))

    def test_weekly_stats(self):
        stats = self.insights.weekly_stats("2026-02-18")
        self.assertEqual((stats.week_start, stats.week_end), ("2026-02-16", "2026-02-22"))
        self.assertEqual(stats.habits_completed, 3)
        self.assertEqual(stats.habits_total, 7)
        self.assertAlmostEqual(stats.habit_completion_rate, 3 / 7)
        self.assertEqual(stats.avg_sleep_hours, 7.5)
        self.assertEqual(stats.avg_sleep_quality, 3.0)
        self.assertEqual(stats.total_exercise_minutes, 75)
        self.assertEqual(stats.avg_daily_calories, 900.0)
        self.assertEqual(stats.days_tracked, 3)

    def test_empty_week(self):
        stats = self.insights.weekly_stats("2026-01-07")
        self.assertEqual(stats.days_tracked, 0)
        self.assertEqual(stats.avg_sleep_hours, 0)
        self.assertEqual(stats.habit_completion_rate, 0)

    def test_trends_against_empty_previous_week(self):
        data = self.insights.trend_data("2026-02-18")
        self.assertEqual(data.last_week.week_start, "2026-02-09")
        self.assertEqual(data.sleep_trend, "up")
        self.assertEqual(data.exercise_trend, "up")
        self.assertEqual(data.habit_trend, "up")

    def test_activity_streak(self):
        self.assertEqual(self.insights.daily_activity_streak("2026-02-18"), 3)
        self.assertEqual(self.insights.daily_activity_streak("2026-02-20"), 0)


if __name__ == "__main__":
    unittest.main()
