# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from trackr.aggregation import (
    activity_streak,
    collect_tags,
    compute_meal_totals,
    compute_streak,
    group_weekly_completions,
    trend,
    week_window,
)
from trackr.errors import InvalidDate
from trackr.habits.models import HabitCompletion
from trackr.nutrition.models import FoodItemCreate


class TestStreak(unittest.TestCase):
    def test_three_consecutive_days(self):
        self.assertEqual(compute_streak(["2026-02-18", "2026-02-17", "2026-02-16"], "2026-02-18"), 3)

    def test_gap_breaks_the_walk(self):
        self.assertEqual(compute_streak(["2026-02-18", "2026-02-16"], "2026-02-18"), 1)

    def test_unfinished_today_keeps_yesterday_streak(self):
        self.assertEqual(compute_streak(["2026-02-17", "2026-02-16"], "2026-02-18"), 2)

    def test_invalid_today_raises_even_without_completions(self):
        with self.assertRaises(InvalidDate):
            compute_streak([], "2026-13-45")

    def test_stale_streak_is_zero(self):
        self.assertEqual(compute_streak(["2026-02-16", "2026-02-15"], "2026-02-18"), 0)
        self.assertEqual(compute_streak([], "2026-02-18"), 0)


class TestWeekly(unittest.TestCase):
    def test_window_is_seven_days(self):
        self.assertEqual(week_window("2026-02-18"), ("2026-02-12", "2026-02-18"))

    def test_grouping_skips_uncompleted(self):
        rows = [
            HabitCompletion(id="1", habit_id="h1", date="2026-02-17", completed=True),
            HabitCompletion(id="2", habit_id="h1", date="2026-02-18", completed=False),
            HabitCompletion(id="3", habit_id="h2", date="2026-02-18", completed=True),
        ]
        self.assertEqual(group_weekly_completions(rows), {"h1": {"2026-02-17"}, "h2": {"2026-02-18"}})


class TestMealTotals(unittest.TestCase):
    def test_missing_macros_count_as_zero(self):
        foods = [
            FoodItemCreate(name="rice", quantity=1, unit="cup", calories=250, protein=5),
            FoodItemCreate(name="chicken", quantity=100, unit="g", calories=200, protein=30.5, fat=4),
        ]
        totals = compute_meal_totals(foods)
        self.assertEqual(totals.calories, 450)
        self.assertEqual(totals.protein, 35.5)
        self.assertEqual(totals.carbs, 0)
        self.assertEqual(totals.fat, 4)

    def test_fractional_sums_are_not_rounded(self):
        foods = [FoodItemCreate(name="seed", quantity=1, unit="g", calories=0.333, protein=0.005) for _ in range(3)]
        totals = compute_meal_totals(foods)
        self.assertEqual(totals.calories, 0.333 + 0.333 + 0.333)
        self.assertAlmostEqual(totals.protein, 0.015, places=9)

    def test_empty_meal(self):
        self.assertEqual(compute_meal_totals([]).calories, 0)


class TestTagsAndTrends(unittest.TestCase):
    def test_collect_tags_dedupes_and_sorts(self):
        raw = ['["work", "ideas"]', '["ideas", "personal"]', "garbage", None]
        self.assertEqual(collect_tags(raw), ["ideas", "personal", "work"])

    def test_trend(self):
        self.assertEqual(trend(8.0, 7.0), "up")
        self.assertEqual(trend(6.0, 7.0), "down")
        self.assertEqual(trend(7.2, 7.0), "stable")
        self.assertEqual(trend(5.0, 0), "up")
        self.assertEqual(trend(0, 0), "stable")

    def test_activity_streak(self):
        active = {"2026-02-18", "2026-02-17", "2026-02-15"}
        self.assertEqual(activity_streak(active, "2026-02-18"), 2)
        self.assertEqual(activity_streak(active, "2026-02-19"), 0)


if __name__ == "__main__":
    unittest.main()
