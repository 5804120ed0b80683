# -*- coding: utf-8 -*-
"""Insights — weekly aggregation over the domain repositories."""

from __future__ import annotations

from typing import Optional, Set

from ..aggregation import activity_streak, trend
from ..app_db import StoreHandle
from ..exercise.storage import ExerciseRepository
from ..fields import shift_date, today as local_today, week_bounds
from ..habits.storage import HabitRepository
from ..nutrition.storage import NutritionRepository
from ..sleep.storage import SleepRepository
from .models import TrendData, WeeklyStats

# Bounded look-back for the any-activity streak.
ACTIVITY_LOOKBACK_DAYS = 90


class InsightsService:
    def __init__(self, store: StoreHandle) -> None:
        self.habits = HabitRepository(store)
        self.sleep = SleepRepository(store)
        self.exercise = ExerciseRepository(store)
        self.nutrition = NutritionRepository(store)

    def weekly_stats(self, reference_date: str) -> WeeklyStats:
        """Monday..Sunday statistics for the week containing ``reference_date``."""
        start, end = week_bounds(reference_date)

        habits = self.habits.get_all()
        completions = self.habits.get_completions_for_date_range(start, end)
        week_sleep = self.sleep.get_by_date_range(start, end)
        week_exercise = self.exercise.get_by_date_range(start, end)
        week_meals = self.nutrition.get_by_date_range(start, end)

        habits_completed = sum(1 for c in completions if c.completed)
        # Every habit counts as daily here.
        habits_total = len(habits) * 7

        avg_sleep_hours = 0.0
        avg_sleep_quality = 0.0
        if week_sleep:
            avg_sleep_hours = sum(s.duration_minutes / 60.0 for s in week_sleep) / len(week_sleep)
            avg_sleep_quality = sum(s.quality for s in week_sleep) / len(week_sleep)

        total_exercise_minutes = sum(e.duration_minutes for e in week_exercise)

        total_calories = sum(m.total_calories for m in week_meals)
        meal_days = {m.date for m in week_meals}
        avg_daily_calories = total_calories / len(meal_days) if meal_days else 0.0

        tracked: Set[str] = set()
        tracked.update(s.date for s in week_sleep)
        tracked.update(e.date for e in week_exercise)
        tracked.update(meal_days)

        return WeeklyStats(
            week_start=start,
            week_end=end,
            habits_completed=habits_completed,
            habits_total=habits_total,
            habit_completion_rate=habits_completed / habits_total if habits_total else 0.0,
            avg_sleep_hours=round(avg_sleep_hours, 2),
            avg_sleep_quality=round(avg_sleep_quality, 2),
            total_exercise_minutes=total_exercise_minutes,
            avg_daily_calories=round(avg_daily_calories, 1),
            days_tracked=len(tracked),
        )

    def trend_data(self, today: Optional[str] = None) -> TrendData:
        as_of = today or local_today()
        this_week = self.weekly_stats(as_of)
        last_week = self.weekly_stats(shift_date(as_of, -7))
        return TrendData(
            this_week=this_week,
            last_week=last_week,
            sleep_trend=trend(this_week.avg_sleep_hours, last_week.avg_sleep_hours),
            exercise_trend=trend(this_week.total_exercise_minutes, last_week.total_exercise_minutes),
            habit_trend=trend(this_week.habit_completion_rate, last_week.habit_completion_rate),
        )

    def daily_activity_streak(self, today: Optional[str] = None) -> int:
        """Consecutive days ending today with any sleep, exercise or meal record."""
        as_of = today or local_today()
        start = shift_date(as_of, -ACTIVITY_LOOKBACK_DAYS)
        active: Set[str] = set()
        active.update(s.date for s in self.sleep.get_by_date_range(start, as_of))
        active.update(e.date for e in self.exercise.get_by_date_range(start, as_of))
        active.update(m.date for m in self.nutrition.get_by_date_range(start, as_of))
        return activity_streak(active, as_of)
