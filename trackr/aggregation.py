# -*- coding: utf-8 -*-
"""Derived views computed from repository rows.

Everything here is a pure function over already-fetched records, so the
repositories decide *what* to read and these helpers decide *how* to fold it.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Literal, Optional, Set, Tuple

from .fields import parse_list_field, shift_date
from .habits.models import HabitCompletion
from .nutrition.models import FoodItemCreate, NutritionTotals

Trend = Literal["up", "down", "stable"]

TREND_THRESHOLD = 0.1


def compute_streak(completed_dates_desc: Iterable[str], today: str) -> int:
    """Count consecutive completed days walking backward from today.

    ``completed_dates_desc`` must be newest first and contain no date after
    ``today``. An unfinished today does not break a streak that is still live
    from yesterday; any other gap ends the walk.
    """
    yesterday = shift_date(today, -1)
    dates = list(completed_dates_desc)
    if not dates:
        return 0

    if dates[0] == today:
        expected = today
    elif dates[0] == yesterday:
        expected = yesterday
    else:
        return 0

    streak = 0
    for d in dates:
        if d != expected:
            break
        streak += 1
        expected = shift_date(expected, -1)
    return streak


def week_window(end: str) -> Tuple[str, str]:
    """Inclusive 7-day window ending at ``end``."""
    return shift_date(end, -6), end


def group_weekly_completions(completions: Iterable[HabitCompletion]) -> Dict[str, Set[str]]:
    grouped: Dict[str, Set[str]] = {}
    for c in completions:
        if not c.completed:
            continue
        grouped.setdefault(c.habit_id, set()).add(c.date)
    return grouped


def compute_meal_totals(foods: Iterable[FoodItemCreate]) -> NutritionTotals:
    calories = 0.0
    protein = 0.0
    carbs = 0.0
    fat = 0.0
    for food in foods:
        calories += float(food.calories or 0.0)
        protein += float(food.protein or 0.0)
        carbs += float(food.carbs or 0.0)
        fat += float(food.fat or 0.0)
    return NutritionTotals(calories=calories, protein=protein, carbs=carbs, fat=fat)


def collect_tags(raw_values: Iterable[Optional[str]]) -> List[str]:
    tags: Set[str] = set()
    for raw in raw_values:
        values, ok = parse_list_field(raw)
        if not ok:
            continue
        tags.update(values)
    return sorted(tags)


def trend(current: float, previous: float) -> Trend:
    if previous == 0:
        return "up" if current > 0 else "stable"
    change = (current - previous) / previous
    if change > TREND_THRESHOLD:
        return "up"
    if change < -TREND_THRESHOLD:
        return "down"
    return "stable"


def activity_streak(active_dates: Set[str], today: str) -> int:
    streak = 0
    cur = today
    while cur in active_dates:
        streak += 1
        cur = shift_date(cur, -1)
    return streak
