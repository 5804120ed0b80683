# -*- coding: utf-8 -*-
"""Insights — Pydantic models."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from ..models import RecordModel

TrendDirection = Literal["up", "down", "stable"]


class WeeklyStats(RecordModel):
    week_start: str = Field(..., description="Monday, YYYY-MM-DD")
    week_end: str = Field(..., description="Sunday, YYYY-MM-DD")
    habits_completed: int = Field(0, ge=0)
    habits_total: int = Field(0, ge=0)
    habit_completion_rate: float = Field(0.0, ge=0)
    avg_sleep_hours: float = Field(0.0, ge=0)
    avg_sleep_quality: float = Field(0.0, ge=0)
    total_exercise_minutes: int = Field(0, ge=0)
    avg_daily_calories: float = Field(0.0, ge=0)
    days_tracked: int = Field(0, ge=0)


class TrendData(RecordModel):
    this_week: WeeklyStats
    last_week: WeeklyStats
    sleep_trend: TrendDirection
    exercise_trend: TrendDirection
    habit_trend: TrendDirection


class ActivityStreakResponse(RecordModel):
    as_of: str
    streak: int = Field(0, ge=0)
