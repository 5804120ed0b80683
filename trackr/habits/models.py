# -*- coding: utf-8 -*-
"""Habits — Pydantic models."""

from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import Field

from ..models import PatchModel, RecordModel

HabitFrequency = Literal["daily", "weekly", "custom"]


class HabitCreate(RecordModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    icon: Optional[str] = None
    color: str = Field(..., min_length=1, description="Hex color, e.g. '#4CAF50'")
    frequency: HabitFrequency = "daily"
    target_days_per_week: Optional[int] = Field(None, ge=1, le=7)
    reminder_time: Optional[str] = Field(None, description="HH:MM local time")


class Habit(HabitCreate):
    id: str
    created_at: str
    updated_at: str


class HabitPatch(PatchModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    icon: Optional[str] = None
    color: Optional[str] = Field(None, min_length=1)
    frequency: Optional[HabitFrequency] = None
    target_days_per_week: Optional[int] = Field(None, ge=1, le=7)
    reminder_time: Optional[str] = None


class HabitCompletion(RecordModel):
    id: str
    habit_id: str
    date: str = Field(..., description="YYYY-MM-DD")
    completed: bool
    completed_at: Optional[str] = None
    notes: Optional[str] = None


class CompletionRequest(RecordModel):
    date: str = Field(..., description="YYYY-MM-DD")
    completed: bool = True
    notes: Optional[str] = None


class StreakResponse(RecordModel):
    habit_id: str
    streak: int = Field(0, ge=0)
    as_of: str


class WeeklyCompletionsResponse(RecordModel):
    start: str
    end: str
    completions: Dict[str, List[str]] = Field(default_factory=dict)
