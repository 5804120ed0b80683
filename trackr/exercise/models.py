# -*- coding: utf-8 -*-
"""Exercise — Pydantic models."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..models import PatchModel, RecordModel

ExerciseIntensity = Literal["low", "moderate", "high", "very_high"]
DistanceUnit = Literal["km", "miles"]

EXERCISE_TYPES = (
    "running",
    "walking",
    "cycling",
    "swimming",
    "weight_training",
    "yoga",
    "hiit",
    "sports",
    "cardio",
    "stretching",
    "other",
)


class ExerciseSessionCreate(RecordModel):
    date: str = Field(..., description="YYYY-MM-DD")
    type: str = Field(..., min_length=1, description="One of EXERCISE_TYPES or a custom label")
    custom_type: Optional[str] = None
    duration_minutes: int = Field(..., ge=0)
    intensity: ExerciseIntensity
    calories_burned: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = None
    heart_rate_avg: Optional[int] = Field(None, ge=0)
    heart_rate_max: Optional[int] = Field(None, ge=0)
    distance: Optional[float] = Field(None, ge=0)
    distance_unit: Optional[DistanceUnit] = None


class ExerciseSession(ExerciseSessionCreate):
    id: str
    created_at: str
    updated_at: str


class ExerciseSessionPatch(PatchModel):
    date: Optional[str] = None
    type: Optional[str] = Field(None, min_length=1)
    custom_type: Optional[str] = None
    duration_minutes: Optional[int] = Field(None, ge=0)
    intensity: Optional[ExerciseIntensity] = None
    calories_burned: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = None
    heart_rate_avg: Optional[int] = Field(None, ge=0)
    heart_rate_max: Optional[int] = Field(None, ge=0)
    distance: Optional[float] = Field(None, ge=0)
    distance_unit: Optional[DistanceUnit] = None


class ExerciseTotalsResponse(RecordModel):
    start: str
    end: str
    total_duration_minutes: int = Field(0, ge=0)
    total_calories_burned: int = Field(0, ge=0)
