# -*- coding: utf-8 -*-
"""Sleep — Pydantic models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from ..models import PatchModel, RecordModel


class SleepEntryCreate(RecordModel):
    date: str = Field(..., description="YYYY-MM-DD (the morning the sleep ended)")
    bedtime: str = Field(..., description="ISO8601 timestamp")
    wake_time: str = Field(..., description="ISO8601 timestamp")
    duration_minutes: int = Field(..., ge=0)
    quality: int = Field(..., ge=1, le=5)
    notes: Optional[str] = None
    factors: Optional[List[str]] = None


class SleepEntry(SleepEntryCreate):
    id: str
    created_at: str
    updated_at: str


class SleepEntryPatch(PatchModel):
    date: Optional[str] = None
    bedtime: Optional[str] = None
    wake_time: Optional[str] = None
    duration_minutes: Optional[int] = Field(None, ge=0)
    quality: Optional[int] = Field(None, ge=1, le=5)
    notes: Optional[str] = None
    factors: Optional[List[str]] = None


class SleepAveragesResponse(RecordModel):
    start: str
    end: str
    average_quality: Optional[float] = None
    average_duration_minutes: Optional[float] = None
