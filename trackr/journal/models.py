# -*- coding: utf-8 -*-
"""Journal — Pydantic models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from ..models import PatchModel, RecordModel


class JournalEntryCreate(RecordModel):
    date: str = Field(..., description="YYYY-MM-DD")
    title: Optional[str] = None
    content: str = Field(..., min_length=1)
    mood: Optional[int] = Field(None, ge=1, le=5)
    tags: Optional[List[str]] = None
    is_scanned: bool = False
    original_image_uri: Optional[str] = None
    ocr_confidence: Optional[float] = Field(None, ge=0, le=1)


class JournalEntry(JournalEntryCreate):
    id: str
    created_at: str
    updated_at: str


class JournalEntryPatch(PatchModel):
    date: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = Field(None, min_length=1)
    mood: Optional[int] = Field(None, ge=1, le=5)
    tags: Optional[List[str]] = None
    is_scanned: Optional[bool] = None
    original_image_uri: Optional[str] = None
    ocr_confidence: Optional[float] = Field(None, ge=0, le=1)


class TagsResponse(RecordModel):
    tags: List[str] = Field(default_factory=list)
