# -*- coding: utf-8 -*-
"""Nutrition — Pydantic models."""

from __future__ import annotations

from typing import Any, List, Literal, Optional

from pydantic import Field

from ..models import PatchModel, RecordModel

MealType = Literal["breakfast", "lunch", "dinner", "snack"]


class NutritionTotals(RecordModel):
    calories: float = Field(0.0, ge=0)
    protein: float = Field(0.0, ge=0)
    carbs: float = Field(0.0, ge=0)
    fat: float = Field(0.0, ge=0)


class FoodItemCreate(RecordModel):
    name: str = Field(..., min_length=1, description="Food name, e.g. 'rice', 'apple'")
    quantity: float = Field(..., ge=0)
    unit: str = Field(..., min_length=1, description="e.g. 'g', 'cup', 'serving'")
    calories: float = Field(..., ge=0)
    protein: Optional[float] = Field(None, ge=0)
    carbs: Optional[float] = Field(None, ge=0)
    fat: Optional[float] = Field(None, ge=0)
    is_ai_generated: bool = Field(False, alias="isAIGenerated")
    confidence: Optional[float] = Field(None, ge=0, le=1)


class FoodItem(FoodItemCreate):
    id: str
    meal_id: str


class MealCreate(RecordModel):
    date: str = Field(..., description="YYYY-MM-DD")
    meal_type: MealType
    name: Optional[str] = None
    total_calories: float = Field(0.0, ge=0)
    total_protein: Optional[float] = Field(None, ge=0)
    total_carbs: Optional[float] = Field(None, ge=0)
    total_fat: Optional[float] = Field(None, ge=0)
    total_fiber: Optional[float] = Field(None, ge=0)
    photo_uri: Optional[str] = None
    ai_analysis: Optional[Any] = Field(None, description="Opaque AI food analysis payload")


class Meal(MealCreate):
    id: str
    foods: List[FoodItem] = Field(default_factory=list)
    created_at: str
    updated_at: str


class MealCreateRequest(MealCreate):
    foods: List[FoodItemCreate] = Field(default_factory=list)


class MealPatch(PatchModel):
    date: Optional[str] = None
    meal_type: Optional[MealType] = None
    name: Optional[str] = None
    total_calories: Optional[float] = Field(None, ge=0)
    total_protein: Optional[float] = Field(None, ge=0)
    total_carbs: Optional[float] = Field(None, ge=0)
    total_fat: Optional[float] = Field(None, ge=0)
    total_fiber: Optional[float] = Field(None, ge=0)
    photo_uri: Optional[str] = None
    ai_analysis: Optional[Any] = None


class DailyTotalsResponse(RecordModel):
    date: str
    totals: NutritionTotals
