# -*- coding: utf-8 -*-
"""Nutrition — API endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..app_db import StoreHandle
from ..deps import get_store
from .models import DailyTotalsResponse, FoodItem, FoodItemCreate, Meal, MealCreateRequest, MealPatch
from .storage import NutritionRepository

router = APIRouter(prefix="/api/nutrition", tags=["Nutrition"])


def _repo(store: StoreHandle = Depends(get_store)) -> NutritionRepository:
    return NutritionRepository(store)


def _meal_or_404(repo: NutritionRepository, meal_id: str) -> Meal:
    meal = repo.get_by_id(meal_id)
    if not meal:
        raise HTTPException(status_code=404, detail="Meal not found")
    return meal


@router.get("/meals", response_model=List[Meal], response_model_exclude_none=True, summary="List meals")
def list_meals(
    date: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    start: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    end: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    repo: NutritionRepository = Depends(_repo),
):
    if date:
        return repo.get_by_date(date)
    if start and end:
        return repo.get_by_date_range(start, end)
    return repo.get_all()


@router.post("/meals", response_model=Meal, response_model_exclude_none=True, summary="Log a meal with its food items")
def create_meal(request: MealCreateRequest, repo: NutritionRepository = Depends(_repo)):
    return repo.create(request, request.foods)


@router.get("/daily/{date}", response_model=DailyTotalsResponse, summary="Nutrition totals for a date")
def daily_totals(date: str, repo: NutritionRepository = Depends(_repo)):
    return DailyTotalsResponse(date=date, totals=repo.get_daily_totals(date))


@router.get("/meals/{meal_id}", response_model=Meal, response_model_exclude_none=True, summary="Get a meal")
def get_meal(meal_id: str, repo: NutritionRepository = Depends(_repo)):
    return _meal_or_404(repo, meal_id)


@router.patch("/meals/{meal_id}", response_model=Meal, response_model_exclude_none=True, summary="Update a meal")
def update_meal(meal_id: str, patch: MealPatch, repo: NutritionRepository = Depends(_repo)):
    if not repo.update(meal_id, patch):
        raise HTTPException(status_code=404, detail="Meal not found")
    return _meal_or_404(repo, meal_id)


@router.delete("/meals/{meal_id}", summary="Delete a meal and its food items")
def delete_meal(meal_id: str, repo: NutritionRepository = Depends(_repo)):
    if not repo.delete(meal_id):
        raise HTTPException(status_code=404, detail="Meal not found")
    return {"status": "ok"}


@router.post(
    "/meals/{meal_id}/foods",
    response_model=FoodItem,
    response_model_exclude_none=True,
    summary="Add a food item and recalculate the meal totals",
)
def add_food(meal_id: str, request: FoodItemCreate, repo: NutritionRepository = Depends(_repo)):
    _meal_or_404(repo, meal_id)
    return repo.add_food_item(meal_id, request)


@router.delete("/meals/{meal_id}/foods/{food_id}", summary="Remove a food item and recalculate the meal totals")
def delete_food(meal_id: str, food_id: str, repo: NutritionRepository = Depends(_repo)):
    _meal_or_404(repo, meal_id)
    if not repo.delete_food_item(food_id, meal_id):
        raise HTTPException(status_code=404, detail="Food item not found")
    return {"status": "ok"}
