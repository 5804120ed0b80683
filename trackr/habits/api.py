# -*- coding: utf-8 -*-
"""Habits — API endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..aggregation import week_window
from ..app_db import StoreHandle
from ..deps import get_store
from ..fields import today as local_today
from .models import (
    CompletionRequest,
    Habit,
    HabitCompletion,
    HabitCreate,
    HabitPatch,
    StreakResponse,
    WeeklyCompletionsResponse,
)
from .storage import HabitRepository

router = APIRouter(prefix="/api/habits", tags=["Habits"])


def _repo(store: StoreHandle = Depends(get_store)) -> HabitRepository:
    return HabitRepository(store)


@router.get("", response_model=List[Habit], response_model_exclude_none=True, summary="List habits")
def list_habits(repo: HabitRepository = Depends(_repo)):
    return repo.get_all()


@router.post("", response_model=Habit, response_model_exclude_none=True, summary="Create a habit")
def create_habit(request: HabitCreate, repo: HabitRepository = Depends(_repo)):
    return repo.create(request)


@router.get(
    "/completions",
    response_model=List[HabitCompletion],
    response_model_exclude_none=True,
    summary="Completions for a date or an inclusive date range",
)
def list_completions(
    date: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    start: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    end: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    repo: HabitRepository = Depends(_repo),
):
    if date:
        return repo.get_completions_for_date(date)
    if start and end:
        return repo.get_completions_for_date_range(start, end)
    return repo.get_all_completions()


@router.get("/weekly", response_model=WeeklyCompletionsResponse, summary="Completed dates per habit, 7 days ending at date")
def weekly_completions(
    date: Optional[str] = Query(default=None, description="YYYY-MM-DD, defaults to today"),
    repo: HabitRepository = Depends(_repo),
):
    end = date or local_today()
    grouped = repo.get_weekly_completions(end)
    start, _ = week_window(end)
    return WeeklyCompletionsResponse(
        start=start,
        end=end,
        completions={habit_id: sorted(dates) for habit_id, dates in grouped.items()},
    )


@router.get("/{habit_id}", response_model=Habit, response_model_exclude_none=True, summary="Get a habit")
def get_habit(habit_id: str, repo: HabitRepository = Depends(_repo)):
    habit = repo.get_by_id(habit_id)
    if not habit:
        raise HTTPException(status_code=404, detail="Habit not found")
    return habit


@router.patch("/{habit_id}", response_model=Habit, response_model_exclude_none=True, summary="Update a habit")
def update_habit(habit_id: str, patch: HabitPatch, repo: HabitRepository = Depends(_repo)):
    if not repo.update(habit_id, patch):
        raise HTTPException(status_code=404, detail="Habit not found")
    return repo.get_by_id(habit_id)


@router.delete("/{habit_id}", summary="Delete a habit and its completions")
def delete_habit(habit_id: str, repo: HabitRepository = Depends(_repo)):
    if not repo.delete(habit_id):
        raise HTTPException(status_code=404, detail="Habit not found")
    return {"status": "ok"}


@router.put(
    "/{habit_id}/completions",
    response_model=HabitCompletion,
    response_model_exclude_none=True,
    summary="Set (upsert) the completion for a date",
)
def set_completion(habit_id: str, request: CompletionRequest, repo: HabitRepository = Depends(_repo)):
    if not repo.get_by_id(habit_id):
        raise HTTPException(status_code=404, detail="Habit not found")
    return repo.set_completion(habit_id, request.date, request.completed, request.notes)


@router.get("/{habit_id}/streak", response_model=StreakResponse, summary="Current streak")
def streak(
    habit_id: str,
    today: Optional[str] = Query(default=None, description="YYYY-MM-DD, defaults to today"),
    repo: HabitRepository = Depends(_repo),
):
    as_of = today or local_today()
    return StreakResponse(habit_id=habit_id, streak=repo.get_streak(habit_id, as_of), as_of=as_of)
