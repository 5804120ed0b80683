# -*- coding: utf-8 -*-
"""Exercise — API endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..app_db import StoreHandle
from ..deps import get_store
from .models import ExerciseSession, ExerciseSessionCreate, ExerciseSessionPatch, ExerciseTotalsResponse
from .storage import ExerciseRepository

router = APIRouter(prefix="/api/exercise", tags=["Exercise"])


def _repo(store: StoreHandle = Depends(get_store)) -> ExerciseRepository:
    return ExerciseRepository(store)


@router.get("", response_model=List[ExerciseSession], response_model_exclude_none=True, summary="List sessions")
def list_sessions(
    date: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    start: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    end: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    repo: ExerciseRepository = Depends(_repo),
):
    if date:
        return repo.get_by_date(date)
    if start and end:
        return repo.get_by_date_range(start, end)
    return repo.get_all()


@router.post("", response_model=ExerciseSession, response_model_exclude_none=True, summary="Log a session")
def create_session(request: ExerciseSessionCreate, repo: ExerciseRepository = Depends(_repo)):
    return repo.create(request)


@router.get("/totals", response_model=ExerciseTotalsResponse, summary="Total minutes and calories in a range")
def totals(
    start: str = Query(..., description="YYYY-MM-DD"),
    end: str = Query(..., description="YYYY-MM-DD"),
    repo: ExerciseRepository = Depends(_repo),
):
    return ExerciseTotalsResponse(
        start=start,
        end=end,
        total_duration_minutes=repo.get_total_duration(start, end),
        total_calories_burned=repo.get_total_calories(start, end),
    )


@router.get("/{session_id}", response_model=ExerciseSession, response_model_exclude_none=True, summary="Get a session")
def get_session(session_id: str, repo: ExerciseRepository = Depends(_repo)):
    session = repo.get_by_id(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Exercise session not found")
    return session


@router.patch("/{session_id}", response_model=ExerciseSession, response_model_exclude_none=True, summary="Update a session")
def update_session(session_id: str, patch: ExerciseSessionPatch, repo: ExerciseRepository = Depends(_repo)):
    if not repo.update(session_id, patch):
        raise HTTPException(status_code=404, detail="Exercise session not found")
    return repo.get_by_id(session_id)


@router.delete("/{session_id}", summary="Delete a session")
def delete_session(session_id: str, repo: ExerciseRepository = Depends(_repo)):
    if not repo.delete(session_id):
        raise HTTPException(status_code=404, detail="Exercise session not found")
    return {"status": "ok"}
