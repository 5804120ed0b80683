# -*- coding: utf-8 -*-
"""Sleep — API endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..app_db import StoreHandle
from ..deps import get_store
from .models import SleepAveragesResponse, SleepEntry, SleepEntryCreate, SleepEntryPatch
from .storage import SleepRepository

router = APIRouter(prefix="/api/sleep", tags=["Sleep"])


def _repo(store: StoreHandle = Depends(get_store)) -> SleepRepository:
    return SleepRepository(store)


@router.get("", response_model=List[SleepEntry], response_model_exclude_none=True, summary="List sleep entries")
def list_entries(
    start: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    end: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    repo: SleepRepository = Depends(_repo),
):
    if start and end:
        return repo.get_by_date_range(start, end)
    return repo.get_all()


@router.post("", response_model=SleepEntry, response_model_exclude_none=True, summary="Log a night of sleep")
def create_entry(request: SleepEntryCreate, repo: SleepRepository = Depends(_repo)):
    return repo.create(request)


@router.get("/averages", response_model=SleepAveragesResponse, summary="Average quality and duration")
def averages(
    start: str = Query(..., description="YYYY-MM-DD"),
    end: str = Query(..., description="YYYY-MM-DD"),
    repo: SleepRepository = Depends(_repo),
):
    return SleepAveragesResponse(
        start=start,
        end=end,
        average_quality=repo.get_average_quality(start, end),
        average_duration_minutes=repo.get_average_duration(start, end),
    )


@router.get("/date/{date}", response_model=SleepEntry, response_model_exclude_none=True, summary="Sleep entry for a date")
def get_by_date(date: str, repo: SleepRepository = Depends(_repo)):
    entry = repo.get_by_date(date)
    if not entry:
        raise HTTPException(status_code=404, detail="Sleep entry not found")
    return entry


@router.get("/{entry_id}", response_model=SleepEntry, response_model_exclude_none=True, summary="Get a sleep entry")
def get_entry(entry_id: str, repo: SleepRepository = Depends(_repo)):
    entry = repo.get_by_id(entry_id)
    if not entry:
        raise HTTPException(status_code=404, detail="Sleep entry not found")
    return entry


@router.patch("/{entry_id}", response_model=SleepEntry, response_model_exclude_none=True, summary="Update a sleep entry")
def update_entry(entry_id: str, patch: SleepEntryPatch, repo: SleepRepository = Depends(_repo)):
    if not repo.update(entry_id, patch):
        raise HTTPException(status_code=404, detail="Sleep entry not found")
    return repo.get_by_id(entry_id)


@router.delete("/{entry_id}", summary="Delete a sleep entry")
def delete_entry(entry_id: str, repo: SleepRepository = Depends(_repo)):
    if not repo.delete(entry_id):
        raise HTTPException(status_code=404, detail="Sleep entry not found")
    return {"status": "ok"}
