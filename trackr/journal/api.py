# -*- coding: utf-8 -*-
"""Journal — API endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..app_db import StoreHandle
from ..deps import get_store
from .models import JournalEntry, JournalEntryCreate, JournalEntryPatch, TagsResponse
from .storage import JournalRepository

router = APIRouter(prefix="/api/journal", tags=["Journal"])


def _repo(store: StoreHandle = Depends(get_store)) -> JournalRepository:
    return JournalRepository(store)


@router.get("", response_model=List[JournalEntry], response_model_exclude_none=True, summary="List or search entries")
def list_entries(
    date: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    start: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    end: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    q: Optional[str] = Query(default=None, min_length=1, description="Search title and content"),
    repo: JournalRepository = Depends(_repo),
):
    if q:
        return repo.search(q)
    if date:
        return repo.get_by_date(date)
    if start and end:
        return repo.get_by_date_range(start, end)
    return repo.get_all()


@router.post("", response_model=JournalEntry, response_model_exclude_none=True, summary="Write an entry")
def create_entry(request: JournalEntryCreate, repo: JournalRepository = Depends(_repo)):
    return repo.create(request)


@router.get("/tags", response_model=TagsResponse, summary="All distinct tags, sorted")
def tags(repo: JournalRepository = Depends(_repo)):
    return TagsResponse(tags=repo.get_all_tags())


@router.get("/mood", response_model=List[JournalEntry], response_model_exclude_none=True, summary="Entries with a mood")
def mood_entries(
    start: str = Query(..., description="YYYY-MM-DD"),
    end: str = Query(..., description="YYYY-MM-DD"),
    repo: JournalRepository = Depends(_repo),
):
    return repo.get_entries_with_mood(start, end)


@router.get("/{entry_id}", response_model=JournalEntry, response_model_exclude_none=True, summary="Get an entry")
def get_entry(entry_id: str, repo: JournalRepository = Depends(_repo)):
    entry = repo.get_by_id(entry_id)
    if not entry:
        raise HTTPException(status_code=404, detail="Journal entry not found")
    return entry


@router.patch("/{entry_id}", response_model=JournalEntry, response_model_exclude_none=True, summary="Update an entry")
def update_entry(entry_id: str, patch: JournalEntryPatch, repo: JournalRepository = Depends(_repo)):
    if not repo.update(entry_id, patch):
        raise HTTPException(status_code=404, detail="Journal entry not found")
    return repo.get_by_id(entry_id)


@router.delete("/{entry_id}", summary="Delete an entry")
def delete_entry(entry_id: str, repo: JournalRepository = Depends(_repo)):
    if not repo.delete(entry_id):
        raise HTTPException(status_code=404, detail="Journal entry not found")
    return {"status": "ok"}
