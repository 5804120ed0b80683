# -*- coding: utf-8 -*-
"""Export — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from ..app_db import StoreHandle
from ..deps import get_store
from .encoders import CSV_CATEGORIES
from .storage import build_csv, build_snapshot

router = APIRouter(prefix="/api/export", tags=["Export"])


@router.get("/json", summary="Full snapshot of every domain")
def export_json(store: StoreHandle = Depends(get_store)):
    return build_snapshot(store)


@router.get("/csv/{category}", summary="One category as CSV")
def export_csv(category: str, store: StoreHandle = Depends(get_store)):
    if category not in CSV_CATEGORIES:
        raise HTTPException(status_code=404, detail=f"Unknown export category: {category}")
    return Response(
        content=build_csv(store, category),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="trackr-{category}.csv"'},
    )
