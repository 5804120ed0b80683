# -*- coding: utf-8 -*-
"""Insights — API endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from ..app_db import StoreHandle
from ..deps import get_store
from ..fields import today as local_today
from .models import ActivityStreakResponse, TrendData, WeeklyStats
from .storage import InsightsService

router = APIRouter(prefix="/api/insights", tags=["Insights"])


def _service(store: StoreHandle = Depends(get_store)) -> InsightsService:
    return InsightsService(store)


@router.get("/weekly", response_model=WeeklyStats, summary="Statistics for the Monday-Sunday week containing date")
def weekly(
    date: Optional[str] = Query(default=None, description="YYYY-MM-DD, defaults to today"),
    service: InsightsService = Depends(_service),
):
    return service.weekly_stats(date or local_today())


@router.get("/trends", response_model=TrendData, summary="This week versus last week")
def trends(
    today: Optional[str] = Query(default=None, description="YYYY-MM-DD, defaults to today"),
    service: InsightsService = Depends(_service),
):
    return service.trend_data(today)


@router.get("/activity-streak", response_model=ActivityStreakResponse, summary="Days in a row with any record")
def activity_streak(
    today: Optional[str] = Query(default=None, description="YYYY-MM-DD, defaults to today"),
    service: InsightsService = Depends(_service),
):
    as_of = today or local_today()
    return ActivityStreakResponse(as_of=as_of, streak=service.daily_activity_streak(as_of))
