# -*- coding: utf-8 -*-
"""FastAPI dependencies."""

from __future__ import annotations

from fastapi import Request

from .app_db import StoreHandle


def get_store(request: Request) -> StoreHandle:
    """The process-wide store handle owned by the application."""
    return request.app.state.store
