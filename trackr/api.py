# -*- coding: utf-8 -*-
"""FastAPI application exposing the store to UI and coaching collaborators."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .app_db import StoreHandle
from .config import settings
from .deps import get_store
from .errors import ConstraintViolation, InvalidDate, StorageFault
from .exercise.api import router as exercise_router
from .export.api import router as export_router
from .habits.api import router as habits_router
from .insights.api import router as insights_router
from .journal.api import router as journal_router
from .nutrition.api import router as nutrition_router
from .sleep.api import router as sleep_router

logger = logging.getLogger(__name__)


def create_app(store: Optional[StoreHandle] = None) -> FastAPI:
    handle = store or StoreHandle(settings.db_path)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Migration failures abort startup.
        app.state.store.open()
        try:
            yield
        finally:
            app.state.store.close()

    app = FastAPI(
        title="Trackr",
        description="Offline-first store for habits, sleep, exercise, nutrition and journal data.",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )
    app.state.store = handle

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ConstraintViolation)
    async def _constraint_violation(request: Request, exc: ConstraintViolation):
        return JSONResponse(status_code=409, content={"detail": f"Constraint violation: {exc}"})

    @app.exception_handler(InvalidDate)
    async def _invalid_date(request: Request, exc: InvalidDate):
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(StorageFault)
    async def _storage_fault(request: Request, exc: StorageFault):
        logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content={"detail": "Storage failure"})

    @app.get("/api/health")
    def health():
        return {"status": "ok", "version": __version__}

    @app.delete("/api/data", summary="Clear all data (schema and migration ledger are kept)")
    def clear_all_data(store: StoreHandle = Depends(get_store)):
        store.clear_all_data()
        return {"status": "ok"}

    app.include_router(habits_router)
    app.include_router(sleep_router)
    app.include_router(exercise_router)
    app.include_router(nutrition_router)
    app.include_router(journal_router)
    app.include_router(insights_router)
    app.include_router(export_router)
    return app


app = create_app()


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run("trackr.api:app", host=settings.host, port=settings.port, reload=False)
