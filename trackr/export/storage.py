# -*- coding: utf-8 -*-
"""Export — reads every domain through its repository and writes files."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from pydantic import BaseModel

from ..app_db import StoreHandle
from ..config import settings
from ..exercise.storage import ExerciseRepository
from ..fields import utc_now
from ..habits.storage import HabitRepository
from ..journal.storage import JournalRepository
from ..models import RecordModel
from ..nutrition.storage import NutritionRepository
from ..sleep.storage import SleepRepository
from .encoders import encode_csv

logger = logging.getLogger(__name__)


def _dump_all(records: Sequence[RecordModel]) -> List[Dict[str, Any]]:
    return [r.dump() for r in records]


def build_snapshot(store: StoreHandle, version: Optional[str] = None) -> Dict[str, Any]:
    habits = HabitRepository(store)
    return {
        "exportedAt": utc_now(),
        "version": version or settings.app_version,
        "habits": _dump_all(habits.get_all()),
        "habitCompletions": _dump_all(habits.get_all_completions()),
        "sleep": _dump_all(SleepRepository(store).get_all()),
        "exercise": _dump_all(ExerciseRepository(store).get_all()),
        "meals": _dump_all(NutritionRepository(store).get_all()),
        "journal": _dump_all(JournalRepository(store).get_all()),
    }


def _records_for(store: StoreHandle, category: str) -> Sequence[BaseModel]:
    if category == "habits":
        return HabitRepository(store).get_all()
    if category == "sleep":
        return SleepRepository(store).get_all()
    if category == "exercise":
        return ExerciseRepository(store).get_all()
    if category == "nutrition":
        return NutritionRepository(store).get_all()
    if category == "journal":
        return JournalRepository(store).get_all()
    raise ValueError(f"Unknown export category: {category}")


def build_csv(store: StoreHandle, category: str) -> str:
    return encode_csv(category, _records_for(store, category))


def export_all_data(store: StoreHandle, directory: Optional[Path] = None) -> Path:
    out_dir = directory or settings.export_dir
    out_dir.mkdir(parents=True, exist_ok=True)
    snapshot = build_snapshot(store)
    day = datetime.now(timezone.utc).date().isoformat()
    fp = out_dir / f"trackr-export-{day}.json"
    fp.write_text(json.dumps(snapshot, ensure_ascii=False, indent=2), encoding="utf-8")
    logger.info("Wrote snapshot export %s", fp)
    return fp


def generate_csv_export(store: StoreHandle, category: str, directory: Optional[Path] = None) -> Path:
    content = build_csv(store, category)
    out_dir = directory or settings.export_dir
    out_dir.mkdir(parents=True, exist_ok=True)
    fp = out_dir / f"trackr-{category}.csv"
    fp.write_text(content, encoding="utf-8")
    logger.info("Wrote %s CSV export %s", category, fp)
    return fp
