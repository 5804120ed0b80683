# -*- coding: utf-8 -*-
"""Exercise — SQLite repository."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..app_db import StoreHandle
from ..fields import new_id, utc_now
from .models import ExerciseSession, ExerciseSessionCreate, ExerciseSessionPatch

# Patch fields map 1:1 onto columns.
_COLUMNS = tuple(ExerciseSessionPatch.model_fields)


def _row_to_session(row: Dict[str, Any]) -> ExerciseSession:
    return ExerciseSession(
        id=row["id"],
        date=row["date"],
        type=row["type"],
        custom_type=row.get("custom_type"),
        duration_minutes=row["duration_minutes"],
        intensity=row["intensity"],
        calories_burned=row.get("calories_burned"),
        notes=row.get("notes"),
        heart_rate_avg=row.get("heart_rate_avg"),
        heart_rate_max=row.get("heart_rate_max"),
        distance=row.get("distance"),
        distance_unit=row.get("distance_unit"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


class ExerciseRepository:
    def __init__(self, store: StoreHandle) -> None:
        self.store = store

    def get_all(self) -> List[ExerciseSession]:
        rows = self.store.query("SELECT * FROM exercise_sessions ORDER BY date DESC, created_at DESC")
        return [_row_to_session(r) for r in rows]

    def get_by_id(self, session_id: str) -> Optional[ExerciseSession]:
        row = self.store.query_one("SELECT * FROM exercise_sessions WHERE id = ?", (session_id,))
        return _row_to_session(row) if row else None

    def get_by_date(self, date: str) -> List[ExerciseSession]:
        rows = self.store.query(
            "SELECT * FROM exercise_sessions WHERE date = ? ORDER BY created_at ASC",
            (date,),
        )
        return [_row_to_session(r) for r in rows]

    def get_by_date_range(self, start: str, end: str) -> List[ExerciseSession]:
        rows = self.store.query(
            """
            SELECT * FROM exercise_sessions
            WHERE date >= ? AND date <= ?
            ORDER BY date ASC, created_at ASC
            """,
            (start, end),
        )
        return [_row_to_session(r) for r in rows]

    def create(self, data: ExerciseSessionCreate) -> ExerciseSession:
        session_id = new_id()
        now = utc_now()
        self.store.execute(
            """
            INSERT INTO exercise_sessions (
                id, date, type, custom_type, duration_minutes, intensity, calories_burned,
                notes, heart_rate_avg, heart_rate_max, distance, distance_unit, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                session_id,
                data.date,
                data.type,
                data.custom_type,
                data.duration_minutes,
                data.intensity,
                data.calories_burned,
                data.notes,
                data.heart_rate_avg,
                data.heart_rate_max,
                data.distance,
                data.distance_unit,
                now,
                now,
            ),
        )
        return ExerciseSession(**data.model_dump(), id=session_id, created_at=now, updated_at=now)

    def update(self, session_id: str, patch: ExerciseSessionPatch) -> bool:
        assignments = {k: v for k, v in patch.present_fields().items() if k in _COLUMNS}
        return self.store.update_columns("exercise_sessions", session_id, assignments) > 0

    def delete(self, session_id: str) -> bool:
        return self.store.execute("DELETE FROM exercise_sessions WHERE id = ?", (session_id,)) > 0

    def get_total_duration(self, start: str, end: str) -> int:
        value = self.store.scalar(
            "SELECT SUM(duration_minutes) FROM exercise_sessions WHERE date >= ? AND date <= ?",
            (start, end),
        )
        return int(value or 0)

    def get_total_calories(self, start: str, end: str) -> int:
        value = self.store.scalar(
            "SELECT SUM(calories_burned) FROM exercise_sessions WHERE date >= ? AND date <= ?",
            (start, end),
        )
        return int(value or 0)
