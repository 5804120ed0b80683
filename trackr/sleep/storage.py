# -*- coding: utf-8 -*-
"""Sleep — SQLite repository."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..app_db import StoreHandle
from ..fields import list_field_or_none, new_id, serialize_list_field, utc_now
from .models import SleepEntry, SleepEntryCreate, SleepEntryPatch

_COLUMNS = {
    "date": "date",
    "bedtime": "bedtime",
    "wake_time": "wake_time",
    "duration_minutes": "duration_minutes",
    "quality": "quality",
    "notes": "notes",
    "factors": "factors",
}


def _row_to_entry(row: Dict[str, Any]) -> SleepEntry:
    return SleepEntry(
        id=row["id"],
        date=row["date"],
        bedtime=row["bedtime"],
        wake_time=row["wake_time"],
        duration_minutes=row["duration_minutes"],
        quality=row["quality"],
        notes=row.get("notes"),
        factors=list_field_or_none(row.get("factors")),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


class SleepRepository:
    def __init__(self, store: StoreHandle) -> None:
        self.store = store

    def get_all(self) -> List[SleepEntry]:
        rows = self.store.query("SELECT * FROM sleep_entries ORDER BY date DESC")
        return [_row_to_entry(r) for r in rows]

    def get_by_id(self, entry_id: str) -> Optional[SleepEntry]:
        row = self.store.query_one("SELECT * FROM sleep_entries WHERE id = ?", (entry_id,))
        return _row_to_entry(row) if row else None

    def get_by_date(self, date: str) -> Optional[SleepEntry]:
        row = self.store.query_one("SELECT * FROM sleep_entries WHERE date = ?", (date,))
        return _row_to_entry(row) if row else None

    def get_by_date_range(self, start: str, end: str) -> List[SleepEntry]:
        rows = self.store.query(
            "SELECT * FROM sleep_entries WHERE date >= ? AND date <= ? ORDER BY date ASC",
            (start, end),
        )
        return [_row_to_entry(r) for r in rows]

    def create(self, data: SleepEntryCreate) -> SleepEntry:
        entry_id = new_id()
        now = utc_now()
        self.store.execute(
            """
            INSERT INTO sleep_entries (
                id, date, bedtime, wake_time, duration_minutes, quality,
                notes, factors, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                entry_id,
                data.date,
                data.bedtime,
                data.wake_time,
                data.duration_minutes,
                data.quality,
                data.notes,
                serialize_list_field(data.factors),
                now,
                now,
            ),
        )
        return SleepEntry(**data.model_dump(), id=entry_id, created_at=now, updated_at=now)

    def update(self, entry_id: str, patch: SleepEntryPatch) -> bool:
        assignments: Dict[str, Any] = {}
        for field, value in patch.present_fields().items():
            if field == "factors":
                value = serialize_list_field(value)
            assignments[_COLUMNS[field]] = value
        return self.store.update_columns("sleep_entries", entry_id, assignments) > 0

    def delete(self, entry_id: str) -> bool:
        return self.store.execute("DELETE FROM sleep_entries WHERE id = ?", (entry_id,)) > 0

    def get_average_quality(self, start: str, end: str) -> Optional[float]:
        value = self.store.scalar(
            "SELECT AVG(quality) FROM sleep_entries WHERE date >= ? AND date <= ?",
            (start, end),
        )
        return float(value) if value is not None else None

    def get_average_duration(self, start: str, end: str) -> Optional[float]:
        value = self.store.scalar(
            "SELECT AVG(duration_minutes) FROM sleep_entries WHERE date >= ? AND date <= ?",
            (start, end),
        )
        return float(value) if value is not None else None
