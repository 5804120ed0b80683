# -*- coding: utf-8 -*-
"""Journal — SQLite repository."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..aggregation import collect_tags
from ..app_db import StoreHandle
from ..fields import list_field_or_none, new_id, serialize_list_field, to_flag, utc_now
from .models import JournalEntry, JournalEntryCreate, JournalEntryPatch

_COLUMNS = tuple(JournalEntryPatch.model_fields)


def _row_to_entry(row: Dict[str, Any]) -> JournalEntry:
    return JournalEntry(
        id=row["id"],
        date=row["date"],
        title=row.get("title"),
        content=row["content"],
        mood=row.get("mood"),
        tags=list_field_or_none(row.get("tags")),
        is_scanned=bool(row.get("is_scanned")),
        original_image_uri=row.get("original_image_uri"),
        ocr_confidence=row.get("ocr_confidence"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


class JournalRepository:
    def __init__(self, store: StoreHandle) -> None:
        self.store = store

    def get_all(self) -> List[JournalEntry]:
        rows = self.store.query("SELECT * FROM journal_entries ORDER BY date DESC, created_at DESC")
        return [_row_to_entry(r) for r in rows]

    def get_by_id(self, entry_id: str) -> Optional[JournalEntry]:
        row = self.store.query_one("SELECT * FROM journal_entries WHERE id = ?", (entry_id,))
        return _row_to_entry(row) if row else None

    def get_by_date(self, date: str) -> List[JournalEntry]:
        rows = self.store.query(
            "SELECT * FROM journal_entries WHERE date = ? ORDER BY created_at DESC",
            (date,),
        )
        return [_row_to_entry(r) for r in rows]

    def get_by_date_range(self, start: str, end: str) -> List[JournalEntry]:
        # Newest first: the journal list screen reads this directly.
        rows = self.store.query(
            """
            SELECT * FROM journal_entries
            WHERE date >= ? AND date <= ?
            ORDER BY date DESC, created_at DESC
            """,
            (start, end),
        )
        return [_row_to_entry(r) for r in rows]

    def search(self, query: str) -> List[JournalEntry]:
        pattern = f"%{query}%"
        rows = self.store.query(
            """
            SELECT * FROM journal_entries
            WHERE content LIKE ? OR title LIKE ?
            ORDER BY date DESC, created_at DESC
            """,
            (pattern, pattern),
        )
        return [_row_to_entry(r) for r in rows]

    def get_entries_with_mood(self, start: str, end: str) -> List[JournalEntry]:
        rows = self.store.query(
            """
            SELECT * FROM journal_entries
            WHERE date >= ? AND date <= ? AND mood IS NOT NULL
            ORDER BY date ASC
            """,
            (start, end),
        )
        return [_row_to_entry(r) for r in rows]

    def create(self, data: JournalEntryCreate) -> JournalEntry:
        entry_id = new_id()
        now = utc_now()
        self.store.execute(
            """
            INSERT INTO journal_entries (
                id, date, title, content, mood, tags, is_scanned,
                original_image_uri, ocr_confidence, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                entry_id,
                data.date,
                data.title,
                data.content,
                data.mood,
                serialize_list_field(data.tags),
                to_flag(data.is_scanned),
                data.original_image_uri,
                data.ocr_confidence,
                now,
                now,
            ),
        )
        return JournalEntry(**data.model_dump(), id=entry_id, created_at=now, updated_at=now)

    def update(self, entry_id: str, patch: JournalEntryPatch) -> bool:
        assignments: Dict[str, Any] = {}
        for field, value in patch.present_fields().items():
            if field not in _COLUMNS:
                continue
            if field == "tags":
                value = serialize_list_field(value)
            elif field == "is_scanned":
                value = to_flag(value)
            assignments[field] = value
        return self.store.update_columns("journal_entries", entry_id, assignments) > 0

    def delete(self, entry_id: str) -> bool:
        return self.store.execute("DELETE FROM journal_entries WHERE id = ?", (entry_id,)) > 0

    def get_all_tags(self) -> List[str]:
        rows = self.store.query("SELECT tags FROM journal_entries WHERE tags IS NOT NULL")
        return collect_tags(r["tags"] for r in rows)
