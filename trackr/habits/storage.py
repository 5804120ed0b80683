# -*- coding: utf-8 -*-
"""Habits — SQLite repository."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Set

from ..aggregation import compute_streak, group_weekly_completions, week_window
from ..app_db import StoreHandle
from ..fields import new_id, to_flag, today as local_today, utc_now
from .models import Habit, HabitCompletion, HabitCreate, HabitPatch

_HABIT_COLUMNS = {
    "name": "name",
    "description": "description",
    "icon": "icon",
    "color": "color",
    "frequency": "frequency",
    "target_days_per_week": "target_days_per_week",
    "reminder_time": "reminder_time",
}


def _row_to_habit(row: Dict[str, Any]) -> Habit:
    return Habit(
        id=row["id"],
        name=row["name"],
        description=row.get("description"),
        icon=row.get("icon"),
        color=row["color"],
        frequency=row["frequency"],
        target_days_per_week=row.get("target_days_per_week"),
        reminder_time=row.get("reminder_time"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def _row_to_completion(row: Dict[str, Any]) -> HabitCompletion:
    return HabitCompletion(
        id=row["id"],
        habit_id=row["habit_id"],
        date=row["date"],
        completed=bool(row["completed"]),
        completed_at=row.get("completed_at"),
        notes=row.get("notes"),
    )


class HabitRepository:
    def __init__(self, store: StoreHandle) -> None:
        self.store = store

    # ---- habits ----

    def get_all(self) -> List[Habit]:
        rows = self.store.query("SELECT * FROM habits ORDER BY created_at DESC, rowid DESC")
        return [_row_to_habit(r) for r in rows]

    def get_by_id(self, habit_id: str) -> Optional[Habit]:
        row = self.store.query_one("SELECT * FROM habits WHERE id = ?", (habit_id,))
        return _row_to_habit(row) if row else None

    def create(self, data: HabitCreate) -> Habit:
        habit_id = new_id()
        now = utc_now()
        self.store.execute(
            """
            INSERT INTO habits (
                id, name, description, icon, color, frequency,
                target_days_per_week, reminder_time, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                habit_id,
                data.name,
                data.description,
                data.icon,
                data.color,
                data.frequency,
                data.target_days_per_week,
                data.reminder_time,
                now,
                now,
            ),
        )
        return Habit(**data.model_dump(), id=habit_id, created_at=now, updated_at=now)

    def update(self, habit_id: str, patch: HabitPatch) -> bool:
        assignments = {_HABIT_COLUMNS[k]: v for k, v in patch.present_fields().items()}
        return self.store.update_columns("habits", habit_id, assignments) > 0

    def delete(self, habit_id: str) -> bool:
        # Completions go with it through ON DELETE CASCADE.
        return self.store.execute("DELETE FROM habits WHERE id = ?", (habit_id,)) > 0

    # ---- completions ----

    def get_all_completions(self) -> List[HabitCompletion]:
        rows = self.store.query("SELECT * FROM habit_completions ORDER BY date DESC, rowid DESC")
        return [_row_to_completion(r) for r in rows]

    def get_completions_for_date(self, date: str) -> List[HabitCompletion]:
        rows = self.store.query("SELECT * FROM habit_completions WHERE date = ? ORDER BY rowid", (date,))
        return [_row_to_completion(r) for r in rows]

    def get_completions_for_habit(self, habit_id: str, start: str, end: str) -> List[HabitCompletion]:
        rows = self.store.query(
            """
            SELECT * FROM habit_completions
            WHERE habit_id = ? AND date >= ? AND date <= ?
            ORDER BY date ASC
            """,
            (habit_id, start, end),
        )
        return [_row_to_completion(r) for r in rows]

    def get_completions_for_date_range(self, start: str, end: str) -> List[HabitCompletion]:
        rows = self.store.query(
            "SELECT * FROM habit_completions WHERE date >= ? AND date <= ? ORDER BY date ASC, rowid ASC",
            (start, end),
        )
        return [_row_to_completion(r) for r in rows]

    # Uniform range contract; habits themselves are not dated.
    get_by_date = get_completions_for_date
    get_by_date_range = get_completions_for_date_range

    def set_completion(
        self,
        habit_id: str,
        date: str,
        completed: bool,
        notes: Optional[str] = None,
    ) -> HabitCompletion:
        """Upsert the single completion row for ``(habit_id, date)``."""
        completion_id = new_id()
        completed_at = utc_now() if completed else None
        self.store.execute(
            """
            INSERT INTO habit_completions (id, habit_id, date, completed, completed_at, notes)
            VALUES (?, ?, ?, ?, ?, ?)
            ON CONFLICT(habit_id, date) DO UPDATE SET
                completed = excluded.completed,
                completed_at = excluded.completed_at,
                notes = excluded.notes
            """,
            (completion_id, habit_id, date, to_flag(completed), completed_at, notes),
        )
        row = self.store.query_one(
            "SELECT id FROM habit_completions WHERE habit_id = ? AND date = ?",
            (habit_id, date),
        )
        return HabitCompletion(
            id=row["id"] if row else completion_id,
            habit_id=habit_id,
            date=date,
            completed=completed,
            completed_at=completed_at,
            notes=notes,
        )

    # ---- derived ----

    def get_completed_dates(self, habit_id: str, until: str) -> List[str]:
        rows = self.store.query(
            """
            SELECT date FROM habit_completions
            WHERE habit_id = ? AND completed = 1 AND date <= ?
            ORDER BY date DESC
            """,
            (habit_id, until),
        )
        return [r["date"] for r in rows]

    def get_streak(self, habit_id: str, today: Optional[str] = None) -> int:
        as_of = today or local_today()
        return compute_streak(self.get_completed_dates(habit_id, as_of), as_of)

    def get_weekly_completions(self, date: str) -> Dict[str, Set[str]]:
        start, end = week_window(date)
        return group_weekly_completions(self.get_completions_for_date_range(start, end))
