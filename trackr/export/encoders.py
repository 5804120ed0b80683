# -*- coding: utf-8 -*-
"""CSV encoding (RFC 4180, every field quoted)."""

from __future__ import annotations

import csv
import io
from typing import Any, Dict, Iterable, List, Tuple

from pydantic import BaseModel

# (header, attribute) pairs; headers keep the app's camelCase names.
CSV_COLUMNS: Dict[str, List[Tuple[str, str]]] = {
    "habits": [
        ("id", "id"),
        ("name", "name"),
        ("description", "description"),
        ("frequency", "frequency"),
        ("color", "color"),
        ("icon", "icon"),
        ("reminderTime", "reminder_time"),
        ("createdAt", "created_at"),
    ],
    "sleep": [
        ("id", "id"),
        ("date", "date"),
        ("bedtime", "bedtime"),
        ("wakeTime", "wake_time"),
        ("durationMinutes", "duration_minutes"),
        ("quality", "quality"),
        ("notes", "notes"),
        ("factors", "factors"),
        ("createdAt", "created_at"),
    ],
    "exercise": [
        ("id", "id"),
        ("date", "date"),
        ("type", "type"),
        ("durationMinutes", "duration_minutes"),
        ("intensity", "intensity"),
        ("caloriesBurned", "calories_burned"),
        ("notes", "notes"),
        ("createdAt", "created_at"),
    ],
    "nutrition": [
        ("id", "id"),
        ("date", "date"),
        ("mealType", "meal_type"),
        ("name", "name"),
        ("totalCalories", "total_calories"),
        ("totalProtein", "total_protein"),
        ("totalCarbs", "total_carbs"),
        ("totalFat", "total_fat"),
        ("createdAt", "created_at"),
    ],
    "journal": [
        ("id", "id"),
        ("date", "date"),
        ("title", "title"),
        ("mood", "mood"),
        ("tags", "tags"),
        ("isScanned", "is_scanned"),
        ("createdAt", "created_at"),
    ],
}

CSV_CATEGORIES = tuple(CSV_COLUMNS)

LIST_SEPARATOR = ";"


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return LIST_SEPARATOR.join(str(v) for v in value)
    return str(value)


def encode_csv(category: str, records: Iterable[BaseModel]) -> str:
    """Header row plus one row per record.

    csv.QUOTE_ALL wraps every field and doubles embedded quotes, so commas and
    newlines stay inside their column and unset values come out as ``""``.
    """
    if category not in CSV_COLUMNS:
        raise ValueError(f"Unknown export category: {category}")
    columns = CSV_COLUMNS[category]

    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow([header for header, _ in columns])
    for record in records:
        writer.writerow([_cell(getattr(record, attr, None)) for _, attr in columns])
    return buf.getvalue()
