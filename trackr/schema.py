# -*- coding: utf-8 -*-
"""Schema catalog: the ordered, named migrations that build the store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Migration:
    name: str
    sql: str


HABIT_FREQUENCIES = ("daily", "weekly", "custom")
EXERCISE_INTENSITIES = ("low", "moderate", "high", "very_high")
DISTANCE_UNITS = ("km", "miles")
MEAL_TYPES = ("breakfast", "lunch", "dinner", "snack")


def _in(values: Tuple[str, ...]) -> str:
    return ", ".join(f"'{v}'" for v in values)


_INITIAL_SCHEMA = f"""
CREATE TABLE IF NOT EXISTS habits (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    description TEXT,
    icon TEXT,
    color TEXT NOT NULL,
    frequency TEXT NOT NULL CHECK (frequency IN ({_in(HABIT_FREQUENCIES)})),
    target_days_per_week INTEGER CHECK (target_days_per_week BETWEEN 1 AND 7),
    reminder_time TEXT,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS habit_completions (
    id TEXT PRIMARY KEY,
    habit_id TEXT NOT NULL,
    date TEXT NOT NULL,
    completed INTEGER NOT NULL DEFAULT 0,
    completed_at TEXT,
    notes TEXT,
    UNIQUE (habit_id, date),
    FOREIGN KEY(habit_id) REFERENCES habits(id) ON DELETE CASCADE
);

CREATE INDEX IF NOT EXISTS idx_habit_completions_date ON habit_completions(date);
CREATE INDEX IF NOT EXISTS idx_habit_completions_habit_date ON habit_completions(habit_id, date);

CREATE TABLE IF NOT EXISTS sleep_entries (
    id TEXT PRIMARY KEY,
    date TEXT NOT NULL UNIQUE,
    bedtime TEXT NOT NULL,
    wake_time TEXT NOT NULL,
    duration_minutes INTEGER NOT NULL,
    quality INTEGER NOT NULL CHECK (quality BETWEEN 1 AND 5),
    notes TEXT,
    factors TEXT,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_sleep_entries_date ON sleep_entries(date);

CREATE TABLE IF NOT EXISTS exercise_sessions (
    id TEXT PRIMARY KEY,
    date TEXT NOT NULL,
    type TEXT NOT NULL,
    custom_type TEXT,
    duration_minutes INTEGER NOT NULL,
    intensity TEXT NOT NULL CHECK (intensity IN ({_in(EXERCISE_INTENSITIES)})),
    calories_burned INTEGER,
    notes TEXT,
    heart_rate_avg INTEGER,
    heart_rate_max INTEGER,
    distance REAL,
    distance_unit TEXT CHECK (distance_unit IN ({_in(DISTANCE_UNITS)})),
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_exercise_sessions_date ON exercise_sessions(date);

CREATE TABLE IF NOT EXISTS meals (
    id TEXT PRIMARY KEY,
    date TEXT NOT NULL,
    meal_type TEXT NOT NULL CHECK (meal_type IN ({_in(MEAL_TYPES)})),
    name TEXT,
    total_calories REAL NOT NULL DEFAULT 0,
    total_protein REAL,
    total_carbs REAL,
    total_fat REAL,
    total_fiber REAL,
    photo_uri TEXT,
    ai_analysis TEXT,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS food_items (
    id TEXT PRIMARY KEY,
    meal_id TEXT NOT NULL,
    name TEXT NOT NULL,
    quantity REAL NOT NULL,
    unit TEXT NOT NULL,
    calories REAL NOT NULL,
    protein REAL,
    carbs REAL,
    fat REAL,
    is_ai_generated INTEGER NOT NULL DEFAULT 0,
    confidence REAL CHECK (confidence BETWEEN 0 AND 1),
    FOREIGN KEY(meal_id) REFERENCES meals(id) ON DELETE CASCADE
);

CREATE INDEX IF NOT EXISTS idx_meals_date ON meals(date);
CREATE INDEX IF NOT EXISTS idx_food_items_meal ON food_items(meal_id);

CREATE TABLE IF NOT EXISTS journal_entries (
    id TEXT PRIMARY KEY,
    date TEXT NOT NULL,
    title TEXT,
    content TEXT NOT NULL,
    mood INTEGER CHECK (mood BETWEEN 1 AND 5),
    tags TEXT,
    is_scanned INTEGER NOT NULL DEFAULT 0,
    original_image_uri TEXT,
    ocr_confidence REAL,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_journal_entries_date ON journal_entries(date);
"""


MIGRATIONS: Tuple[Migration, ...] = (
    Migration(name="001_initial_schema", sql=_INITIAL_SCHEMA),
    Migration(
        name="002_journal_search_index",
        sql="CREATE INDEX IF NOT EXISTS idx_journal_entries_date_created ON journal_entries(date DESC, created_at DESC);",
    ),
    Migration(
        name="003_exercise_type_index",
        sql="CREATE INDEX IF NOT EXISTS idx_exercise_sessions_type_date ON exercise_sessions(type, date);",
    ),
)

# Children before parents so a bulk delete never trips a foreign key.
TABLES: Tuple[str, ...] = (
    "habit_completions",
    "habits",
    "sleep_entries",
    "exercise_sessions",
    "food_items",
    "meals",
    "journal_entries",
)
