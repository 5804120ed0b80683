# -*- coding: utf-8 -*-
"""Forward-only migration engine backed by a ``migrations`` ledger table."""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass
from typing import List, Sequence

from .errors import MigrationError, StorageFault
from .fields import utc_now
from .schema import MIGRATIONS, Migration

logger = logging.getLogger(__name__)

_LEDGER_DDL = """
CREATE TABLE IF NOT EXISTS migrations (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL UNIQUE,
    applied_at TEXT NOT NULL
);
"""


@dataclass(frozen=True)
class AppliedMigration:
    name: str
    applied_at: str


def _check_unique(migrations: Sequence[Migration]) -> None:
    seen = set()
    for migration in migrations:
        if migration.name in seen:
            raise ValueError(f"Duplicate migration name: {migration.name}")
        seen.add(migration.name)


def applied_migrations(conn: sqlite3.Connection) -> List[AppliedMigration]:
    rows = conn.execute("SELECT name, applied_at FROM migrations ORDER BY id ASC").fetchall()
    return [AppliedMigration(name=r["name"], applied_at=r["applied_at"]) for r in rows]


def apply_pending(conn: sqlite3.Connection, migrations: Sequence[Migration] = MIGRATIONS) -> List[str]:
    """Run every migration not yet recorded in the ledger, in declaration order.

    Returns the names applied by this call. A failing step raises
    :class:`MigrationError` and is not recorded; earlier steps stay applied.
    """
    _check_unique(migrations)
    try:
        conn.executescript(_LEDGER_DDL)
        applied = {r["name"] for r in conn.execute("SELECT name FROM migrations").fetchall()}
    except sqlite3.Error as exc:
        raise StorageFault(f"Cannot read migration ledger: {exc}") from exc

    newly_applied: List[str] = []
    for migration in migrations:
        if migration.name in applied:
            continue
        try:
            conn.executescript(migration.sql)
            conn.execute(
                "INSERT INTO migrations (name, applied_at) VALUES (?, ?)",
                (migration.name, utc_now()),
            )
        except sqlite3.Error as exc:
            logger.exception("Migration %s failed", migration.name)
            raise MigrationError(migration.name, str(exc)) from exc
        logger.info("Applied migration %s", migration.name)
        newly_applied.append(migration.name)

    if not newly_applied:
        logger.debug("Schema up to date (%d migrations)", len(applied))
    return newly_applied
