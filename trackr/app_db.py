# -*- coding: utf-8 -*-
"""Store handle: one SQLite connection per process, migrated on open.

Repositories receive a :class:`StoreHandle` instead of reaching for a global
connection. The handle opens lazily, applies pending migrations once per open,
and can be closed and re-opened (tests, "clear all data" keeps it open).
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Union

from .errors import ConstraintViolation, StorageFault
from .fields import utc_now
from .migrations import apply_pending
from .schema import MIGRATIONS, TABLES, Migration

logger = logging.getLogger(__name__)

Params = Union[Sequence[Any], Mapping[str, Any]]

MEMORY = ":memory:"


def connect(db_path: Union[Path, str]) -> sqlite3.Connection:
    if str(db_path) != MEMORY:
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    # Autocommit; multi-statement writes go through StoreHandle.transaction().
    conn = sqlite3.connect(str(db_path), check_same_thread=False, isolation_level=None)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON;")
    return conn


@contextmanager
def _translate_errors() -> Iterator[None]:
    try:
        yield
    except sqlite3.IntegrityError as exc:
        raise ConstraintViolation(str(exc)) from exc
    except sqlite3.Error as exc:
        raise StorageFault(str(exc)) from exc


class StoreHandle:
    def __init__(self, db_path: Union[Path, str], migrations: Sequence[Migration] = MIGRATIONS) -> None:
        self.db_path = db_path
        self.migrations = tuple(migrations)
        self._conn: Optional[sqlite3.Connection] = None
        self._tx_depth = 0
        # One statement or transaction at a time across threads.
        self._lock = threading.RLock()

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def open(self) -> sqlite3.Connection:
        with self._lock:
            return self._open()

    def _open(self) -> sqlite3.Connection:
        if self._conn is not None:
            return self._conn
        try:
            conn = connect(self.db_path)
        except (OSError, sqlite3.Error) as exc:
            raise StorageFault(f"Cannot open store at {self.db_path}: {exc}") from exc
        try:
            applied = apply_pending(conn, self.migrations)
        except Exception:
            # Never hand out a half-migrated store.
            conn.close()
            raise
        if applied:
            logger.info("Store %s migrated: %s", self.db_path, ", ".join(applied))
        logger.debug("Store opened: %s", self.db_path)
        self._conn = conn
        return conn

    def close(self) -> None:
        with self._lock:
            if self._conn is None:
                return
            self._conn.close()
            self._conn = None
            self._tx_depth = 0
        logger.debug("Store closed: %s", self.db_path)

    @property
    def conn(self) -> sqlite3.Connection:
        return self.open()

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Group several writes into one logical write; nested use joins the outer one.

        Holds the handle lock for the whole block; other threads wait for COMMIT or ROLLBACK.
        """
        with self._lock:
            conn = self.conn
            if self._tx_depth:
                self._tx_depth += 1
                try:
                    yield conn
                finally:
                    self._tx_depth -= 1
                return

            with _translate_errors():
                conn.execute("BEGIN")
            self._tx_depth = 1
            try:
                yield conn
            except BaseException:
                self._tx_depth = 0
                conn.execute("ROLLBACK")
                raise
            self._tx_depth = 0
            with _translate_errors():
                conn.execute("COMMIT")

    def execute(self, sql: str, params: Params = ()) -> int:
        with self._lock, _translate_errors():
            cur = self.conn.execute(sql, params)
            return cur.rowcount

    def execute_many(self, sql: str, rows: Iterable[Params]) -> int:
        with self._lock, _translate_errors():
            cur = self.conn.executemany(sql, rows)
            return cur.rowcount

    def query(self, sql: str, params: Params = ()) -> List[Dict[str, Any]]:
        with self._lock, _translate_errors():
            rows = self.conn.execute(sql, params).fetchall()
        return [dict(r) for r in rows]

    def query_one(self, sql: str, params: Params = ()) -> Optional[Dict[str, Any]]:
        with self._lock, _translate_errors():
            row = self.conn.execute(sql, params).fetchone()
        return dict(row) if row else None

    def scalar(self, sql: str, params: Params = ()) -> Any:
        with self._lock, _translate_errors():
            row = self.conn.execute(sql, params).fetchone()
        return row[0] if row else None

    def update_columns(self, table: str, row_id: str, assignments: Mapping[str, Any]) -> int:
        """``UPDATE table SET <assignments>, updated_at = now WHERE id = ?``."""
        columns = [f"{column} = ?" for column in assignments]
        values: List[Any] = list(assignments.values())
        columns.append("updated_at = ?")
        values.append(utc_now())
        values.append(row_id)
        return self.execute(f"UPDATE {table} SET {', '.join(columns)} WHERE id = ?", values)

    def clear_all_data(self) -> None:
        """Delete every domain row; the migration ledger and the connection survive."""
        with self.transaction() as conn:
            with _translate_errors():
                for table in TABLES:
                    conn.execute(f"DELETE FROM {table}")
        logger.info("Cleared all data in %s", self.db_path)
