# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from trackr.app_db import StoreHandle
from trackr.errors import MigrationError
from trackr.migrations import apply_pending, applied_migrations
from trackr.schema import MIGRATIONS, TABLES, Migration

from store_case import StoreTestCase


def _schema_sql(store: StoreHandle):
    rows = store.query(
        "SELECT type, name, sql FROM sqlite_master WHERE sql IS NOT NULL ORDER BY type, name"
    )
    return [(r["type"], r["name"], r["sql"]) for r in rows]


class TestMigrations(StoreTestCase):
    def test_fresh_store_applies_every_migration_in_order(self):
        conn = self.store.open()
        names = [m.name for m in applied_migrations(conn)]
        self.assertEqual(names, [m.name for m in MIGRATIONS])

    def test_open_is_idempotent_across_restarts(self):
        self.store.open()
        before = _schema_sql(self.store)

        store = self.reopen()
        conn = store.open()
        self.assertEqual(apply_pending(conn, MIGRATIONS), [])
        self.assertEqual(_schema_sql(store), before)

        names = [m.name for m in applied_migrations(conn)]
        self.assertEqual(len(names), len(set(names)))
        self.assertEqual(len(names), len(MIGRATIONS))

    def test_every_domain_table_exists(self):
        self.store.open()
        for table in TABLES:
            count = self.store.scalar("SELECT COUNT(*) FROM sqlite_master WHERE type = 'table' AND name = ?", (table,))
            self.assertEqual(count, 1, table)

    def test_failing_migration_is_not_recorded_and_store_stays_closed(self):
        broken = MIGRATIONS + (Migration("004_broken", "CREATE TABLE oops (;"),)
        store = StoreHandle(self.db_path, migrations=broken)

        with self.assertRaises(MigrationError) as ctx:
            store.open()
        self.assertEqual(ctx.exception.name, "004_broken")
        self.assertFalse(store.is_open)

        conn = self.store.open()
        names = [m.name for m in applied_migrations(conn)]
        self.assertNotIn("004_broken", names)
        self.assertEqual(names, [m.name for m in MIGRATIONS])

    def test_duplicate_migration_names_are_rejected(self):
        conn = self.store.open()
        dupes = (Migration("x", "SELECT 1;"), Migration("x", "SELECT 2;"))
        with self.assertRaises(ValueError):
            apply_pending(conn, dupes)

    def test_new_migration_runs_once_on_existing_store(self):
        self.store.open()
        self.store.close()
        extended = MIGRATIONS + (Migration("004_extra_index", "CREATE INDEX IF NOT EXISTS idx_extra ON habits(name);"),)

        store = StoreHandle(self.db_path, migrations=extended)
        try:
            conn = store.open()
            names = [m.name for m in applied_migrations(conn)]
            self.assertEqual(names[-1], "004_extra_index")
            self.assertEqual(apply_pending(conn, extended), [])
        finally:
            store.close()

    def test_clear_all_data_keeps_schema_and_ledger(self):
        self.store.open()
        self.store.execute(
            "INSERT INTO habits (id, name, color, frequency, created_at, updated_at) VALUES (?, ?, ?, ?, ?, ?)",
            ("h1", "Read", "#fff", "daily", "2026-01-01T00:00:00.000Z", "2026-01-01T00:00:00.000Z"),
        )
        self.store.clear_all_data()

        self.assertTrue(self.store.is_open)
        self.assertEqual(self.store.scalar("SELECT COUNT(*) FROM habits"), 0)
        self.assertEqual(self.store.scalar("SELECT COUNT(*) FROM migrations"), len(MIGRATIONS))


if __name__ == "__main__":
    unittest.main()
