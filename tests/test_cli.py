# -*- coding: utf-8 -*-

from __future__ import annotations

import contextlib
import io
import unittest

from trackr.cli import main
from trackr.habits.models import HabitCreate
from trackr.habits.storage import HabitRepository

from store_case import StoreTestCase


class TestCli(StoreTestCase):
    def _run(self, *argv: str):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            code = main(["--db-path", str(self.db_path), *argv])
        return code, out.getvalue()

    def test_migrate_lists_ledger(self):
        code, out = self._run("migrate")
        self.assertEqual(code, 0)
        self.assertIn("001_initial_schema", out)

    def test_streak_and_clear(self):
        repo = HabitRepository(self.store)
        habit = repo.create(HabitCreate(name="Read", color="#fff"))
        repo.set_completion(habit.id, "2026-02-18", True)
        self.store.close()

        code, out = self._run("streak", habit.id, "--today", "2026-02-18")
        self.assertEqual(code, 0)
        self.assertIn("Read: 1 day(s)", out)

        code, _ = self._run("streak", "missing")
        self.assertEqual(code, 1)

        code, _ = self._run("clear", "-y")
        self.assertEqual(code, 0)
        self.assertEqual(HabitRepository(self.reopen()).get_all(), [])

    def test_export_csv(self):
        out_dir = self._tmp / "out"
        code, _ = self._run("export-csv", "habits", "--out", str(out_dir))
        self.assertEqual(code, 0)
        self.assertTrue((out_dir / "trackr-habits.csv").exists())


if __name__ == "__main__":
    unittest.main()
