# -*- coding: utf-8 -*-

from __future__ import annotations

import threading
import time
import unittest

from trackr.nutrition.models import FoodItemCreate, MealCreate
from trackr.nutrition.storage import NutritionRepository

from store_case import StoreTestCase


def _insert_habit(store, habit_id: str) -> None:
    store.execute(
        "INSERT INTO habits (id, name, color, frequency, created_at, updated_at) VALUES (?, ?, ?, ?, ?, ?)",
        (habit_id, habit_id, "#fff", "daily", "2026-02-18T00:00:00.000Z", "2026-02-18T00:00:00.000Z"),
    )


class TestTransactions(StoreTestCase):
    def test_rollback_on_error(self):
        with self.assertRaises(RuntimeError):
            with self.store.transaction():
                _insert_habit(self.store, "h1")
                raise RuntimeError("boom")
        self.assertEqual(self.store.scalar("SELECT COUNT(*) FROM habits"), 0)

    def test_nested_block_joins_outer(self):
        with self.assertRaises(RuntimeError):
            with self.store.transaction():
                with self.store.transaction():
                    _insert_habit(self.store, "h1")
                raise RuntimeError("boom")
        self.assertEqual(self.store.scalar("SELECT COUNT(*) FROM habits"), 0)

    def test_other_thread_write_survives_a_rollback(self):
        repo = NutritionRepository(self.store)
        self.store.open()
        in_transaction = threading.Event()
        writer_started = threading.Event()
        created = {}
        errors = []

        def failing_writer():
            try:
                with self.store.transaction():
                    repo.create(MealCreate(date="2026-02-17", meal_type="dinner", name="discarded"))
                    in_transaction.set()
                    writer_started.wait(5)
                    time.sleep(0.2)
                    raise RuntimeError("abort")
            except RuntimeError as exc:
                errors.append(exc)

        def concurrent_writer():
            in_transaction.wait(5)
            writer_started.set()
            meal = repo.create(
                MealCreate(date="2026-02-18", meal_type="lunch", name="kept"),
                [FoodItemCreate(name="rice", quantity=1, unit="cup", calories=250)],
            )
            created["meal"] = meal

        threads = [threading.Thread(target=failing_writer), threading.Thread(target=concurrent_writer)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(10)

        self.assertEqual(len(errors), 1)
        stored = repo.get_by_id(created["meal"].id)
        self.assertIsNotNone(stored)
        self.assertEqual(stored.total_calories, 250)
        self.assertEqual([m.name for m in repo.get_all()], ["kept"])


if __name__ == "__main__":
    unittest.main()
