# -*- coding: utf-8 -*-
"""Nutrition — SQLite repository for meals and food items."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from ..aggregation import compute_meal_totals
from ..app_db import StoreHandle
from ..fields import new_id, parse_json_field, serialize_json_field, to_flag, utc_now
from .models import FoodItem, FoodItemCreate, Meal, MealCreate, MealPatch, NutritionTotals

logger = logging.getLogger(__name__)

_MEAL_COLUMNS = tuple(MealPatch.model_fields)


def _row_to_meal(row: Dict[str, Any]) -> Meal:
    return Meal(
        id=row["id"],
        date=row["date"],
        meal_type=row["meal_type"],
        name=row.get("name"),
        total_calories=row.get("total_calories") or 0.0,
        total_protein=row.get("total_protein"),
        total_carbs=row.get("total_carbs"),
        total_fat=row.get("total_fat"),
        total_fiber=row.get("total_fiber"),
        photo_uri=row.get("photo_uri"),
        ai_analysis=parse_json_field(row.get("ai_analysis")),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def _row_to_food(row: Dict[str, Any]) -> FoodItem:
    return FoodItem(
        id=row["id"],
        meal_id=row["meal_id"],
        name=row["name"],
        quantity=row["quantity"],
        unit=row["unit"],
        calories=row["calories"],
        protein=row.get("protein"),
        carbs=row.get("carbs"),
        fat=row.get("fat"),
        is_ai_generated=bool(row.get("is_ai_generated")),
        confidence=row.get("confidence"),
    )


class NutritionRepository:
    def __init__(self, store: StoreHandle) -> None:
        self.store = store

    # ---- reads ----

    def _attach_foods(self, meals: List[Meal]) -> List[Meal]:
        if not meals:
            return meals
        placeholders = ", ".join("?" for _ in meals)
        rows = self.store.query(
            f"SELECT * FROM food_items WHERE meal_id IN ({placeholders}) ORDER BY rowid",
            [m.id for m in meals],
        )
        by_meal: Dict[str, List[FoodItem]] = {}
        for row in rows:
            food = _row_to_food(row)
            by_meal.setdefault(food.meal_id, []).append(food)
        for meal in meals:
            meal.foods = by_meal.get(meal.id, [])
        return meals

    def get_all(self) -> List[Meal]:
        rows = self.store.query("SELECT * FROM meals ORDER BY date DESC, created_at DESC")
        return self._attach_foods([_row_to_meal(r) for r in rows])

    def get_by_id(self, meal_id: str) -> Optional[Meal]:
        row = self.store.query_one("SELECT * FROM meals WHERE id = ?", (meal_id,))
        if not row:
            return None
        meal = _row_to_meal(row)
        meal.foods = self.get_food_items(meal_id)
        return meal

    def get_by_date(self, date: str) -> List[Meal]:
        rows = self.store.query("SELECT * FROM meals WHERE date = ? ORDER BY created_at ASC", (date,))
        return self._attach_foods([_row_to_meal(r) for r in rows])

    def get_by_date_range(self, start: str, end: str) -> List[Meal]:
        rows = self.store.query(
            "SELECT * FROM meals WHERE date >= ? AND date <= ? ORDER BY date ASC, created_at ASC",
            (start, end),
        )
        return self._attach_foods([_row_to_meal(r) for r in rows])

    def get_food_items(self, meal_id: str) -> List[FoodItem]:
        rows = self.store.query("SELECT * FROM food_items WHERE meal_id = ? ORDER BY rowid", (meal_id,))
        return [_row_to_food(r) for r in rows]

    # ---- writes ----

    def _insert_food(self, meal_id: str, food: FoodItemCreate) -> FoodItem:
        food_id = new_id()
        self.store.execute(
            """
            INSERT INTO food_items (
                id, meal_id, name, quantity, unit, calories, protein, carbs, fat,
                is_ai_generated, confidence
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                food_id,
                meal_id,
                food.name,
                food.quantity,
                food.unit,
                food.calories,
                food.protein,
                food.carbs,
                food.fat,
                to_flag(food.is_ai_generated),
                food.confidence,
            ),
        )
        return FoodItem(**food.model_dump(), id=food_id, meal_id=meal_id)

    def create(self, data: MealCreate, foods: Iterable[FoodItemCreate] = ()) -> Meal:
        """Insert a meal and its food items as one write.

        With food items the stored totals are their sum; without, the totals
        given on ``data`` are kept (quick calorie logging).
        """
        foods = list(foods)
        meal_id = new_id()
        now = utc_now()
        fields = data.model_dump(exclude={"foods"})
        if foods:
            totals = compute_meal_totals(foods)
            fields.update(
                total_calories=totals.calories,
                total_protein=totals.protein,
                total_carbs=totals.carbs,
                total_fat=totals.fat,
            )

        with self.store.transaction():
            self.store.execute(
                """
                INSERT INTO meals (
                    id, date, meal_type, name, total_calories, total_protein, total_carbs,
                    total_fat, total_fiber, photo_uri, ai_analysis, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    meal_id,
                    fields["date"],
                    fields["meal_type"],
                    fields["name"],
                    fields["total_calories"],
                    fields["total_protein"],
                    fields["total_carbs"],
                    fields["total_fat"],
                    fields["total_fiber"],
                    fields["photo_uri"],
                    serialize_json_field(fields["ai_analysis"]),
                    now,
                    now,
                ),
            )
            created_foods = [self._insert_food(meal_id, food) for food in foods]

        return Meal(**fields, id=meal_id, foods=created_foods, created_at=now, updated_at=now)

    def update(self, meal_id: str, patch: MealPatch) -> bool:
        assignments: Dict[str, Any] = {}
        for field, value in patch.present_fields().items():
            if field not in _MEAL_COLUMNS:
                continue
            if field == "ai_analysis":
                value = serialize_json_field(value)
            assignments[field] = value
        return self.store.update_columns("meals", meal_id, assignments) > 0

    def delete(self, meal_id: str) -> bool:
        # Food items go with it through ON DELETE CASCADE.
        return self.store.execute("DELETE FROM meals WHERE id = ?", (meal_id,)) > 0

    def add_food_item(self, meal_id: str, food: FoodItemCreate) -> FoodItem:
        with self.store.transaction():
            created = self._insert_food(meal_id, food)
            self.recalculate_meal_totals(meal_id)
        return created

    def delete_food_item(self, food_id: str, meal_id: str) -> bool:
        with self.store.transaction():
            deleted = self.store.execute(
                "DELETE FROM food_items WHERE id = ? AND meal_id = ?",
                (food_id, meal_id),
            )
            self.recalculate_meal_totals(meal_id)
        return deleted > 0

    def recalculate_meal_totals(self, meal_id: str) -> NutritionTotals:
        """Write the sum of the meal's current food items back onto the meal row."""
        totals = compute_meal_totals(self.get_food_items(meal_id))
        self.store.execute(
            """
            UPDATE meals
            SET total_calories = ?, total_protein = ?, total_carbs = ?, total_fat = ?, updated_at = ?
            WHERE id = ?
            """,
            (totals.calories, totals.protein, totals.carbs, totals.fat, utc_now(), meal_id),
        )
        logger.debug("Meal %s totals recalculated: %s kcal", meal_id, totals.calories)
        return totals

    # ---- aggregates ----

    def get_daily_totals(self, date: str) -> NutritionTotals:
        row = self.store.query_one(
            """
            SELECT
                COALESCE(SUM(total_calories), 0) AS calories,
                COALESCE(SUM(total_protein), 0) AS protein,
                COALESCE(SUM(total_carbs), 0) AS carbs,
                COALESCE(SUM(total_fat), 0) AS fat
            FROM meals WHERE date = ?
            """,
            (date,),
        ) or {}
        return NutritionTotals(
            calories=float(row.get("calories") or 0.0),
            protein=float(row.get("protein") or 0.0),
            carbs=float(row.get("carbs") or 0.0),
            fat=float(row.get("fat") or 0.0),
        )
