# -*- coding: utf-8 -*-
"""Nutrition domain: meals and the food items they own.

Meal totals are a rollup of the meal's food items and are recomputed in the
same transaction as every food item insert or delete.
"""
