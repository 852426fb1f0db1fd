# -*- coding: utf-8 -*-
"""Nutrition rollups over a date window (single pass, shared window)."""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..streams import Observable, combine_latest
from ..windows import DateWindow, WindowSource, as_window_stream
from .models import Meal, NutritionSummary


def meals_in_window(meals: Iterable[Meal], window: DateWindow) -> List[Meal]:
    selected = [meal for meal in meals if window.contains(meal.eaten_at)]
    selected.sort(key=lambda meal: meal.eaten_at, reverse=True)
    return selected


def summarize_meals(meals: Iterable[Meal], window: DateWindow) -> NutritionSummary:
    # An empty window sums to zero; missing values count as zero too.
    calories = 0
    protein = 0.0
    carbs = 0.0
    fat = 0.0
    count = 0
    for meal in meals:
        if not window.contains(meal.eaten_at):
            continue
        calories += int(meal.calories or 0)
        protein += float(meal.protein_g or 0.0)
        carbs += float(meal.carbs_g or 0.0)
        fat += float(meal.fat_g or 0.0)
        count += 1
    return NutritionSummary(
        calories=calories,
        protein_g=protein,
        carbs_g=carbs,
        fat_g=fat,
        meal_count=count,
    )


def observe_nutrition_summary(
    meals: Observable[List[Meal]],
    window: Optional[WindowSource] = None,
) -> Observable[NutritionSummary]:
    """Live summary, recomputed on every meal change and every window change."""
    return combine_latest([meals, as_window_stream(window)], summarize_meals)
