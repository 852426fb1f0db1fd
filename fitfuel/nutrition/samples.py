# -*- coding: utf-8 -*-
"""
示例餐单

Starter meals logged at onboarding, one table per dietary preference.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Tuple

from ..profile.models import DietaryPreference
from .models import Meal, MealType

# (name, type, kcal, protein, carbs, fat, notes)
_MealRow = Tuple[str, MealType, int, float, float, float, str]

_SAMPLE_MEALS: Dict[DietaryPreference, List[_MealRow]] = {
    DietaryPreference.VEGETARIAN: [
        ("Greek Yogurt with Berries", MealType.BREAKFAST, 250, 15, 30, 8, "Vegetarian - High protein breakfast"),
        ("Quinoa Salad with Feta", MealType.LUNCH, 450, 18, 55, 15, "Vegetarian - Complete protein source"),
        ("Vegetable Stir Fry with Tofu", MealType.DINNER, 380, 22, 40, 12, "Vegetarian - Rich in plant protein"),
        ("Apple with Almond Butter", MealType.SNACK, 200, 6, 25, 10, "Vegetarian - Healthy snack"),
    ],
    DietaryPreference.VEGAN: [
        ("Overnight Oats with Fruits", MealType.BREAKFAST, 320, 12, 55, 8, "Vegan - Plant-based breakfast"),
        ("Chickpea Curry with Rice", MealType.LUNCH, 480, 20, 70, 10, "Vegan - High protein legume meal"),
        ("Lentil Bolognese with Pasta", MealType.DINNER, 520, 25, 75, 12, "Vegan - Protein-rich dinner"),
        ("Hummus with Veggie Sticks", MealType.SNACK, 180, 8, 20, 8, "Vegan - Nutritious snack"),
    ],
    DietaryPreference.GLUTEN_FREE: [
        ("Scrambled Eggs with Avocado", MealType.BREAKFAST, 350, 18, 8, 28, "Gluten-free - High protein breakfast"),
        ("Grilled Chicken with Sweet Potato", MealType.LUNCH, 420, 35, 45, 10, "Gluten-free - Balanced meal"),
        ("Salmon with Quinoa and Vegetables", MealType.DINNER, 480, 32, 40, 18, "Gluten-free - Omega-3 rich"),
        ("Mixed Nuts and Seeds", MealType.SNACK, 220, 8, 10, 18, "Gluten-free - Healthy fats"),
    ],
    DietaryPreference.KETO: [
        ("Bacon and Eggs", MealType.BREAKFAST, 380, 22, 2, 30, "Keto - High fat, low carb"),
        ("Cauliflower Rice with Chicken", MealType.LUNCH, 420, 40, 8, 22, "Keto - Low carb alternative"),
        ("Salmon with Asparagus", MealType.DINNER, 450, 35, 6, 30, "Keto - High fat, high protein"),
        ("Cheese and Olives", MealType.SNACK, 200, 10, 3, 16, "Keto - Perfect keto snack"),
    ],
    DietaryPreference.NO_RESTRICTIONS: [
        ("Whole Grain Toast with Eggs", MealType.BREAKFAST, 320, 18, 35, 12, "Balanced breakfast"),
        ("Grilled Chicken Wrap", MealType.LUNCH, 450, 32, 40, 15, "High protein lunch"),
        ("Beef Stir Fry with Rice", MealType.DINNER, 520, 35, 55, 16, "Complete dinner"),
        ("Greek Yogurt with Honey", MealType.SNACK, 180, 12, 22, 4, "Protein-rich snack"),
    ],
}


def sample_meals(preference: DietaryPreference, eaten_at: datetime) -> List[Meal]:
    rows = _SAMPLE_MEALS.get(preference, _SAMPLE_MEALS[DietaryPreference.NO_RESTRICTIONS])
    return [
        Meal(
            name=name,
            meal_type=meal_type,
            calories=kcal,
            protein_g=float(protein),
            carbs_g=float(carbs),
            fat_g=float(fat),
            eaten_at=eaten_at,
            notes=notes,
        )
        for name, meal_type, kcal, protein, carbs, fat, notes in rows
    ]
