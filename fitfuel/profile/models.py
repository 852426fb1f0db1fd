# -*- coding: utf-8 -*-
"""Profile domain: Pydantic models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Goal(str, Enum):
    BUILD_MUSCLE = "build_muscle"
    LOSE_WEIGHT = "lose_weight"
    IMPROVE_PERFORMANCE = "improve_performance"
    MAINTAIN_FITNESS = "maintain_fitness"


class TrainingFrequency(str, Enum):
    TWO_THREE_DAYS = "2-3"
    FOUR_FIVE_DAYS = "4-5"
    SIX_PLUS_DAYS = "6+"


class DietaryPreference(str, Enum):
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    GLUTEN_FREE = "gluten_free"
    KETO = "keto"
    NO_RESTRICTIONS = "no_restrictions"


class NutritionTargets(BaseModel):
    calories: int = Field(..., ge=0)
    protein_g: float = Field(..., ge=0)
    carb_g: float = Field(..., ge=0)
    fat_g: float = Field(..., ge=0)


class UserProfile(BaseModel):
    name: str = Field(..., min_length=1, max_length=128)
    goal: Goal
    training_frequency: TrainingFrequency
    dietary_preference: DietaryPreference
    weight_kg: float = Field(..., gt=0)
    daily_calorie_target: int = Field(..., ge=0)
    daily_protein_target: float = Field(..., ge=0)
    daily_carb_target: float = Field(..., ge=0)
    daily_fat_target: float = Field(..., ge=0)
    onboarding_completed: bool = False

    def targets(self) -> NutritionTargets:
        return NutritionTargets(
            calories=self.daily_calorie_target,
            protein_g=self.daily_protein_target,
            carb_g=self.daily_carb_target,
            fat_g=self.daily_fat_target,
        )

    def with_targets(self, targets: NutritionTargets) -> "UserProfile":
        """Copy with all four target fields replaced together."""
        return self.model_copy(
            update={
                "daily_calorie_target": targets.calories,
                "daily_protein_target": targets.protein_g,
                "daily_carb_target": targets.carb_g,
                "daily_fat_target": targets.fat_g,
            }
        )
