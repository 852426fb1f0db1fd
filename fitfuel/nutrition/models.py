# -*- coding: utf-8 -*-
"""Nutrition domain: Pydantic models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..windows import local_naive


class MealType(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class Meal(BaseModel):
    id: Optional[int] = None
    name: str = Field(..., min_length=1, max_length=256)
    meal_type: MealType
    calories: int = Field(0, ge=0)
    protein_g: float = Field(0.0, ge=0)
    carbs_g: float = Field(0.0, ge=0)
    fat_g: float = Field(0.0, ge=0)
    eaten_at: datetime
    notes: Optional[str] = Field(None, max_length=2000)

    @field_validator("eaten_at")
    @classmethod
    def _local_eaten_at(cls, value: datetime) -> datetime:
        return local_naive(value)


class NutritionSummary(BaseModel):
    calories: int = Field(0, ge=0)
    protein_g: float = Field(0.0, ge=0)
    carbs_g: float = Field(0.0, ge=0)
    fat_g: float = Field(0.0, ge=0)
    meal_count: int = Field(0, ge=0)
