# -*- coding: utf-8 -*-
"""Grocery domain: Pydantic models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..windows import local_naive


class GroceryCategory(str, Enum):
    PROTEIN = "protein"
    DAIRY = "dairy"
    GRAINS = "grains"
    FRUITS = "fruits"
    VEGETABLES = "vegetables"
    OTHER = "other"


class GroceryItem(BaseModel):
    id: Optional[int] = None
    name: str = Field(..., min_length=1, max_length=256)
    quantity: str = Field("", max_length=128)
    category: GroceryCategory = GroceryCategory.OTHER
    is_purchased: bool = False
    notes: Optional[str] = Field(None, max_length=2000)
    created_at: datetime = Field(default_factory=datetime.now)

    @field_validator("created_at")
    @classmethod
    def _local_created_at(cls, value: datetime) -> datetime:
        return local_naive(value)
