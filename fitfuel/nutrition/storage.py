# -*- coding: utf-8 -*-
"""Meal storage (SQLite)."""

from __future__ import annotations

from typing import Any, Dict

from ..codec import datetime_to_text, enum_to_tag, tag_to_enum, text_to_datetime
from ..repository import SqliteCollection
from .models import Meal, MealType


class MealStore(SqliteCollection[Meal]):
    table = "meals"
    order_by = "eaten_at DESC, id DESC"

    def _to_record(self, row: Dict[str, Any]) -> Meal:
        return Meal(
            id=row["id"],
            name=row["name"],
            meal_type=tag_to_enum(MealType, row["meal_type"]),
            calories=int(row.get("calories") or 0),
            protein_g=float(row.get("protein_g") or 0.0),
            carbs_g=float(row.get("carbs_g") or 0.0),
            fat_g=float(row.get("fat_g") or 0.0),
            eaten_at=text_to_datetime(row["eaten_at"]),
            notes=row.get("notes"),
        )

    def _to_row(self, record: Meal) -> Dict[str, Any]:
        return {
            "name": record.name,
            "meal_type": enum_to_tag(record.meal_type),
            "calories": record.calories,
            "protein_g": record.protein_g,
            "carbs_g": record.carbs_g,
            "fat_g": record.fat_g,
            "eaten_at": datetime_to_text(record.eaten_at),
            "notes": record.notes,
        }
