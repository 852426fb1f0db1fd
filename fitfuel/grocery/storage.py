# -*- coding: utf-8 -*-
"""Grocery item storage (SQLite)."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict

from ..codec import datetime_to_text, enum_to_tag, tag_to_enum, text_to_datetime
from ..db import db_conn
from ..errors import RecordNotFound
from ..repository import SqliteCollection
from .models import GroceryCategory, GroceryItem

logger = logging.getLogger(__name__)


class GroceryItemStore(SqliteCollection[GroceryItem]):
    table = "grocery_items"
    order_by = "category ASC, name ASC"

    def _to_record(self, row: Dict[str, Any]) -> GroceryItem:
        return GroceryItem(
            id=row["id"],
            name=row["name"],
            quantity=row.get("quantity") or "",
            category=tag_to_enum(GroceryCategory, row["category"]),
            is_purchased=bool(row.get("is_purchased")),
            notes=row.get("notes"),
            created_at=text_to_datetime(row["created_at"]),
        )

    def _to_row(self, record: GroceryItem) -> Dict[str, Any]:
        return {
            "name": record.name,
            "quantity": record.quantity,
            "category": enum_to_tag(record.category),
            "is_purchased": 1 if record.is_purchased else 0,
            "notes": record.notes,
            "created_at": datetime_to_text(record.created_at),
        }

    async def set_purchased(self, item_id: int, purchased: bool) -> None:
        with db_conn(self.db_path) as conn:
            cur = conn.execute(
                "UPDATE grocery_items SET is_purchased = ? WHERE id = ?",
                (1 if purchased else 0, item_id),
            )
            if cur.rowcount == 0:
                raise RecordNotFound(self.table, item_id)
        self._publish()

    async def delete_purchased_before(self, cutoff: datetime) -> int:
        """Remove purchased items created before ``cutoff``; returns how many."""
        with db_conn(self.db_path) as conn:
            cur = conn.execute(
                "DELETE FROM grocery_items WHERE is_purchased = 1 AND created_at < ?",
                (datetime_to_text(cutoff),),
            )
            deleted = cur.rowcount
        if deleted:
            logger.info("Removed %d purchased grocery items older than %s", deleted, cutoff.date())
            self._publish()
        return deleted
