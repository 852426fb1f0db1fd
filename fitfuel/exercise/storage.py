# -*- coding: utf-8 -*-
"""Training session storage (SQLite)."""

from __future__ import annotations

from typing import Any, Dict

from ..codec import datetime_to_text, enum_to_tag, tag_to_enum, text_to_datetime
from ..db import db_conn
from ..errors import RecordNotFound
from ..repository import SqliteCollection
from .models import Intensity, TrainingSession, TrainingType


class TrainingSessionStore(SqliteCollection[TrainingSession]):
    table = "training_sessions"
    order_by = "scheduled_at ASC, id ASC"

    def _to_record(self, row: Dict[str, Any]) -> TrainingSession:
        return TrainingSession(
            id=row["id"],
            title=row["title"],
            session_type=tag_to_enum(TrainingType, row["session_type"]),
            intensity=tag_to_enum(Intensity, row["intensity"]),
            duration_minutes=int(row.get("duration_minutes") or 0),
            scheduled_at=text_to_datetime(row["scheduled_at"]),
            is_completed=bool(row.get("is_completed")),
            notes=row.get("notes"),
        )

    def _to_row(self, record: TrainingSession) -> Dict[str, Any]:
        return {
            "title": record.title,
            "session_type": enum_to_tag(record.session_type),
            "intensity": enum_to_tag(record.intensity),
            "duration_minutes": record.duration_minutes,
            "scheduled_at": datetime_to_text(record.scheduled_at),
            "is_completed": 1 if record.is_completed else 0,
            "notes": record.notes,
        }

    async def set_completed(self, session_id: int, completed: bool) -> None:
        with db_conn(self.db_path) as conn:
            cur = conn.execute(
                "UPDATE training_sessions SET is_completed = ? WHERE id = ?",
                (1 if completed else 0, session_id),
            )
            if cur.rowcount == 0:
                raise RecordNotFound(self.table, session_id)
        self._publish()
