# -*- coding: utf-8 -*-
"""Entity collections backed by SQLite, each publishing its full contents on change."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from .config import settings
from .db import db_conn
from .errors import RecordNotFound
from .streams import Observable, Subject, Subscription

logger = logging.getLogger(__name__)

R = TypeVar("R")


class SqliteCollection(Generic[R]):
    """
    CRUD accessors plus ``observe_all()`` for one entity table.

    Writes are coroutines: the awaited call is the storage I/O boundary. After
    each committed write the whole collection is re-read and published to
    current observers. Nothing is cached while nobody observes.
    """

    table: str = ""
    order_by: str = "id DESC"

    def __init__(self, db_path: Path | None = None) -> None:
        self.db_path = db_path or settings.db_path
        self._subject: Subject[List[R]] = Subject()
        self._stream = _CollectionStream(self)

    def _to_record(self, row: Dict[str, Any]) -> R:
        raise NotImplementedError

    def _to_row(self, record: R) -> Dict[str, Any]:
        raise NotImplementedError

    def list_all(self) -> List[R]:
        with db_conn(self.db_path) as conn:
            rows = conn.execute(f"SELECT * FROM {self.table} ORDER BY {self.order_by}").fetchall()
        return [self._to_record(dict(row)) for row in rows]

    def observe_all(self) -> Observable[List[R]]:
        return self._stream

    async def get_by_id(self, record_id: int) -> Optional[R]:
        with db_conn(self.db_path) as conn:
            row = conn.execute(f"SELECT * FROM {self.table} WHERE id = ?", (record_id,)).fetchone()
        if not row:
            return None
        return self._to_record(dict(row))

    async def insert(self, record: R) -> int:
        row = self._to_row(record)
        columns = ", ".join(row.keys())
        placeholders = ", ".join("?" for _ in row)
        with db_conn(self.db_path) as conn:
            cur = conn.execute(
                f"INSERT INTO {self.table} ({columns}) VALUES ({placeholders})",
                tuple(row.values()),
            )
            record_id = int(cur.lastrowid)
        logger.debug("Inserted %s #%d", self.table, record_id)
        self._publish()
        return record_id

    async def update(self, record: R) -> None:
        record_id = getattr(record, "id", None)
        if record_id is None:
            raise RecordNotFound(self.table, None)
        row = self._to_row(record)
        assignments = ", ".join(f"{column} = ?" for column in row)
        with db_conn(self.db_path) as conn:
            cur = conn.execute(
                f"UPDATE {self.table} SET {assignments} WHERE id = ?",
                (*row.values(), record_id),
            )
            if cur.rowcount == 0:
                raise RecordNotFound(self.table, record_id)
        self._publish()

    async def delete_by_id(self, record_id: int) -> None:
        with db_conn(self.db_path) as conn:
            conn.execute(f"DELETE FROM {self.table} WHERE id = ?", (record_id,))
        self._publish()

    def _publish(self) -> None:
        if self._subject.subscriber_count == 0:
            return
        self._subject.emit(self.list_all())


class _CollectionStream(Observable[List[R]]):
    def __init__(self, collection: SqliteCollection[R]) -> None:
        self._collection = collection

    def subscribe(self, callback: Callable[[List[R]], None]) -> Subscription:
        subject = self._collection._subject
        if subject.subscriber_count == 0:
            # Nobody was listening, so the replay value may be stale.
            subject.emit(self._collection.list_all())
        return subject.subscribe(callback)
