# -*- coding: utf-8 -*-
"""Storage codec: enums <-> stable string tags, datetimes <-> ISO text.

Only the storage layer calls these. Engine code works with enum members and
datetime objects throughout.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional, Type, TypeVar

from .errors import InvalidInput

E = TypeVar("E", bound=Enum)


def enum_to_tag(value: Enum) -> str:
    return str(value.value)


def tag_to_enum(enum_cls: Type[E], tag: str) -> E:
    try:
        return enum_cls(tag)
    except ValueError as exc:
        raise InvalidInput(enum_cls.__name__, f"unknown tag {tag!r}") from exc


def datetime_to_text(value: datetime) -> str:
    return value.isoformat()


def text_to_datetime(text: Optional[str]) -> Optional[datetime]:
    if not text:
        return None
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise InvalidInput("timestamp", f"malformed ISO text {text!r}") from exc
