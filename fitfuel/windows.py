# -*- coding: utf-8 -*-
"""Date windows used by the aggregators."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Optional, Union

from .errors import InvalidInput
from .streams import Observable, constant


@dataclass(frozen=True)
class DateWindow:
    """Half-open interval [start, end) of local, naive datetimes."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise InvalidInput("window", f"end {self.end} precedes start {self.start}")

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment < self.end


def local_naive(moment: datetime) -> datetime:
    """Aware datetimes are converted to local time and stripped of tzinfo."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)


def day_window(day: date) -> DateWindow:
    start = datetime.combine(day, time.min)
    return DateWindow(start=start, end=start + timedelta(days=1))


def today_window(now: Optional[datetime] = None) -> DateWindow:
    return day_window((now or datetime.now()).date())


def yesterday_window(now: Optional[datetime] = None) -> DateWindow:
    return day_window((now or datetime.now()).date() - timedelta(days=1))


WindowSource = Union[DateWindow, Observable[DateWindow], None]


def as_window_stream(window: WindowSource) -> Observable[DateWindow]:
    """Fixed window, live window, or today's window computed once right now."""
    if isinstance(window, Observable):
        return window
    return constant(window or today_window())
