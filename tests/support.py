# -*- coding: utf-8 -*-

from __future__ import annotations

import shutil
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

from fitfuel.db import init_db
from fitfuel.exercise.models import Intensity, TrainingSession, TrainingType
from fitfuel.nutrition.models import Meal, MealType


class _Timer:
    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler whose clock only moves when the test calls advance()."""

    def __init__(self) -> None:
        self.now = 0.0
        self._timers: List[_Timer] = []

    def call_later(self, delay_sec: float, callback: Callable[[], None]) -> _Timer:
        timer = _Timer(self.now + delay_sec, callback)
        self._timers.append(timer)
        return timer

    @property
    def pending(self) -> int:
        return sum(1 for t in self._timers if not t.cancelled and not t.fired)

    def advance(self, seconds: float) -> None:
        target = self.now + seconds
        while True:
            due = [t for t in self._timers if not t.cancelled and not t.fired and t.due <= target]
            if not due:
                break
            timer = min(due, key=lambda t: t.due)
            self.now = timer.due
            timer.fired = True
            timer.callback()
        self.now = target


class TempDb:
    def __init__(self) -> None:
        self.root = Path(tempfile.mkdtemp(prefix="fitfuel-test-"))
        self.path = self.root / "fitfuel.db"
        init_db(self.path)

    def cleanup(self) -> None:
        shutil.rmtree(self.root, ignore_errors=True)


def make_meal(eaten_at: datetime, calories: int = 500, protein: float = 30.0,
              carbs: float = 50.0, fat: float = 20.0, name: str = "Meal") -> Meal:
    return Meal(
        name=name,
        meal_type=MealType.LUNCH,
        calories=calories,
        protein_g=protein,
        carbs_g=carbs,
        fat_g=fat,
        eaten_at=eaten_at,
    )


def make_session(scheduled_at: datetime, minutes: int = 45, completed: bool = False,
                 title: str = "Session", notes: Optional[str] = None) -> TrainingSession:
    return TrainingSession(
        title=title,
        session_type=TrainingType.STRENGTH,
        intensity=Intensity.MODERATE,
        duration_minutes=minutes,
        scheduled_at=scheduled_at,
        is_completed=completed,
        notes=notes,
    )
