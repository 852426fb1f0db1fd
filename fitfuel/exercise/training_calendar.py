# -*- coding: utf-8 -*-
"""Training calendar: a selected day, its sessions, and daily workout generation."""

from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import List, Optional, Union

from ..errors import ProfileMissing, RecordNotFound
from ..profile.storage import ProfileStore
from ..streams import Observable, Subject, combine_latest
from ..windows import DateWindow, day_window
from .aggregator import sessions_in_window
from .models import Intensity, TrainingSession, TrainingType, WorkoutGeneration
from .storage import TrainingSessionStore
from .workouts import DEFAULT_DURATION_MIN, DEFAULT_INTENSITY, recommend_for_date

logger = logging.getLogger(__name__)

NO_PLAN_MESSAGE = "No workout plan found for today."


def _as_datetime(value: Union[date, datetime]) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


class TrainingCalendar:
    def __init__(self, sessions: TrainingSessionStore, profiles: ProfileStore) -> None:
        self.sessions = sessions
        self.profiles = profiles
        self.selected: Subject[datetime] = Subject(datetime.now())

    @property
    def selected_date(self) -> datetime:
        return self.selected.value

    def select_date(self, value: Union[date, datetime]) -> None:
        self.selected.emit(_as_datetime(value))

    def selected_window(self) -> Observable[DateWindow]:
        return self.selected.map(lambda moment: day_window(moment.date()))

    def sessions_for_selected_day(self) -> Observable[List[TrainingSession]]:
        return combine_latest(
            [self.sessions.observe_all(), self.selected_window()],
            lambda sessions, window: sorted(sessions_in_window(sessions, window), key=lambda s: s.scheduled_at),
        )

    async def add_session(
        self,
        title: str,
        session_type: TrainingType,
        intensity: Intensity,
        duration_minutes: int,
        notes: Optional[str] = None,
    ) -> int:
        """Schedule a session at the currently selected moment."""
        session = TrainingSession(
            title=title,
            session_type=session_type,
            intensity=intensity,
            duration_minutes=duration_minutes,
            scheduled_at=self.selected_date,
            notes=notes,
        )
        return await self.sessions.insert(session)

    async def generate_daily_workout(self) -> WorkoutGeneration:
        profile = self.profiles.get()
        if profile is None:
            raise ProfileMissing("a profile is needed to generate a workout")

        suggestion = recommend_for_date(profile.goal, self.selected_date.date())
        if suggestion is None:
            return WorkoutGeneration(message=NO_PLAN_MESSAGE)

        session_id = await self.add_session(
            title=suggestion.title,
            session_type=suggestion.session_type,
            intensity=DEFAULT_INTENSITY,
            duration_minutes=DEFAULT_DURATION_MIN,
            notes=suggestion.notes,
        )
        logger.info("Generated workout %r for %s", suggestion.title, self.selected_date.date())
        return WorkoutGeneration(
            suggestion=suggestion,
            session_id=session_id,
            message=f"Workout generated: {suggestion.title}",
        )

    async def set_completion(self, session_id: int, completed: bool) -> None:
        await self.sessions.set_completed(session_id, completed)

    async def toggle_completion(self, session_id: int) -> bool:
        session = await self.sessions.get_by_id(session_id)
        if session is None:
            raise RecordNotFound(self.sessions.table, session_id)
        flipped = not session.is_completed
        await self.sessions.set_completed(session_id, flipped)
        return flipped
