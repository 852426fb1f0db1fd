# -*- coding: utf-8 -*-
"""Profile storage: a single optional slot (SQLite)."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from ..codec import enum_to_tag, tag_to_enum
from ..config import settings
from ..db import db_conn
from ..errors import ProfileExists, ProfileMissing
from ..streams import Observable, Subject, Subscription
from .models import DietaryPreference, Goal, TrainingFrequency, UserProfile

logger = logging.getLogger(__name__)

_COLUMNS = (
    "name",
    "goal",
    "training_frequency",
    "dietary_preference",
    "weight_kg",
    "daily_calorie_target",
    "daily_protein_target",
    "daily_carb_target",
    "daily_fat_target",
    "onboarding_completed",
    "updated_at",
)


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _row_to_profile(row: Dict[str, Any]) -> UserProfile:
    return UserProfile(
        name=row["name"],
        goal=tag_to_enum(Goal, row["goal"]),
        training_frequency=tag_to_enum(TrainingFrequency, row["training_frequency"]),
        dietary_preference=tag_to_enum(DietaryPreference, row["dietary_preference"]),
        weight_kg=float(row["weight_kg"]),
        daily_calorie_target=int(row["daily_calorie_target"]),
        daily_protein_target=float(row["daily_protein_target"]),
        daily_carb_target=float(row["daily_carb_target"]),
        daily_fat_target=float(row["daily_fat_target"]),
        onboarding_completed=bool(row["onboarding_completed"]),
    )


def _profile_to_values(profile: UserProfile) -> tuple:
    return (
        profile.name,
        enum_to_tag(profile.goal),
        enum_to_tag(profile.training_frequency),
        enum_to_tag(profile.dietary_preference),
        profile.weight_kg,
        profile.daily_calorie_target,
        profile.daily_protein_target,
        profile.daily_carb_target,
        profile.daily_fat_target,
        1 if profile.onboarding_completed else 0,
        _utc_now(),
    )


class ProfileStore:
    """
    Holds at most one UserProfile.

    Every write replaces the whole row in one statement, so the four target
    fields are never observed half-written.
    """

    def __init__(self, db_path: Path | None = None) -> None:
        self.db_path = db_path or settings.db_path
        self._subject: Subject[Optional[UserProfile]] = Subject()
        self._stream = _ProfileStream(self)

    def get(self) -> Optional[UserProfile]:
        with db_conn(self.db_path) as conn:
            row = conn.execute("SELECT * FROM user_profile LIMIT 1").fetchone()
        if not row:
            return None
        return _row_to_profile(dict(row))

    def observe(self) -> Observable[Optional[UserProfile]]:
        return self._stream

    async def create(self, profile: UserProfile) -> UserProfile:
        placeholders = ", ".join("?" for _ in _COLUMNS)
        with db_conn(self.db_path) as conn:
            existing = conn.execute("SELECT COUNT(*) FROM user_profile").fetchone()[0]
            if existing:
                raise ProfileExists("a profile already exists")
            conn.execute(
                f"INSERT INTO user_profile ({', '.join(_COLUMNS)}) VALUES ({placeholders})",
                _profile_to_values(profile),
            )
        logger.info("Profile created for %s (goal=%s)", profile.name, profile.goal.value)
        self._publish()
        return profile

    async def update(self, profile: UserProfile) -> UserProfile:
        assignments = ", ".join(f"{column} = ?" for column in _COLUMNS)
        with db_conn(self.db_path) as conn:
            cur = conn.execute(f"UPDATE user_profile SET {assignments}", _profile_to_values(profile))
            if cur.rowcount == 0:
                raise ProfileMissing("no profile to update")
        self._publish()
        return profile

    async def mark_onboarding_completed(self) -> UserProfile:
        current = self.get()
        if current is None:
            raise ProfileMissing("no profile to mark as onboarded")
        return await self.update(current.model_copy(update={"onboarding_completed": True}))

    async def delete(self) -> None:
        with db_conn(self.db_path) as conn:
            cur = conn.execute("DELETE FROM user_profile")
            if cur.rowcount == 0:
                raise ProfileMissing("no profile to delete")
        logger.info("Profile deleted")
        self._publish()

    def _publish(self) -> None:
        if self._subject.subscriber_count == 0:
            return
        self._subject.emit(self.get())


class _ProfileStream(Observable[Optional[UserProfile]]):
    def __init__(self, store: ProfileStore) -> None:
        self._store = store

    def subscribe(self, callback: Callable[[Optional[UserProfile]], None]) -> Subscription:
        subject = self._store._subject
        if subject.subscriber_count == 0:
            subject.emit(self._store.get())
        return subject.subscribe(callback)
