# -*- coding: utf-8 -*-
"""Exercise domain: Pydantic models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..windows import local_naive


class TrainingType(str, Enum):
    STRENGTH = "strength"
    CARDIO = "cardio"
    FLEXIBILITY = "flexibility"
    SPORTS_SPECIFIC_GAA = "sports_specific_gaa"
    RECOVERY = "recovery"
    HIIT = "hiit"
    OTHER = "other"


class Intensity(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    MAXIMUM = "maximum"


class TrainingSession(BaseModel):
    id: Optional[int] = None
    title: str = Field(..., min_length=1, max_length=256)
    session_type: TrainingType
    intensity: Intensity
    duration_minutes: int = Field(0, ge=0)
    scheduled_at: datetime
    is_completed: bool = False
    notes: Optional[str] = Field(None, max_length=2000)

    @field_validator("scheduled_at")
    @classmethod
    def _local_scheduled_at(cls, value: datetime) -> datetime:
        return local_naive(value)


class TrainingStats(BaseModel):
    completed_sessions: int = Field(0, ge=0)
    total_minutes: int = Field(0, ge=0)


class WorkoutSuggestion(BaseModel):
    title: str
    session_type: TrainingType
    notes: str = ""


class WorkoutGeneration(BaseModel):
    suggestion: Optional[WorkoutSuggestion] = None
    session_id: Optional[int] = None
    message: str
