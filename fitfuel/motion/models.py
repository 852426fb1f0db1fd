# -*- coding: utf-8 -*-
"""Motion domain: sensor samples and derived state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ActivityLevel(str, Enum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    VIGOROUS = "vigorous"


@dataclass
class AccelerometerSample:
    """One accelerometer reading (m/s^2) with its sensor timestamp."""

    x: float
    y: float
    z: float
    timestamp_ms: int


class SensorAvailability(BaseModel):
    has_step_counter: bool = False
    has_accelerometer: bool = False

    @property
    def any(self) -> bool:
        return self.has_step_counter or self.has_accelerometer


class MotionState(BaseModel):
    # None means the sensor does not exist, which is not the same as zero.
    daily_steps: Optional[int] = Field(None, ge=0)
    activity_level: Optional[ActivityLevel] = None
    shake_detected: bool = False
