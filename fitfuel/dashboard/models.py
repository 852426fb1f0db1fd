# -*- coding: utf-8 -*-
"""Dashboard domain: the joined read-model."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from ..exercise.models import TrainingStats
from ..motion.models import MotionState
from ..nutrition.models import NutritionSummary
from ..profile.models import NutritionTargets


class NutritionProgress(BaseModel):
    """Targets minus intake; negative once a target is exceeded."""

    calories: int
    protein_g: float
    carbs_g: float
    fat_g: float


class DashboardView(BaseModel):
    profile_name: Optional[str] = None
    onboarding_completed: bool = False
    # Unset before onboarding; never defaulted to zero.
    targets: Optional[NutritionTargets] = None
    nutrition: NutritionSummary
    training: TrainingStats
    motion: Optional[MotionState] = None
    remaining: Optional[NutritionProgress] = None
