# -*- coding: utf-8 -*-
"""Joins profile targets, today's rollups and motion into one DashboardView."""

from __future__ import annotations

from typing import List, Optional

from ..exercise.aggregator import summarize_sessions
from ..exercise.models import TrainingSession, TrainingStats
from ..motion.models import MotionState
from ..nutrition.aggregator import summarize_meals
from ..nutrition.models import Meal, NutritionSummary
from ..profile.models import NutritionTargets, UserProfile
from ..streams import Observable, combine_latest
from ..windows import DateWindow
from .models import DashboardView, NutritionProgress


def remaining_intake(targets: NutritionTargets, nutrition: NutritionSummary) -> NutritionProgress:
    return NutritionProgress(
        calories=targets.calories - nutrition.calories,
        protein_g=targets.protein_g - nutrition.protein_g,
        carbs_g=targets.carb_g - nutrition.carbs_g,
        fat_g=targets.fat_g - nutrition.fat_g,
    )


def compose_dashboard(
    profile: Optional[UserProfile],
    nutrition: NutritionSummary,
    training: TrainingStats,
    motion: Optional[MotionState] = None,
) -> DashboardView:
    if profile is None:
        return DashboardView(nutrition=nutrition, training=training, motion=motion)

    targets = profile.targets()
    return DashboardView(
        profile_name=profile.name,
        onboarding_completed=profile.onboarding_completed,
        targets=targets,
        nutrition=nutrition,
        training=training,
        motion=motion,
        remaining=remaining_intake(targets, nutrition),
    )


def observe_dashboard(
    profile: Observable[Optional[UserProfile]],
    meals: Observable[List[Meal]],
    sessions: Observable[List[TrainingSession]],
    window: Observable[DateWindow],
    motion: Optional[Observable[MotionState]] = None,
) -> Observable[DashboardView]:
    """
    Emits only once every joined input has produced a value.

    The window is subscribed once and both rollups are computed from that
    same value, so one view never mixes two windows.
    """

    def combine(
        current_profile: Optional[UserProfile],
        current_meals: List[Meal],
        current_sessions: List[TrainingSession],
        current_window: DateWindow,
        current_motion: Optional[MotionState] = None,
    ) -> DashboardView:
        return compose_dashboard(
            current_profile,
            summarize_meals(current_meals, current_window),
            summarize_sessions(current_sessions, current_window),
            current_motion,
        )

    sources: List[Observable] = [profile, meals, sessions, window]
    if motion is not None:
        sources.append(motion)
    return combine_latest(sources, combine)
