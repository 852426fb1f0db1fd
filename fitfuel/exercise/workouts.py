# -*- coding: utf-8 -*-
"""
每日训练推荐

Weekly workout tables keyed by goal and weekday (0 = Monday, as date.weekday()).
"""

from __future__ import annotations

import calendar
from datetime import date
from typing import Dict, Optional, Tuple, Union

from ..errors import InvalidInput
from ..profile.models import Goal
from .models import Intensity, TrainingType, WorkoutSuggestion

DEFAULT_INTENSITY = Intensity.HIGH
DEFAULT_DURATION_MIN = 60

_Plan = Tuple[str, TrainingType, str]

_PUSH = ("Push Day (Chest/Triceps)", TrainingType.STRENGTH, "Bench Press: 3x10\nOverhead Press: 3x10\nTricep Dips: 3x12")
_PULL = ("Pull Day (Back/Biceps)", TrainingType.STRENGTH, "Pull-ups: 3x8\nBarbell Rows: 3x10\nBicep Curls: 3x12")
_LEGS_QUADS = ("Leg Day (Quads/Calves)", TrainingType.STRENGTH, "Squats: 3x8\nLeg Press: 3x12\nCalf Raises: 4x15")
_UPPER = ("Upper Body (Shoulders/Arms)", TrainingType.STRENGTH, "Lateral Raises: 3x15\nFace Pulls: 3x15\nHammer Curls: 3x12")
_LEGS_HAMS = ("Leg Day (Hamstrings/Glutes)", TrainingType.STRENGTH, "Deadlifts: 3x5\nLunges: 3x12\nGlute Bridges: 3x15")

_HIIT = ("HIIT Cardio", TrainingType.HIIT, "30 mins HIIT circuit\nBurpees, Mountain Climbers, Jump Squats")
_CIRCUIT = ("Full Body Strength", TrainingType.STRENGTH, "Circuit training: Squats, Pushups, Rows, Planks")

_ENDURANCE = ("Endurance", TrainingType.CARDIO, "Long steady run or cycle")

_FULL_BODY = ("Full Body Workout", TrainingType.STRENGTH, "Compound movements: Squat, Bench, Deadlift")
_CARDIO = ("Cardio", TrainingType.CARDIO, "30 mins jogging or cycling")
_ACTIVE_REST = ("Active Rest", TrainingType.FLEXIBILITY, "Yoga or stretching")

WEEKLY_PLANS: Dict[Goal, Dict[int, _Plan]] = {
    Goal.BUILD_MUSCLE: {
        calendar.MONDAY: _PUSH,
        calendar.TUESDAY: _PULL,
        calendar.WEDNESDAY: ("Rest Day", TrainingType.FLEXIBILITY, "Light stretching or yoga"),
        calendar.THURSDAY: _LEGS_QUADS,
        calendar.FRIDAY: _UPPER,
        calendar.SATURDAY: _LEGS_HAMS,
        calendar.SUNDAY: ("Active Recovery", TrainingType.CARDIO, "Light walk or swim"),
    },
    Goal.LOSE_WEIGHT: {
        calendar.MONDAY: _HIIT,
        calendar.TUESDAY: _CIRCUIT,
        calendar.WEDNESDAY: _HIIT,
        calendar.THURSDAY: _CIRCUIT,
        calendar.FRIDAY: _HIIT,
        calendar.SATURDAY: ("Long Cardio", TrainingType.CARDIO, "45-60 mins steady state cardio (Run/Cycle)"),
        calendar.SUNDAY: ("Rest Day", TrainingType.FLEXIBILITY, "Stretching and foam rolling"),
    },
    Goal.IMPROVE_PERFORMANCE: {
        calendar.MONDAY: ("Speed Work", TrainingType.HIIT, "Sprints: 10x100m"),
        calendar.TUESDAY: _ENDURANCE,
        calendar.WEDNESDAY: ("Plyometrics", TrainingType.HIIT, "Box Jumps, Broad Jumps, Depth Jumps"),
        calendar.THURSDAY: _ENDURANCE,
        calendar.FRIDAY: ("Strength & Power", TrainingType.STRENGTH, "Power Cleans, Snatch, Box Squats"),
        calendar.SATURDAY: _ENDURANCE,
        calendar.SUNDAY: _ENDURANCE,
    },
    Goal.MAINTAIN_FITNESS: {
        calendar.MONDAY: _FULL_BODY,
        calendar.TUESDAY: _CARDIO,
        calendar.WEDNESDAY: _ACTIVE_REST,
        calendar.THURSDAY: _FULL_BODY,
        calendar.FRIDAY: _CARDIO,
        calendar.SATURDAY: _ACTIVE_REST,
        calendar.SUNDAY: _ACTIVE_REST,
    },
}


def recommend_workout(goal: Union[Goal, str], weekday: int) -> Optional[WorkoutSuggestion]:
    """
    按目标与星期查表推荐训练

    Args:
        goal: 训练目标
        weekday: 0 (周一) 到 6 (周日)

    Returns:
        WorkoutSuggestion，当天无计划时返回 None
    """
    try:
        goal = Goal(goal)
    except ValueError as exc:
        raise InvalidInput("goal", f"unknown goal {goal!r}") from exc
    if isinstance(weekday, bool) or not isinstance(weekday, int) or not 0 <= weekday <= 6:
        raise InvalidInput("weekday", f"expected 0..6, got {weekday!r}")

    plan = WEEKLY_PLANS.get(goal, {}).get(weekday)
    if plan is None:
        return None
    title, session_type, notes = plan
    return WorkoutSuggestion(title=title, session_type=session_type, notes=notes)


def recommend_for_date(goal: Union[Goal, str], day: date) -> Optional[WorkoutSuggestion]:
    return recommend_workout(goal, day.weekday())
