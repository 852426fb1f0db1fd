# -*- coding: utf-8 -*-
"""
每日营养目标计算

Daily calorie and macro targets from goal, training frequency and weight.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Union

from ..errors import InvalidInput
from .models import Goal, NutritionTargets, TrainingFrequency

logger = logging.getLogger(__name__)

BMR_KCAL_PER_KG = 22.0

ACTIVITY_MULTIPLIERS = {
    TrainingFrequency.TWO_THREE_DAYS: 1.375,  # lightly active
    TrainingFrequency.FOUR_FIVE_DAYS: 1.55,  # moderately active
    TrainingFrequency.SIX_PLUS_DAYS: 1.725,  # very active
}

GOAL_ADJUSTMENTS_KCAL = {
    Goal.LOSE_WEIGHT: -500,
    Goal.BUILD_MUSCLE: 300,
    Goal.IMPROVE_PERFORMANCE: 0,
    Goal.MAINTAIN_FITNESS: 0,
}

MIN_CALORIES = 1200
MIN_PROTEIN_G = 50.0
MIN_FAT_G = 30.0
MIN_CARB_G = 50.0

PROTEIN_G_PER_KG = 2.0
FAT_G_PER_KG = 0.8

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARB = 4.0
KCAL_PER_G_FAT = 9

_WEIGHT_TEXT = re.compile(r"^\d*\.?\d*$")


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _coerce_goal(goal: Union[Goal, str]) -> Goal:
    try:
        return Goal(goal)
    except ValueError as exc:
        raise InvalidInput("goal", f"unknown goal {goal!r}") from exc


def _coerce_frequency(frequency: Union[TrainingFrequency, str]) -> TrainingFrequency:
    try:
        return TrainingFrequency(frequency)
    except ValueError as exc:
        raise InvalidInput("training_frequency", f"unknown frequency {frequency!r}") from exc


def validate_weight(weight_kg: float) -> float:
    if isinstance(weight_kg, bool):
        raise InvalidInput("weight_kg", "expected a number")
    try:
        value = float(weight_kg)
    except (TypeError, ValueError) as exc:
        raise InvalidInput("weight_kg", f"expected a number, got {weight_kg!r}") from exc
    if not math.isfinite(value) or value <= 0:
        raise InvalidInput("weight_kg", f"must be a positive number, got {weight_kg!r}")
    return value


def parse_weight(text: str) -> float:
    """Parse user-typed weight: digits with at most one decimal point, > 0."""
    cleaned = (text or "").strip()
    if not cleaned or cleaned == "." or not _WEIGHT_TEXT.match(cleaned):
        raise InvalidInput("weight_kg", f"malformed weight {text!r}")
    return validate_weight(float(cleaned))


def compute_targets(
    goal: Union[Goal, str],
    training_frequency: Union[TrainingFrequency, str],
    weight_kg: float,
) -> NutritionTargets:
    """
    计算每日热量与宏量营养素目标

    Args:
        goal: 训练目标
        training_frequency: 每周训练频率
        weight_kg: 体重 (kg)，必须 > 0

    Returns:
        NutritionTargets: calories 取整（四舍五入），宏量营养素保留浮点精度

    Raises:
        InvalidInput: 体重非正数或枚举值未知
    """
    goal = _coerce_goal(goal)
    training_frequency = _coerce_frequency(training_frequency)
    weight = validate_weight(weight_kg)

    bmr = BMR_KCAL_PER_KG * weight
    tdee = round_half_up(bmr * ACTIVITY_MULTIPLIERS[training_frequency])
    calories = max(tdee + GOAL_ADJUSTMENTS_KCAL[goal], MIN_CALORIES)

    protein_g = max(PROTEIN_G_PER_KG * weight, MIN_PROTEIN_G)
    fat_g = max(FAT_G_PER_KG * weight, MIN_FAT_G)

    remaining_kcal = calories - protein_g * KCAL_PER_G_PROTEIN - fat_g * KCAL_PER_G_FAT
    carb_g = max(remaining_kcal / KCAL_PER_G_CARB, MIN_CARB_G)

    logger.debug(
        "Targets for %s/%s at %.1fkg: bmr=%.1f tdee=%d kcal=%d",
        goal.value,
        training_frequency.value,
        weight,
        bmr,
        tdee,
        calories,
    )
    return NutritionTargets(calories=calories, protein_g=protein_g, carb_g=carb_g, fat_g=fat_g)
