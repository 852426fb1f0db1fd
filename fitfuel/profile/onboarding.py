# -*- coding: utf-8 -*-
"""Onboarding: collect selections, compute targets, create the profile."""

from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import List, Optional

from pydantic import BaseModel

from ..errors import InvalidInput
from ..nutrition.samples import sample_meals
from ..nutrition.storage import MealStore
from .models import DietaryPreference, Goal, TrainingFrequency, UserProfile
from .storage import ProfileStore
from .targets import compute_targets, parse_weight

logger = logging.getLogger(__name__)

LAST_STEP = 3


class OnboardingDraft(BaseModel):
    """Selections gathered step by step before the profile exists."""

    goal: Optional[Goal] = None
    training_frequency: Optional[TrainingFrequency] = None
    weight_text: str = ""
    dietary_preference: Optional[DietaryPreference] = None
    name: str = ""

    def weight_kg(self) -> Optional[float]:
        try:
            return parse_weight(self.weight_text)
        except InvalidInput:
            return None

    def can_advance(self, step: int) -> bool:
        if step == 0:
            return self.goal is not None
        if step == 1:
            return self.training_frequency is not None
        if step == 2:
            return self.weight_kg() is not None
        if step == 3:
            return self.dietary_preference is not None and bool(self.name.strip())
        return False

    def missing_fields(self) -> List[str]:
        missing = []
        if self.goal is None:
            missing.append("goal")
        if self.training_frequency is None:
            missing.append("training_frequency")
        if self.weight_kg() is None:
            missing.append("weight_kg")
        if self.dietary_preference is None:
            missing.append("dietary_preference")
        if not self.name.strip():
            missing.append("name")
        return missing


async def complete_onboarding(
    draft: OnboardingDraft,
    profiles: ProfileStore,
    meals: MealStore,
    *,
    today: Optional[date] = None,
) -> UserProfile:
    missing = draft.missing_fields()
    if missing:
        raise InvalidInput(missing[0], f"onboarding incomplete, missing {', '.join(missing)}")

    weight = parse_weight(draft.weight_text)
    targets = compute_targets(draft.goal, draft.training_frequency, weight)
    profile = UserProfile(
        name=draft.name.strip(),
        goal=draft.goal,
        training_frequency=draft.training_frequency,
        dietary_preference=draft.dietary_preference,
        weight_kg=weight,
        daily_calorie_target=targets.calories,
        daily_protein_target=targets.protein_g,
        daily_carb_target=targets.carb_g,
        daily_fat_target=targets.fat_g,
        onboarding_completed=True,
    )
    midnight = datetime.combine(today or date.today(), time.min)
    starters = sample_meals(draft.dietary_preference, midnight)
    await profiles.create(profile)

    # Either the profile and every starter meal exist, or none of them do.
    inserted: List[int] = []
    try:
        for meal in starters:
            inserted.append(await meals.insert(meal))
    except Exception as exc:
        logger.error("Onboarding rolled back, sample meals failed: %s", exc)
        for meal_id in inserted:
            await meals.delete_by_id(meal_id)
        await profiles.delete()
        raise
    logger.info("Onboarding completed: %d kcal target, %d sample meals", targets.calories, len(starters))
    return profile
