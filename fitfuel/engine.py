# -*- coding: utf-8 -*-
"""
FitFuel engine

The in-process facade handed to presentation and scheduler code. It owns the
shared (multicast) derived streams: one per distinct query, kept alive for
``keep_alive_sec`` after the last observer leaves, then dropped.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Hashable, Optional, Tuple, Union

from .config import settings
from .dashboard.composer import observe_dashboard
from .dashboard.models import DashboardView
from .db import init_db
from .exercise.aggregator import observe_training_stats
from .exercise.models import TrainingStats, WorkoutSuggestion
from .exercise.storage import TrainingSessionStore
from .exercise.training_calendar import TrainingCalendar
from .exercise.workouts import recommend_workout
from .grocery.storage import GroceryItemStore
from .motion.derivation import MotionDerivationUnit
from .motion.models import MotionState, SensorAvailability
from .motion.sensors import SensorSource
from .nutrition.aggregator import observe_nutrition_summary
from .nutrition.models import NutritionSummary
from .nutrition.storage import MealStore
from .profile import targets as target_calculator
from .profile.models import Goal, NutritionTargets, TrainingFrequency, UserProfile
from .profile.onboarding import OnboardingDraft, complete_onboarding
from .profile.storage import ProfileStore
from .streams import Observable, Scheduler, SharedStream, default_scheduler
from .windows import WindowSource, as_window_stream, today_window

logger = logging.getLogger(__name__)


class FitFuelEngine:
    def __init__(
        self,
        meals: MealStore,
        sessions: TrainingSessionStore,
        profiles: ProfileStore,
        groceries: Optional[GroceryItemStore] = None,
        sensors: Optional[SensorSource] = None,
        *,
        scheduler: Optional[Scheduler] = None,
        keep_alive_sec: Optional[float] = None,
    ) -> None:
        self.meals = meals
        self.sessions = sessions
        self.profiles = profiles
        self.groceries = groceries or GroceryItemStore(meals.db_path)
        self.scheduler: Scheduler = scheduler or default_scheduler
        self.keep_alive_sec = settings.stream_keep_alive_sec if keep_alive_sec is None else keep_alive_sec
        self.motion = MotionDerivationUnit(
            sensors,
            scheduler=self.scheduler,
            keep_alive_sec=self.keep_alive_sec,
        )
        self.calendar = TrainingCalendar(sessions, profiles)
        self._shared: Dict[Tuple[str, Hashable], SharedStream[Any]] = {}

    @classmethod
    def open(
        cls,
        db_path: Union[str, Path, None] = None,
        sensors: Optional[SensorSource] = None,
        **kwargs: Any,
    ) -> "FitFuelEngine":
        """Create the tables if needed and wire every store to one SQLite file."""
        path = Path(db_path).expanduser() if db_path else settings.db_path
        init_db(path)
        logger.info("FitFuel engine opened on %s", path)
        return cls(
            MealStore(path),
            TrainingSessionStore(path),
            ProfileStore(path),
            GroceryItemStore(path),
            sensors,
            **kwargs,
        )

    # --- pure operations -------------------------------------------------

    @staticmethod
    def compute_targets(
        goal: Union[Goal, str],
        training_frequency: Union[TrainingFrequency, str],
        weight_kg: float,
    ) -> NutritionTargets:
        return target_calculator.compute_targets(goal, training_frequency, weight_kg)

    @staticmethod
    def recommend_workout(goal: Union[Goal, str], weekday: int) -> Optional[WorkoutSuggestion]:
        return recommend_workout(goal, weekday)

    # --- live views ------------------------------------------------------

    def observe_nutrition_summary(self, window: WindowSource = None) -> Observable[NutritionSummary]:
        window = window or today_window()
        return self._share(
            ("nutrition", window),
            lambda: observe_nutrition_summary(self.meals.observe_all(), window),
        )

    def observe_training_stats(self, window: WindowSource = None) -> Observable[TrainingStats]:
        window = window or today_window()
        return self._share(
            ("training", window),
            lambda: observe_training_stats(self.sessions.observe_all(), window),
        )

    def observe_profile(self) -> Observable[Optional[UserProfile]]:
        return self.profiles.observe()

    def observe_motion_state(self) -> Optional[Observable[MotionState]]:
        """None when the device has no motion sensors at all."""
        return self.motion.observe_state()

    @property
    def sensor_availability(self) -> SensorAvailability:
        return self.motion.availability

    def observe_dashboard(self, window: WindowSource = None) -> Observable[DashboardView]:
        window = window or today_window()
        return self._share(
            ("dashboard", window),
            lambda: observe_dashboard(
                self.observe_profile(),
                self.meals.observe_all(),
                self.sessions.observe_all(),
                as_window_stream(window),
                self.observe_motion_state(),
            ),
        )

    # --- commands --------------------------------------------------------

    def reset_daily_steps(self) -> None:
        self.motion.reset_daily_steps()

    def set_step_baseline(self, baseline: int) -> None:
        self.motion.set_step_baseline(baseline)

    async def complete_onboarding(self, draft: OnboardingDraft) -> UserProfile:
        return await complete_onboarding(draft, self.profiles, self.meals)

    # --- shared stream cache ---------------------------------------------

    @property
    def active_streams(self) -> int:
        return len(self._shared)

    def _share(self, key: Tuple[str, Hashable], factory: Callable[[], Observable[Any]]) -> Observable[Any]:
        stream = self._shared.get(key)
        if stream is not None:
            return stream

        def forget(torn_down: SharedStream[Any]) -> None:
            if self._shared.get(key) is torn_down:
                del self._shared[key]

        stream = SharedStream(
            factory(),
            keep_alive_sec=self.keep_alive_sec,
            scheduler=self.scheduler,
            name=f"{key[0]}:{key[1]}",
            on_teardown=forget,
        )
        self._shared[key] = stream
        return stream
