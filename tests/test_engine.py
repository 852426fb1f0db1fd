# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest
from datetime import date, datetime, timedelta

from fitfuel.dashboard.composer import compose_dashboard
from fitfuel.engine import FitFuelEngine
from fitfuel.exercise.models import TrainingStats
from fitfuel.motion.sensors import SimulatedSensors
from fitfuel.nutrition.models import NutritionSummary
from fitfuel.profile.models import DietaryPreference, Goal, TrainingFrequency
from fitfuel.profile.onboarding import OnboardingDraft
from fitfuel.streams import Subject
from fitfuel.windows import day_window
from tests.support import ManualScheduler, TempDb, make_meal, make_session

DAY = date(2026, 3, 14)
NOON = datetime(2026, 3, 14, 12)


class TestComposeDashboard(unittest.TestCase):
    def test_targets_unset_before_onboarding(self) -> None:
        view = compose_dashboard(None, NutritionSummary(calories=300), TrainingStats())
        self.assertIsNone(view.targets)
        self.assertIsNone(view.remaining)
        self.assertIsNone(view.profile_name)
        self.assertFalse(view.onboarding_completed)
        self.assertIsNone(view.motion)


class TestEngine(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        self.db = TempDb()
        self.scheduler = ManualScheduler()
        self.sensors = SimulatedSensors()
        self.engine = FitFuelEngine.open(
            self.db.path,
            sensors=self.sensors,
            scheduler=self.scheduler,
            keep_alive_sec=5,
        )
        self.window = day_window(DAY)

    def tearDown(self) -> None:
        self.db.cleanup()

    async def _onboard(self) -> None:
        draft = OnboardingDraft(
            goal=Goal.LOSE_WEIGHT,
            training_frequency=TrainingFrequency.FOUR_FIVE_DAYS,
            weight_text="80",
            dietary_preference=DietaryPreference.VEGAN,
            name="Sean",
        )
        await self.engine.complete_onboarding(draft)

    async def test_same_query_shares_one_stream(self) -> None:
        first = self.engine.observe_nutrition_summary(self.window)
        second = self.engine.observe_nutrition_summary(day_window(DAY))
        self.assertIs(first, second)
        self.assertIsNot(first, self.engine.observe_training_stats(self.window))

    async def test_stream_dropped_after_keep_alive(self) -> None:
        stream = self.engine.observe_nutrition_summary(self.window)
        sub = stream.subscribe(lambda _: None)
        self.assertEqual(self.engine.active_streams, 1)
        sub.cancel()
        self.scheduler.advance(4)
        self.assertEqual(self.engine.active_streams, 1)
        self.scheduler.advance(1)
        self.assertEqual(self.engine.active_streams, 0)
        self.assertIsNot(self.engine.observe_nutrition_summary(self.window), stream)

    async def test_dashboard_before_onboarding(self) -> None:
        view = await self.engine.observe_dashboard(self.window).first()
        self.assertIsNone(view.targets)
        self.assertEqual(view.nutrition.calories, 0)
        self.assertEqual(view.motion.daily_steps, 0)

    async def test_dashboard_tracks_meals_sessions_and_motion(self) -> None:
        await self._onboard()
        await self.engine.meals.insert(make_meal(NOON, calories=600, protein=40, carbs=70, fat=20))
        session_id = await self.engine.sessions.insert(make_session(NOON, minutes=40))

        views = []
        sub = self.engine.observe_dashboard(self.window).subscribe(views.append)
        self.assertEqual(views[-1].profile_name, "Sean")
        self.assertEqual(views[-1].targets.calories, 2228)
        self.assertEqual(views[-1].nutrition.calories, 600)
        self.assertEqual(views[-1].remaining.calories, 1628)
        self.assertEqual(views[-1].training.completed_sessions, 0)

        await self.engine.calendar.toggle_completion(session_id)
        self.assertEqual(views[-1].training.total_minutes, 40)

        self.sensors.replay_steps([2000, 2250])
        self.assertEqual(views[-1].motion.daily_steps, 250)
        self.engine.reset_daily_steps()
        self.assertEqual(views[-1].motion.daily_steps, 0)
        sub.cancel()

    async def test_dashboard_window_switch_never_mixes_days(self) -> None:
        next_noon = NOON + timedelta(days=1)
        await self.engine.meals.insert(make_meal(NOON, calories=100))
        await self.engine.sessions.insert(make_session(NOON, minutes=30, completed=True))
        await self.engine.meals.insert(make_meal(next_noon, calories=900))
        await self.engine.sessions.insert(make_session(next_noon, minutes=90, completed=True))

        window = Subject(day_window(DAY))
        views = []
        sub = self.engine.observe_dashboard(window).subscribe(views.append)
        window.emit(day_window(DAY + timedelta(days=1)))
        sub.cancel()

        pairs = [(v.nutrition.calories, v.training.total_minutes) for v in views]
        self.assertEqual(pairs, [(100, 30), (900, 90)])

    async def test_onboarding_sample_meals_land_today(self) -> None:
        await self._onboard()
        summary = await self.engine.observe_nutrition_summary().first()
        self.assertEqual(summary.meal_count, 4)

    async def test_pure_operations(self) -> None:
        self.assertEqual(self.engine.compute_targets("lose_weight", "4-5", 80).calories, 2228)
        self.assertEqual(self.engine.recommend_workout(Goal.BUILD_MUSCLE, 1).title, "Pull Day (Back/Biceps)")


class TestEngineWithoutSensors(unittest.IsolatedAsyncioTestCase):
    async def test_motion_absent(self) -> None:
        db = TempDb()
        try:
            engine = FitFuelEngine.open(db.path, scheduler=ManualScheduler())
            self.assertIsNone(engine.observe_motion_state())
            self.assertFalse(engine.sensor_availability.any)
            view = await engine.observe_dashboard(day_window(DAY)).first()
            self.assertIsNone(view.motion)
        finally:
            db.cleanup()


if __name__ == "__main__":
    unittest.main()
