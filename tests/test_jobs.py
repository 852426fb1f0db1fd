# -*- coding: utf-8 -*-

from __future__ import annotations

import sqlite3
import unittest
from datetime import datetime, timedelta
from unittest import mock

from fitfuel.engine import FitFuelEngine
from fitfuel.grocery.models import GroceryCategory, GroceryItem
from fitfuel.jobs import DAILY_REMINDER_TEXT, JobStatus, run_job
from fitfuel.profile.models import DietaryPreference, Goal, TrainingFrequency
from fitfuel.profile.onboarding import OnboardingDraft
from tests.support import ManualScheduler, TempDb, make_meal, make_session

NOW = datetime(2026, 3, 14, 9, 0)


class TestJobs(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        self.db = TempDb()
        self.engine = FitFuelEngine.open(self.db.path, scheduler=ManualScheduler())

    def tearDown(self) -> None:
        self.db.cleanup()

    async def test_unknown_job(self) -> None:
        result = await run_job("defragment", self.engine, NOW)
        self.assertEqual(result.status, JobStatus.FAILURE)

    async def test_daily_reminder(self) -> None:
        result = await run_job("daily_reminder", self.engine, NOW)
        self.assertEqual(result.status, JobStatus.SUCCESS)
        self.assertEqual(result.message, DAILY_REMINDER_TEXT)

    async def test_daily_summary_without_profile(self) -> None:
        await self.engine.meals.insert(make_meal(NOW - timedelta(days=1), calories=700))
        await self.engine.meals.insert(make_meal(NOW, calories=5000))
        result = await run_job("daily_nutrition_summary", self.engine, NOW)
        self.assertEqual(result.status, JobStatus.SUCCESS)
        self.assertEqual(result.detail["date"], "2026-03-13")
        self.assertEqual(result.detail["nutrition"]["calories"], 700)
        self.assertIsNone(result.detail["targets"])

    async def test_daily_summary_against_targets(self) -> None:
        draft = OnboardingDraft(
            goal=Goal.LOSE_WEIGHT,
            training_frequency=TrainingFrequency.FOUR_FIVE_DAYS,
            weight_text="80",
            dietary_preference=DietaryPreference.VEGETARIAN,
            name="Roisin",
        )
        await self.engine.complete_onboarding(draft)
        await self.engine.meals.insert(make_meal(NOW - timedelta(days=1), calories=1114))
        result = await run_job("daily_nutrition_summary", self.engine, NOW)
        self.assertEqual(result.detail["targets"]["calories"], 2228)
        self.assertEqual(result.detail["calories_pct"], 50.0)

    async def test_training_reminders(self) -> None:
        await self.engine.sessions.insert(make_session(NOW + timedelta(minutes=10), title="Soon"))
        await self.engine.sessions.insert(make_session(NOW + timedelta(minutes=20), title="Done", completed=True))
        await self.engine.sessions.insert(make_session(NOW + timedelta(hours=3), title="Later"))
        result = await run_job("training_reminders", self.engine, NOW)
        self.assertEqual(result.detail["reminders"], ["Reminder: Soon starting soon!"])

    async def test_grocery_cleanup(self) -> None:
        old = NOW - timedelta(days=45)
        groceries = self.engine.groceries
        oats_id = await groceries.insert(GroceryItem(name="Oats", category=GroceryCategory.GRAINS, created_at=old))
        await groceries.set_purchased(oats_id, True)
        await groceries.insert(GroceryItem(name="Kale", category=GroceryCategory.VEGETABLES, created_at=old))
        await groceries.insert(GroceryItem(name="Milk", category=GroceryCategory.DAIRY, is_purchased=True, created_at=NOW))
        result = await run_job("grocery_cleanup", self.engine, NOW)
        self.assertEqual(result.detail["deleted"], 1)
        self.assertEqual(sorted(item.name for item in groceries.list_all()), ["Kale", "Milk"])

    async def test_storage_error_asks_for_retry(self) -> None:
        with mock.patch.object(self.engine.meals, "list_all", side_effect=sqlite3.OperationalError("disk I/O error")):
            with self.assertLogs("fitfuel.jobs", level="ERROR"):
                result = await run_job("daily_nutrition_summary", self.engine, NOW)
        self.assertEqual(result.status, JobStatus.RETRY)

    async def test_other_errors_fail(self) -> None:
        with mock.patch.object(self.engine.profiles, "get", side_effect=RuntimeError("boom")):
            with self.assertLogs("fitfuel.jobs", level="ERROR"):
                result = await run_job("daily_nutrition_summary", self.engine, NOW)
        self.assertEqual(result.status, JobStatus.FAILURE)
        self.assertEqual(result.message, "boom")


if __name__ == "__main__":
    unittest.main()
