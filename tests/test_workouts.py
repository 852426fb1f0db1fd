# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest
from datetime import date

from fitfuel.errors import InvalidInput
from fitfuel.exercise.models import TrainingType
from fitfuel.exercise.workouts import recommend_for_date, recommend_workout
from fitfuel.profile.models import Goal


class TestRecommendWorkout(unittest.TestCase):
    def test_table_is_complete(self) -> None:
        for goal in Goal:
            for weekday in range(7):
                suggestion = recommend_workout(goal, weekday)
                self.assertIsNotNone(suggestion, (goal, weekday))
                self.assertTrue(suggestion.title)

    def test_build_muscle_week(self) -> None:
        titles = [recommend_workout(Goal.BUILD_MUSCLE, d).title for d in range(7)]
        self.assertEqual(titles[0], "Push Day (Chest/Triceps)")
        self.assertEqual(titles[2], "Rest Day")
        self.assertEqual(titles[6], "Active Recovery")
        self.assertEqual(recommend_workout(Goal.BUILD_MUSCLE, 6).session_type, TrainingType.CARDIO)

    def test_lose_weight_pattern(self) -> None:
        for weekday in (0, 2, 4):
            self.assertEqual(recommend_workout(Goal.LOSE_WEIGHT, weekday).session_type, TrainingType.HIIT)
        for weekday in (1, 3):
            self.assertEqual(recommend_workout(Goal.LOSE_WEIGHT, weekday).title, "Full Body Strength")
        self.assertEqual(recommend_workout(Goal.LOSE_WEIGHT, 5).title, "Long Cardio")

    def test_performance_defaults_to_endurance(self) -> None:
        for weekday in (1, 3, 5, 6):
            self.assertEqual(recommend_workout(Goal.IMPROVE_PERFORMANCE, weekday).title, "Endurance")
        self.assertEqual(recommend_workout(Goal.IMPROVE_PERFORMANCE, 4).session_type, TrainingType.STRENGTH)

    def test_maintain_fitness(self) -> None:
        self.assertEqual(recommend_workout(Goal.MAINTAIN_FITNESS, 3).title, "Full Body Workout")
        self.assertEqual(recommend_workout(Goal.MAINTAIN_FITNESS, 4).title, "Cardio")
        self.assertEqual(recommend_workout(Goal.MAINTAIN_FITNESS, 6).session_type, TrainingType.FLEXIBILITY)

    def test_by_date(self) -> None:
        # 2026-03-15 is a Sunday.
        self.assertEqual(recommend_for_date("lose_weight", date(2026, 3, 15)).title, "Rest Day")

    def test_weekday_out_of_range(self) -> None:
        for weekday in (-1, 7, True):
            with self.assertRaises(InvalidInput):
                recommend_workout(Goal.BUILD_MUSCLE, weekday)


if __name__ == "__main__":
    unittest.main()
