# -*- coding: utf-8 -*-

from __future__ import annotations

import itertools
import unittest

from fitfuel.errors import InvalidInput
from fitfuel.profile.models import Goal, TrainingFrequency
from fitfuel.profile.targets import compute_targets, parse_weight, round_half_up


class TestComputeTargets(unittest.TestCase):
    def test_lose_weight_moderate_activity(self) -> None:
        targets = compute_targets(Goal.LOSE_WEIGHT, TrainingFrequency.FOUR_FIVE_DAYS, 80)
        self.assertEqual(targets.calories, 2228)
        self.assertAlmostEqual(targets.protein_g, 160.0)
        self.assertAlmostEqual(targets.fat_g, 64.0)
        self.assertAlmostEqual(targets.carb_g, 253.0)

    def test_calorie_floor(self) -> None:
        targets = compute_targets(Goal.LOSE_WEIGHT, TrainingFrequency.TWO_THREE_DAYS, 40)
        self.assertEqual(targets.calories, 1200)
        self.assertAlmostEqual(targets.protein_g, 80.0)
        self.assertAlmostEqual(targets.fat_g, 32.0)

    def test_build_muscle_surplus(self) -> None:
        # 22 * 60 * 1.725 = 2277, + 300
        targets = compute_targets(Goal.BUILD_MUSCLE, TrainingFrequency.SIX_PLUS_DAYS, 60)
        self.assertEqual(targets.calories, 2577)

    def test_floors_hold_everywhere(self) -> None:
        for goal, frequency, weight in itertools.product(
            list(Goal), list(TrainingFrequency), [0.5, 12, 40, 55.5, 80, 140]
        ):
            targets = compute_targets(goal, frequency, weight)
            self.assertGreaterEqual(targets.calories, 1200)
            self.assertGreaterEqual(targets.protein_g, 50.0)
            self.assertGreaterEqual(targets.fat_g, 30.0)
            self.assertGreaterEqual(targets.carb_g, 50.0)
            self.assertEqual(targets, compute_targets(goal, frequency, weight))

    def test_accepts_string_tags(self) -> None:
        self.assertEqual(
            compute_targets("lose_weight", "4-5", 80),
            compute_targets(Goal.LOSE_WEIGHT, TrainingFrequency.FOUR_FIVE_DAYS, 80),
        )

    def test_rejects_bad_weight(self) -> None:
        for weight in (0, -3, float("nan"), float("inf"), True):
            with self.assertRaises(InvalidInput):
                compute_targets(Goal.MAINTAIN_FITNESS, TrainingFrequency.TWO_THREE_DAYS, weight)

    def test_rejects_unknown_goal(self) -> None:
        with self.assertRaises(InvalidInput) as ctx:
            compute_targets("get_huge", TrainingFrequency.TWO_THREE_DAYS, 70)
        self.assertEqual(ctx.exception.field, "goal")


class TestWeightParsing(unittest.TestCase):
    def test_valid_text(self) -> None:
        self.assertEqual(parse_weight("72.5"), 72.5)
        self.assertEqual(parse_weight(" 80 "), 80.0)
        self.assertEqual(parse_weight(".5"), 0.5)

    def test_malformed_text(self) -> None:
        for text in ("", ".", "abc", "1.2.3", "-5", "0", "0.0", "7e2"):
            with self.assertRaises(InvalidInput, msg=text):
                parse_weight(text)

    def test_round_half_up(self) -> None:
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(3.5), 4)
        self.assertEqual(round_half_up(2.49), 2)


if __name__ == "__main__":
    unittest.main()
