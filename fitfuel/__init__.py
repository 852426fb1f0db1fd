# -*- coding: utf-8 -*-
"""FitFuel engine.

Nutrition targets, live nutrition/training rollups, motion derivation and
workout recommendations for a single-user fitness tracker.
"""
