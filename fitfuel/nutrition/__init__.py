# -*- coding: utf-8 -*-
"""Nutrition domain (meal logging, daily summary).

Meals live in the `meals` table; rollups are computed engine-side over a
date window rather than in SQL.
"""
