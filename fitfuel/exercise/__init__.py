# -*- coding: utf-8 -*-
"""Exercise domain (training sessions, stats, workout plans)."""
