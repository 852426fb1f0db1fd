# -*- coding: utf-8 -*-
"""Motion sensing (step count, activity level, shake gestures)."""
