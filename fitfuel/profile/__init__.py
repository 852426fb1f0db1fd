# -*- coding: utf-8 -*-
"""Profile domain (user profile, nutrition targets, onboarding)."""
