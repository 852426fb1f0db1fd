# -*- coding: utf-8 -*-
"""Dashboard read-model."""
