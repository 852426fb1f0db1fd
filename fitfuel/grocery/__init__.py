# -*- coding: utf-8 -*-
"""Grocery list domain."""
