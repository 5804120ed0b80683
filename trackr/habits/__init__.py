# -*- coding: utf-8 -*-
"""Habits and their per-day completions."""
