# -*- coding: utf-8 -*-
"""Trackr: offline-first personal health data store."""

__version__ = "1.0.0"
