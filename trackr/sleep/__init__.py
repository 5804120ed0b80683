# -*- coding: utf-8 -*-
"""Nightly sleep log (one entry per date)."""
