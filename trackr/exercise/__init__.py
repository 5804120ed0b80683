# -*- coding: utf-8 -*-
"""Exercise sessions (several per day allowed)."""
