# -*- coding: utf-8 -*-
"""Free-text journal entries, typed or scanned from paper."""
