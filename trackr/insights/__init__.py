# -*- coding: utf-8 -*-
"""Cross-domain weekly statistics and trends."""
