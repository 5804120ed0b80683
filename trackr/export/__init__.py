# -*- coding: utf-8 -*-
"""Portable exports: full JSON snapshot and per-category CSV files."""

from .encoders import CSV_CATEGORIES, CSV_COLUMNS, encode_csv
from .storage import build_csv, build_snapshot, export_all_data, generate_csv_export

__all__ = [
    "CSV_CATEGORIES",
    "CSV_COLUMNS",
    "build_csv",
    "build_snapshot",
    "encode_csv",
    "export_all_data",
    "generate_csv_export",
]
