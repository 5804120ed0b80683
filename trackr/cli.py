# -*- coding: utf-8 -*-
"""
Command line tool for the Trackr store.

Usage:
    python -m trackr.cli migrate
    python -m trackr.cli export-json [--out DIR]
    python -m trackr.cli export-csv <category> [--out DIR]
    python -m trackr.cli streak <habit_id>
    python -m trackr.cli tags
    python -m trackr.cli clear [-y]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .app_db import StoreHandle
from .config import settings
from .errors import TrackrError
from .export import CSV_CATEGORIES, export_all_data, generate_csv_export
from .habits.storage import HabitRepository
from .journal.storage import JournalRepository
from .migrations import applied_migrations


def _store(args: argparse.Namespace) -> StoreHandle:
    db_path = Path(args.db_path).expanduser() if args.db_path else settings.db_path
    return StoreHandle(db_path)


def _out_dir(args: argparse.Namespace) -> Optional[Path]:
    return Path(args.out).expanduser() if getattr(args, "out", None) else None


def cmd_migrate(args: argparse.Namespace) -> int:
    """Open the store (applying pending migrations) and list the ledger."""
    store = _store(args)
    try:
        conn = store.open()
        print(f"Database path: {store.db_path}")
        for migration in applied_migrations(conn):
            print(f"  {migration.name}  {migration.applied_at}")
    finally:
        store.close()
    return 0


def cmd_export_json(args: argparse.Namespace) -> int:
    store = _store(args)
    try:
        fp = export_all_data(store, _out_dir(args))
    finally:
        store.close()
    print(f"Exported snapshot to {fp}")
    return 0


def cmd_export_csv(args: argparse.Namespace) -> int:
    store = _store(args)
    try:
        fp = generate_csv_export(store, args.category, _out_dir(args))
    finally:
        store.close()
    print(f"Exported {args.category} to {fp}")
    return 0


def cmd_streak(args: argparse.Namespace) -> int:
    store = _store(args)
    try:
        repo = HabitRepository(store)
        habit = repo.get_by_id(args.habit_id)
        if not habit:
            print(f"Error: Habit not found: {args.habit_id}")
            return 1
        streak = repo.get_streak(habit.id, args.today)
    finally:
        store.close()
    print(f"{habit.name}: {streak} day(s)")
    return 0


def cmd_tags(args: argparse.Namespace) -> int:
    store = _store(args)
    try:
        tags = JournalRepository(store).get_all_tags()
    finally:
        store.close()
    if not tags:
        print("No tags.")
    for tag in tags:
        print(tag)
    return 0


def cmd_clear(args: argparse.Namespace) -> int:
    """Delete all tracked data; the schema stays in place."""
    if not args.yes:
        confirm = input("Are you sure you want to delete all tracked data? [y/N] ")
        if confirm.lower() != "y":
            print("Cancelled.")
            return 0

    store = _store(args)
    try:
        store.clear_all_data()
    finally:
        store.close()
    print("All data cleared.")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Trackr data store CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--db-path",
        help="Path to the SQLite store (default: $TRACKR_DB_PATH or data/trackr.db)",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level (default: $TRACKR_LOG_LEVEL or INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("migrate", help="Apply pending migrations")

    json_parser = subparsers.add_parser("export-json", help="Write a full JSON snapshot")
    json_parser.add_argument("--out", help="Output directory (default: $TRACKR_EXPORT_DIR)")

    csv_parser = subparsers.add_parser("export-csv", help="Write one category as CSV")
    csv_parser.add_argument("category", choices=CSV_CATEGORIES)
    csv_parser.add_argument("--out", help="Output directory (default: $TRACKR_EXPORT_DIR)")

    streak_parser = subparsers.add_parser("streak", help="Show a habit's current streak")
    streak_parser.add_argument("habit_id")
    streak_parser.add_argument("--today", help="Override today's date (YYYY-MM-DD)")

    subparsers.add_parser("tags", help="List distinct journal tags")

    clear_parser = subparsers.add_parser("clear", help="Delete all tracked data")
    clear_parser.add_argument(
        "-y", "--yes",
        action="store_true",
        help="Skip confirmation",
    )

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=str(args.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    commands = {
        "migrate": cmd_migrate,
        "export-json": cmd_export_json,
        "export-csv": cmd_export_csv,
        "streak": cmd_streak,
        "tags": cmd_tags,
        "clear": cmd_clear,
    }

    try:
        return commands[args.command](args)
    except TrackrError as exc:
        print(f"Error: {exc}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
