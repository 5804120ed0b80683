# -*- coding: utf-8 -*-
"""Column codecs and small date helpers shared by the repositories."""

from __future__ import annotations

import json
import logging
from datetime import date, datetime, timedelta, timezone
from typing import Any, Iterable, List, Optional, Tuple
from uuid import uuid4

from .errors import InvalidDate

logger = logging.getLogger(__name__)


def new_id() -> str:
    return str(uuid4())


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def today() -> str:
    """Local calendar date as YYYY-MM-DD."""
    return date.today().isoformat()


def parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value[:10])
    except ValueError as exc:
        raise InvalidDate(f"Invalid date {value!r}, expected YYYY-MM-DD") from exc


def shift_date(value: str, days: int) -> str:
    return (parse_date(value) + timedelta(days=days)).isoformat()


def date_range(start: str, end: str) -> List[str]:
    """Inclusive list of calendar dates; empty when end < start."""
    s = parse_date(start)
    e = parse_date(end)
    days: List[str] = []
    cur = s
    while cur <= e:
        days.append(cur.isoformat())
        cur = cur + timedelta(days=1)
    return days


def week_bounds(value: str) -> Tuple[str, str]:
    """Monday..Sunday week containing ``value``."""
    d = parse_date(value)
    monday = d - timedelta(days=d.weekday())
    return monday.isoformat(), (monday + timedelta(days=6)).isoformat()


def serialize_list_field(values: Optional[Iterable[str]]) -> Optional[str]:
    if values is None:
        return None
    return json.dumps(list(values), ensure_ascii=False)


def parse_list_field(raw: Optional[str]) -> Tuple[List[str], bool]:
    """Decode a JSON list column.

    Returns ``(values, True)`` on success and ``([], False)`` when the column is
    NULL or its text is not a JSON list. Callers treat ``not ok`` as "unset".
    """
    if raw is None or raw == "":
        return [], False
    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError):
        logger.debug("Ignoring malformed list column: %r", raw)
        return [], False
    if not isinstance(parsed, list):
        logger.debug("Ignoring non-list column value: %r", raw)
        return [], False
    return [str(v) for v in parsed if v is not None], True


def list_field_or_none(raw: Optional[str]) -> Optional[List[str]]:
    values, ok = parse_list_field(raw)
    return values if ok else None


def serialize_json_field(value: Any) -> Optional[str]:
    if value is None:
        return None
    return json.dumps(value, ensure_ascii=False)


def parse_json_field(raw: Optional[str]) -> Any:
    if not raw:
        return None
    try:
        return json.loads(raw)
    except (TypeError, ValueError):
        logger.debug("Ignoring malformed JSON column: %r", raw)
        return None


def to_flag(value: Optional[bool]) -> int:
    return 1 if value else 0
