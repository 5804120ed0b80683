# -*- coding: utf-8 -*-
"""Error taxonomy for the store.

Lookups that find nothing return ``None`` rather than raising. Unparseable
list columns are absorbed in :mod:`trackr.fields`. Storage failures and
malformed date arguments surface as exceptions.
"""

from __future__ import annotations


class TrackrError(Exception):
    """Base class for store errors."""


class StorageFault(TrackrError):
    """The embedded engine failed to open or execute a statement."""


class MigrationError(StorageFault):
    """A schema migration step failed; the store must not be used."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(f"Migration {name!r} failed: {message}")
        self.name = name


class ConstraintViolation(TrackrError):
    """A write violated a uniqueness, range, enumeration or foreign key rule."""


class InvalidDate(TrackrError, ValueError):
    """A calendar date argument is not a valid YYYY-MM-DD value."""
