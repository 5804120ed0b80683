# -*- coding: utf-8 -*-
"""Shared pydantic bases for domain records and patches."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RecordModel(BaseModel):
    """Snake_case in Python, camelCase on the wire and in exports."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def dump(self) -> Dict[str, Any]:
        # Unset (None) fields are omitted rather than written as null.
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class PatchModel(RecordModel):
    """Every field optional; only fields explicitly set take part in an update."""

    def present_fields(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)
