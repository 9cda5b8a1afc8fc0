"""Prompt record schemas.

- RawPromptRecord: what the REST backend returns; coerced leniently, never raises
- PromptViewModel / PromptDetailViewModel: frozen, display-ready rows
- PromptCreate: payload of the create form, validated strictly
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

log = logging.getLogger(__name__)

PromptId = Union[str, int, None]

MIN_TITLE_LENGTH = 3
MIN_CONTENT_LENGTH = 20


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


class RawPromptRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: PromptId = None
    title: str = ""
    content: str = ""
    complexity: Optional[int] = None
    view_count: int = 0
    created_at: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, v):
        if v is None or isinstance(v, (str, int)):
            return v
        return str(v)

    @field_validator("title", "content", mode="before")
    @classmethod
    def _text(cls, v):
        return "" if v is None else str(v)

    @field_validator("complexity", mode="before")
    @classmethod
    def _complexity(cls, v):
        return _as_int(v)

    @field_validator("view_count", mode="before")
    @classmethod
    def _view_count(cls, v):
        n = _as_int(v)
        return n if n and n > 0 else 0

    @field_validator("created_at", mode="before")
    @classmethod
    def _created_at(cls, v):
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, datetime):
            return v.isoformat()
        return str(v)

    @classmethod
    def coerce(cls, data: Any) -> "RawPromptRecord":
        """Boundary check for API payloads: bad shapes fall back to defaults."""
        if isinstance(data, cls):
            return data
        if not isinstance(data, Mapping):
            log.warning("Ignoring malformed prompt record of type %s", type(data).__name__)
            return cls()
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            log.warning("Prompt record %r failed validation (%s); using defaults.", data.get("id"), e)
            return cls(id=data.get("id") if isinstance(data.get("id"), (str, int)) else None)


class PromptViewModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: PromptId
    title: str
    description: str
    complexity_level: Optional[int]
    complexity_label: str
    views: int
    formatted_views: str
    date: str
    days_ago: int


class PromptDetailViewModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: PromptId
    title: str
    content: str
    complexity_level: Optional[int]
    complexity_text: str
    complexity_class: str
    complexity_color: str
    views: int
    formatted_views: str
    date: str
    created_at: Optional[str]
    days_ago: int


class PromptCreate(BaseModel):
    title: str = Field(min_length=MIN_TITLE_LENGTH)
    content: str = Field(min_length=MIN_CONTENT_LENGTH)
    complexity: int = Field(default=5, ge=1, le=10)

    @field_validator("title", "content", mode="before")
    @classmethod
    def _strip(cls, v):
        return v.strip() if isinstance(v, str) else v
