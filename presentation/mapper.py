"""Raw API prompt records -> frozen view models for the library and detail pages."""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, List, Optional

from models.prompt import PromptDetailViewModel, PromptViewModel, RawPromptRecord
from presentation.complexity import (
    complexity_class, complexity_color, complexity_label, complexity_style_label,
)
from presentation.formatting import format_short_date, format_views
from presentation.recency import days_since

log = logging.getLogger(__name__)


def map_prompt(raw: Any, now: Optional[datetime] = None) -> PromptViewModel:
    rec = RawPromptRecord.coerce(raw)
    views = rec.view_count or 0
    return PromptViewModel(
        id=rec.id,
        title=rec.title,
        description=rec.content,
        complexity_level=rec.complexity,
        complexity_label=complexity_label(rec.complexity),
        views=views,
        formatted_views=format_views(views),
        date=format_short_date(rec.created_at),
        days_ago=days_since(rec.created_at, now=now),
    )


def map_prompts(raws: Any, now: Optional[datetime] = None) -> List[PromptViewModel]:
    """Map a list response in input order. Anything but a list/tuple maps to []."""
    if not isinstance(raws, (list, tuple)):
        log.warning("Expected a list of prompts, got %s", type(raws).__name__)
        return []
    return [map_prompt(r, now=now) for r in raws]


def map_prompt_detail(raw: Any, now: Optional[datetime] = None) -> PromptDetailViewModel:
    rec = RawPromptRecord.coerce(raw)
    views = rec.view_count or 0
    return PromptDetailViewModel(
        id=rec.id,
        title=rec.title,
        content=rec.content,
        complexity_level=rec.complexity,
        complexity_text=complexity_style_label(rec.complexity),
        complexity_class=complexity_class(rec.complexity),
        complexity_color=complexity_color(complexity_style_label(rec.complexity)),
        views=views,
        formatted_views=format_views(views),
        date=format_short_date(rec.created_at),
        created_at=rec.created_at,
        days_ago=days_since(rec.created_at, now=now),
    )
