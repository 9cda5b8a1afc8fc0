from __future__ import annotations

import math
from datetime import datetime, UTC
from typing import Any, Optional

# Tried after ISO 8601 fails
_FALLBACK_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d",
    "%b %d, %Y",
    "%B %d, %Y",
    "%m/%d/%Y",
)

SECONDS_PER_DAY = 86400


def parse_timestamp(text: Any) -> Optional[datetime]:
    """Parse an API timestamp; naive values are taken as UTC. None if unparseable."""
    if not isinstance(text, str) or not text.strip():
        return None
    raw = text.strip()
    try:
        dt = datetime.fromisoformat(raw)
    except ValueError:
        dt = None
        for fmt in _FALLBACK_FORMATS:
            try:
                dt = datetime.strptime(raw, fmt)
                break
            except ValueError:
                continue
        if dt is None:
            return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt


def days_since(timestamp: Any, now: Optional[datetime] = None) -> int:
    created = parse_timestamp(timestamp)
    if created is None:
        return 0
    now = now or datetime.now(UTC)
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    days = math.floor((now - created).total_seconds() / SECONDS_PER_DAY)
    # future timestamps count as "today"
    return max(days, 0)
