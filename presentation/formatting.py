from __future__ import annotations

import math
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Any

from presentation.recency import parse_timestamp

# en-US abbreviations, independent of the process locale
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# wide enough for any finite float
_WIDE = Context(prec=400, rounding=ROUND_HALF_UP)


def _as_count(views: Any) -> float:
    if isinstance(views, bool) or not isinstance(views, (int, float)):
        return 0
    if not math.isfinite(views) or views < 0:
        return 0
    return views


def format_views(views: Any) -> str:
    """1500 -> "1.5k", 42 -> "42"."""
    n = _as_count(views)
    if n >= 1000:
        # ties round up (1250 -> "1.3k")
        tenths = _WIDE.divide(Decimal(n), 1000).quantize(Decimal("0.1"), context=_WIDE)
        return f"{tenths}k"
    return str(int(n))


def format_short_date(timestamp: Any) -> str:
    """"2024-01-05T10:00:00Z" -> "Jan 5, 2024"; unparseable text is returned as-is."""
    dt = parse_timestamp(timestamp)
    if dt is None:
        return timestamp if isinstance(timestamp, str) else ""
    return f"{_MONTHS[dt.month - 1]} {dt.day}, {dt.year}"
